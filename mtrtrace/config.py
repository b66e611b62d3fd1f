"""
Probe options for mtrtrace
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidOptionError


DEFAULT_PACKET_LEN = 60  # bytes
DEFAULT_MTR_BIN = 'mtr'


@dataclass
class MtrOptions:
    """
    Options controlling a single mtr run.

    Attributes:
        packet_len: Probe payload size in bytes (--psize)
        resolve_dns: Ask mtr to resolve hop addresses to hostnames
        report_cycles: Measurement cycles before mtr exits (--report-cycles)
        mtr_bin: Executable to spawn
        timeout: Seconds before the runner kills mtr; None waits forever
    """
    packet_len: int = DEFAULT_PACKET_LEN
    resolve_dns: bool = False
    report_cycles: Optional[int] = None
    mtr_bin: str = DEFAULT_MTR_BIN
    timeout: Optional[float] = None

    def __post_init__(self):
        if not _positive_int(self.packet_len):
            raise InvalidOptionError(
                f"packet_len must be a positive integer, got {self.packet_len!r}"
            )
        if self.report_cycles is not None and not _positive_int(self.report_cycles):
            raise InvalidOptionError(
                f"report_cycles must be a positive integer, got {self.report_cycles!r}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidOptionError(
                f"timeout must be positive, got {self.timeout!r}"
            )
        if not self.mtr_bin:
            raise InvalidOptionError("mtr_bin must not be empty")


def _positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
