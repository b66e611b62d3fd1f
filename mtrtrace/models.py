"""
Data models for mtrtrace
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


def _valid(rtts: list[float]) -> list[float]:
    return [r for r in rtts if r is not None and math.isfinite(r)]


@dataclass
class HopRecord:
    """One hop position on the path, with the RTT samples reported for it"""
    number: int
    ip: Optional[str] = None
    hostname: Optional[str] = None
    rtts: list[float] = field(default_factory=list)

    @property
    def responded(self) -> bool:
        return self.ip is not None

    @property
    def rtt_min(self) -> Optional[float]:
        valid = _valid(self.rtts)
        return min(valid) if valid else None

    @property
    def rtt_avg(self) -> Optional[float]:
        valid = _valid(self.rtts)
        return sum(valid) / len(valid) if valid else None

    @property
    def rtt_max(self) -> Optional[float]:
        valid = _valid(self.rtts)
        return max(valid) if valid else None

    def to_dict(self) -> dict:
        return {
            'number': self.number,
            'ip': self.ip,
            'hostname': self.hostname,
            'rtts': list(self.rtts),
        }


@dataclass
class ProcessResult:
    """What the process runner observed once the probe exited"""
    stdout: bytes = b''
    stderr: bytes = b''
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode('utf-8', errors='replace')

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode('utf-8', errors='replace')


@dataclass
class TraceResult:
    """Complete trace result"""
    target: str
    args: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)
    hops: list[HopRecord] = field(default_factory=list)

    @property
    def reached(self) -> bool:
        return bool(self.hops) and self.hops[-1].ip == self.target

    @property
    def total_hops(self) -> int:
        return len(self.hops)
