"""
Exceptions raised by mtrtrace
"""

from typing import Optional


class MtrError(Exception):
    """Base class for all mtrtrace errors"""


class ConfigurationError(MtrError, ValueError):
    """Raised at configuration time, before any process is started"""


class InvalidTargetError(ConfigurationError):
    """Target is neither an IPv4 nor an IPv6 literal"""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Target is not a valid IPv4 or IPv6 address: {target!r}")


class InvalidOptionError(ConfigurationError):
    """An MtrOptions field holds an unusable value"""


class MtrExecutionError(MtrError, RuntimeError):
    """
    The probe exited with a non-zero status.

    The captured standard error is kept verbatim in ``stderr``; the
    message carries the ``Error: `` prefix used by earlier releases.
    """

    def __init__(self, stderr: str, exit_code: Optional[int] = None):
        self.stderr = stderr
        self.exit_code = exit_code
        super().__init__(f"Error: {stderr}")
