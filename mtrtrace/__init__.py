"""
mtrtrace - structured per-hop latency reports from mtr

Runs the mtr probe in raw output mode and turns its line-oriented
records into an ordered list of hops with their round-trip times.
"""

__version__ = "1.0.0"
__author__ = "mtrtrace"

from .config import MtrOptions
from .errors import (
    MtrError,
    ConfigurationError,
    InvalidTargetError,
    InvalidOptionError,
    MtrExecutionError,
)
from .models import HopRecord, ProcessResult, TraceResult
from .mtr import Mtr
from .parser import parse_raw_output

__all__ = [
    'Mtr', 'MtrOptions', 'HopRecord', 'ProcessResult', 'TraceResult',
    'parse_raw_output', 'MtrError', 'ConfigurationError',
    'InvalidTargetError', 'InvalidOptionError', 'MtrExecutionError',
]
