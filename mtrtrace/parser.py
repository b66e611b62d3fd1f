"""
Parser for mtr --raw output

Every record is one line of whitespace separated tokens:

    h <hop> <ip>          address that answered the hop
    p <hop> <usec>        one round-trip time, in microseconds
    d <hop> <hostname>    reverse DNS name of the hop address

Hop numbers are 0-based on the wire and 1-based in the parsed result.
Some mtr builds append extra tokens (a sequence number on `p` lines);
only the first three are read.
"""

from typing import Optional

from .log import get_logger
from .models import HopRecord


log = get_logger('parser')

HOST = 'h'
PING = 'p'
DNS = 'd'

RECORD_TYPES = (HOST, PING, DNS)

# mtr hop numbers are TTLs, so anything at or above this is garbage
MAX_HOPS = 256

# Stored in rtts when a `p` payload is not a microsecond count
RTT_PARSE_ERROR = float('nan')


def _parse_hop_number(token: str) -> Optional[int]:
    if token.isascii() and token.isdigit():
        number = int(token)
        if number < MAX_HOPS:
            return number
    return None


def _parse_rtt(token: str) -> float:
    """Convert a microsecond payload to milliseconds"""
    if token.isascii() and token.isdigit():
        return int(token) / 1000
    return RTT_PARSE_ERROR


def parse_raw_output(output: str, target: Optional[str] = None) -> list[HopRecord]:
    """
    Parse the complete stdout of a finished mtr --raw run.

    Malformed lines are skipped, never raised. Once an `h` record reports
    the target address, records for higher hop numbers are dropped, except
    further `h` records that also report the target (which raise the cutoff).

    Args:
        output: Captured stdout text, possibly empty
        target: Address mtr was pointed at; None disables the cutoff

    Returns:
        HopRecord list ordered by number, dense from 1 to the highest hop
    """
    hops: dict[int, HopRecord] = {}
    target_hop: Optional[int] = None
    skipped = 0

    for line in output.splitlines():
        tokens = line.strip().split()

        if len(tokens) < 3:
            if tokens:
                skipped += 1
            continue

        record_type, hop_token, data = tokens[0], tokens[1], tokens[2]
        hop_number = _parse_hop_number(hop_token)

        if record_type not in RECORD_TYPES or hop_number is None:
            skipped += 1
            continue

        is_target = record_type == HOST and target is not None and data == target

        if target_hop is not None and hop_number > target_hop and not is_target:
            skipped += 1
            continue

        if is_target and (target_hop is None or hop_number > target_hop):
            target_hop = hop_number

        hop = hops.get(hop_number)
        if hop is None:
            hop = hops[hop_number] = HopRecord(number=hop_number + 1)

        if record_type == HOST:
            hop.ip = data
        elif record_type == PING:
            hop.rtts.append(_parse_rtt(data))
        else:
            hop.hostname = data

    if skipped:
        log.debug("Skipped %d unusable line(s)", skipped)
    if target_hop is not None:
        log.debug("Target %s answered at hop %d", target, target_hop + 1)

    if not hops:
        return []

    return [
        hops.get(number) or HopRecord(number=number + 1)
        for number in range(max(hops) + 1)
    ]
