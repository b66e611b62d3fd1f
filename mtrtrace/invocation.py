"""
mtr argument construction
"""

import ipaddress
from typing import Optional

from .config import MtrOptions
from .errors import InvalidTargetError


IPV4 = 'ipv4'
IPV6 = 'ipv6'

ADDRESS_FAMILY_FLAGS = {
    IPV4: '-4',
    IPV6: '-6',
}


def classify_target(target: str) -> str:
    """
    Classify a target address.

    Args:
        target: IPv4 or IPv6 literal (hostnames are rejected)

    Returns:
        IPV4 or IPV6

    Raises:
        InvalidTargetError: if target is not an IP literal
    """
    if not isinstance(target, str):
        raise InvalidTargetError(target)

    try:
        addr = ipaddress.ip_address(target)
    except ValueError:
        raise InvalidTargetError(target) from None

    return IPV4 if addr.version == 4 else IPV6


def build_args(target: str, options: Optional[MtrOptions] = None) -> list[str]:
    """
    Build the mtr argument list for a target.

    Args:
        target: IPv4 or IPv6 literal, appended last
        options: Probe options (defaults when None)

    Returns:
        Argument list, without the executable itself
    """
    options = options or MtrOptions()
    address_type = classify_target(target)

    args = [ADDRESS_FAMILY_FLAGS[address_type]]

    if not options.resolve_dns:
        args.append('--no-dns')

    args.append('--raw')

    if options.report_cycles is not None:
        args.extend(['--report-cycles', str(options.report_cycles)])

    args.extend(['--psize', str(options.packet_len)])
    args.append(target)

    return args
