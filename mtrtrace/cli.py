import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config import DEFAULT_MTR_BIN, DEFAULT_PACKET_LEN, MtrOptions
from .errors import ConfigurationError, MtrExecutionError
from .log import setup_logging
from .mtr import Mtr
from .output import ConsoleOutput, JsonExporter


@click.command()
@click.argument('target')
@click.option('-s', '--psize', 'packet_len', default=DEFAULT_PACKET_LEN, type=int,
              help=f'Probe packet size in bytes (default: {DEFAULT_PACKET_LEN})')
@click.option('--dns/--no-dns', default=False,
              help='Let mtr resolve hop hostnames (default: disabled)')
@click.option('-c', '--report-cycles', type=int,
              help='Number of measurement cycles before mtr exits')
@click.option('--mtr-bin', default=DEFAULT_MTR_BIN, envvar='MTRTRACE_MTR_BIN',
              show_envvar=True, help='mtr executable to run (default: mtr)')
@click.option('--timeout', type=float,
              help='Kill mtr after this many seconds')
@click.option('--json', 'json_path', type=click.Path(dir_okay=False),
              help='Export results to JSON file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--log-file', type=click.Path(dir_okay=False),
              help='Write a debug log to this file')
@click.version_option(version=__version__)
def main(target: str, packet_len: int, dns: bool, report_cycles: Optional[int],
         mtr_bin: str, timeout: Optional[float], json_path: Optional[str],
         debug: bool, log_file: Optional[str]):
    """
    mtrtrace - per-hop latency report from mtr.

    Trace route to TARGET (IPv4 or IPv6 address) using mtr in raw
    mode and print every hop with its round-trip times.

    Examples:

        mtrtrace 8.8.8.8

        mtrtrace 2001:4860:4860::8888 -c 5 --dns

        mtrtrace 1.1.1.1 --json output.json
    """
    setup_logging(debug=debug, log_file=log_file)
    console = Console()

    try:
        options = MtrOptions(
            packet_len=packet_len,
            resolve_dns=dns,
            report_cycles=report_cycles,
            mtr_bin=mtr_bin,
            timeout=timeout
        )
        mtr = Mtr(target, options)
    except ConfigurationError as e:
        raise click.BadParameter(str(e)) from e

    output = ConsoleOutput(console)
    output.print_header(target=target, args=mtr.args)

    try:
        result = mtr.trace(on_hop=output.print_hop)
    except MtrExecutionError as e:
        output.print_error(e.stderr.strip() or f"mtr exited with status {e.exit_code}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)

    if result.hops:
        output.print_separator()
    output.print_summary(result)

    if json_path:
        json_file = Path(json_path)
        JsonExporter().export(result, json_file)
        console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")


if __name__ == '__main__':
    main()
