"""
Rich console output for mtrtrace - with per-hop printing
"""

from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .. import __version__
from ..models import HopRecord, TraceResult


RULE_WIDTH = 80


class ConsoleOutput:
    """
    Rich console output for mtr results.

    Prints a header panel, one line per hop as hops arrive,
    and a closing summary.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._table_header_printed = False

    def print_header(self, target: str, args: list[str]):
        """Print trace header"""
        content = Text()
        content.append("mtrtrace", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Target: ", style="dim")
        content.append(target, style="bold")
        content.append("\n")
        content.append(f"mtr {' '.join(args)}", style="dim")

        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)
        self.console.print()

    def print_table_header(self):
        """Print the table header row once"""
        if self._table_header_printed:
            return

        # Column order: # | Host | Samples | RTT min/avg/max
        header = Text()
        header.append(f"{'#':>3}  ", style="bold magenta")
        header.append(f"{'Host':<40}  ", style="bold magenta")
        header.append(f"{'Sent':>4}  ", style="bold magenta")
        header.append(f"{'RTT ms (min / avg / max)':^26}", style="bold magenta")

        self.console.print("-" * RULE_WIDTH)
        self.console.print(header)
        self.console.print("-" * RULE_WIDTH)
        self._table_header_printed = True

    def print_hop(self, hop: HopRecord):
        """Print a single hop"""
        self.print_table_header()

        line = Text()
        line.append(f"{hop.number:>3}  ", style="dim")
        line.append(f"{self._format_host(hop):<40}  ",
                    style="" if hop.responded else "yellow")
        line.append(f"{len(hop.rtts):>4}  ")
        line.append(f"{self._format_rtt(hop):^26}")

        self.console.print(line)

    def print_separator(self):
        """Print table separator"""
        self.console.print("-" * RULE_WIDTH)

    def print_summary(self, result: TraceResult):
        """Print one-line summary for the trace"""
        if result.reached:
            line = f"[green]Reached[/] [bold]{result.target}[/] in {result.total_hops} hops"
            last_avg = result.hops[-1].rtt_avg
            if last_avg is not None:
                line += f", {last_avg:.3f} ms avg"
            self.console.print(line)
        elif result.hops:
            self.console.print(
                f"[red]Did not reach[/] [bold]{result.target}[/] "
                f"({result.total_hops} hops seen)"
            )
        else:
            self.console.print(f"[red]No hops reported for[/] [bold]{result.target}[/]")

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False)

    def _format_host(self, hop: HopRecord) -> str:
        """Hostname with address, address alone, or ??? for silent hops"""
        if not hop.ip:
            return "???"
        if hop.hostname:
            return f"{hop.hostname} ({hop.ip})"
        return hop.ip

    def _format_rtt(self, hop: HopRecord) -> str:
        """Format RTT values"""
        if hop.rtt_avg is None:
            return "* / * / *"
        return f"{hop.rtt_min:.3f} / {hop.rtt_avg:.3f} / {hop.rtt_max:.3f}"
