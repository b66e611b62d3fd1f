"""
mtr traceroute orchestrator
"""

from datetime import datetime
from typing import Callable, Iterator, Optional

from .config import MtrOptions
from .errors import MtrExecutionError
from .invocation import build_args, classify_target
from .log import get_logger
from .models import HopRecord, ProcessResult, TraceResult
from .parser import parse_raw_output
from .runner import ProcessRunner, SubprocessRunner


log = get_logger('mtr')

HopCallback = Callable[[HopRecord], None]
EndCallback = Callable[[], None]
ErrorCallback = Callable[[MtrExecutionError], None]


class Mtr:
    """
    Traceroute to one target through mtr.

    The target is validated on construction, so an invalid address
    fails before any process is started. Each traceroute call spawns a
    fresh mtr process and parses its output once it has exited; calls
    share no state and may run concurrently.
    """

    def __init__(
        self,
        target: str,
        options: Optional[MtrOptions] = None,
        runner: Optional[ProcessRunner] = None
    ):
        self.address_type = classify_target(target)
        self.target = target
        self.options = options or MtrOptions()
        self.runner = runner or SubprocessRunner(timeout=self.options.timeout)

    @property
    def args(self) -> list[str]:
        return self.build_args()

    def build_args(self) -> list[str]:
        """mtr argument list for this target"""
        return build_args(self.target, self.options)

    def _collect(self, result: ProcessResult) -> list[HopRecord]:
        if not result.ok:
            log.warning("mtr to %s failed with exit code %d",
                        self.target, result.exit_code)
            raise MtrExecutionError(result.stderr_text, result.exit_code)

        hops = parse_raw_output(result.stdout_text, self.target)
        log.debug("Parsed %d hop(s) for %s", len(hops), self.target)
        return hops

    def _notify(
        self,
        result: ProcessResult,
        on_hop: Optional[HopCallback],
        on_end: Optional[EndCallback],
        on_error: Optional[ErrorCallback]
    ) -> list[HopRecord]:
        try:
            hops = self._collect(result)
        except MtrExecutionError as e:
            if on_error is None:
                raise
            on_error(e)
            return []

        if on_hop:
            for hop in hops:
                on_hop(hop)

        if on_end:
            on_end()

        return hops

    def traceroute(
        self,
        on_hop: Optional[HopCallback] = None,
        on_end: Optional[EndCallback] = None,
        on_error: Optional[ErrorCallback] = None
    ) -> list[HopRecord]:
        """
        Run mtr and report every hop.

        Args:
            on_hop: Called once per hop, in ascending hop number
            on_end: Called after the last hop
            on_error: Called instead of raising when mtr fails

        Returns:
            List of HopRecord (empty on failure)

        Raises:
            MtrExecutionError: mtr exited non-zero and on_error is None
        """
        result = self.runner.run(self.options.mtr_bin, self.build_args())
        return self._notify(result, on_hop, on_end, on_error)

    async def traceroute_async(
        self,
        on_hop: Optional[HopCallback] = None,
        on_end: Optional[EndCallback] = None,
        on_error: Optional[ErrorCallback] = None
    ) -> list[HopRecord]:
        """Same as traceroute(), awaiting the mtr process instead of blocking"""
        result = await self.runner.run_async(self.options.mtr_bin, self.build_args())
        return self._notify(result, on_hop, on_end, on_error)

    def hops(self) -> Iterator[HopRecord]:
        """
        Lazily run mtr and yield its hops.

        Nothing is spawned until the first item is requested. A failed run
        raises MtrExecutionError before any hop is yielded.
        """
        yield from self.traceroute()

    def trace(self, on_hop: Optional[HopCallback] = None) -> TraceResult:
        """Run mtr and wrap the hops with the target and arguments used"""
        args = self.build_args()
        timestamp = datetime.now()
        hops = self.traceroute(on_hop=on_hop)
        return TraceResult(
            target=self.target,
            args=args,
            timestamp=timestamp,
            hops=hops
        )
