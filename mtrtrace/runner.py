"""
Process runners

A runner executes a command to completion and reports its captured
stdout, stderr and exit status. Abnormal terminations are folded into
the exit code so callers only ever branch on ProcessResult.ok.
"""

import asyncio
import contextlib
import subprocess
from abc import ABC, abstractmethod
from typing import Optional

from .log import get_logger
from .models import ProcessResult


log = get_logger('runner')

# Shell convention for "command not found"
EXIT_NOT_FOUND = 127


def _not_found(command: str) -> ProcessResult:
    message = f"{command}: command not found"
    log.warning(message)
    return ProcessResult(stderr=message.encode(), exit_code=EXIT_NOT_FOUND)


def _timed_out(command: str, timeout: float) -> ProcessResult:
    message = f"{command}: killed after {timeout:g}s timeout"
    log.warning(message)
    return ProcessResult(stderr=message.encode(), exit_code=-9)


async def _reap(proc: asyncio.subprocess.Process):
    with contextlib.suppress(ProcessLookupError):
        proc.kill()
    await proc.wait()


class ProcessRunner(ABC):
    """Abstract base class for process execution"""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    @abstractmethod
    def run(self, command: str, args: list[str]) -> ProcessResult:
        """
        Run command with args and wait for it to exit.

        Args:
            command: Executable name or path
            args: Arguments, not including the executable

        Returns:
            ProcessResult with captured output and exit code
        """
        pass

    async def run_async(self, command: str, args: list[str]) -> ProcessResult:
        """Run without blocking the event loop (worker thread by default)"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.run, command, args)


class SubprocessRunner(ProcessRunner):
    """Runs commands as local child processes"""

    def run(self, command: str, args: list[str]) -> ProcessResult:
        log.debug("Running %s %s", command, ' '.join(args))

        try:
            proc = subprocess.run(
                [command, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            return _not_found(command)
        except subprocess.TimeoutExpired:
            return _timed_out(command, self.timeout)

        log.debug("%s exited with status %d", command, proc.returncode)
        return ProcessResult(
            stdout=proc.stdout or b'',
            stderr=proc.stderr or b'',
            exit_code=proc.returncode,
        )

    async def run_async(self, command: str, args: list[str]) -> ProcessResult:
        log.debug("Running %s %s", command, ' '.join(args))

        try:
            proc = await asyncio.create_subprocess_exec(
                command, *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return _not_found(command)

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            return _timed_out(command, self.timeout)
        finally:
            # Also runs when the awaiting task is cancelled
            if proc.returncode is None:
                await _reap(proc)

        log.debug("%s exited with status %d", command, proc.returncode)
        return ProcessResult(
            stdout=stdout or b'',
            stderr=stderr or b'',
            exit_code=proc.returncode,
        )
