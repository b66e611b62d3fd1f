"""Shared pytest fixtures"""

from collections import deque
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from mtrtrace.models import ProcessResult
from mtrtrace.runner import ProcessRunner


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakeRunner(ProcessRunner):
    """
    Returns scripted ProcessResults in order and records every call.
    Once the script runs out, every run exits 0 with no output.
    """

    def __init__(self, *results: ProcessResult):
        super().__init__()
        self.results = deque(results)
        self.calls = []

    def run(self, command, args):
        self.calls.append((command, list(args)))
        if self.results:
            return self.results.popleft()
        return ProcessResult()


@pytest.fixture
def fixture_text():
    """Load a raw mtr output fixture by file name"""
    return read_fixture


@pytest.fixture
def ok_runner():
    """Runner factory: exit 0 with the given fixture as stdout"""
    def make(name: str) -> FakeRunner:
        return FakeRunner(ProcessResult(stdout=read_fixture(name).encode(), exit_code=0))
    return make


@pytest.fixture
def failing_runner():
    """Runner that exits 1 with the resolve-failure fixture on stderr"""
    stderr = read_fixture("error_output_failed_to_resolve_hostname.txt").encode()
    return FakeRunner(ProcessResult(stderr=stderr, exit_code=1))


@pytest.fixture
def mock_console():
    """Create a console that captures output"""
    output = StringIO()
    console = Console(file=output, force_terminal=False, width=120)
    console._output = output
    return console
