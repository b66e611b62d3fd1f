"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import FakeRunner, read_fixture
from mtrtrace import __version__
from mtrtrace.cli import main
from mtrtrace.models import ProcessResult


@pytest.fixture
def cli():
    return CliRunner()


def _patched(runner):
    return patch("mtrtrace.mtr.SubprocessRunner", return_value=runner)


class TestCli:
    def test_version(self, cli):
        result = cli.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_trace(self, cli):
        runner = FakeRunner(ProcessResult(stdout=read_fixture("normal_output_to_8.8.8.8.txt").encode()))
        with _patched(runner):
            result = cli.invoke(main, ["8.8.8.8"])

        assert result.exit_code == 0, result.output
        assert "50.56.129.162" in result.output
        assert "Reached" in result.output
        assert "14 hops" in result.output
        assert runner.calls[0] == ("mtr", ["-4", "--no-dns", "--raw", "--psize", "60", "8.8.8.8"])

    def test_options_passed_to_mtr(self, cli):
        runner = FakeRunner()
        with _patched(runner):
            result = cli.invoke(main, ["::1", "-s", "100", "--dns", "-c", "5",
                                       "--mtr-bin", "/opt/mtr"])

        assert result.exit_code == 0, result.output
        assert runner.calls[0] == (
            "/opt/mtr", ["-6", "--raw", "--report-cycles", "5", "--psize", "100", "::1"]
        )

    def test_mtr_bin_from_environment(self, cli):
        runner = FakeRunner()
        with _patched(runner):
            result = cli.invoke(main, ["8.8.8.8"], env={"MTRTRACE_MTR_BIN": "/usr/local/bin/mtr"})

        assert result.exit_code == 0, result.output
        assert runner.calls[0][0] == "/usr/local/bin/mtr"

    def test_invalid_target(self, cli):
        runner = FakeRunner()
        with _patched(runner):
            result = cli.invoke(main, ["google.com"])

        assert result.exit_code == 2
        assert "not a valid IPv4 or IPv6 address" in result.output
        assert runner.calls == []

    def test_invalid_option(self, cli):
        result = cli.invoke(main, ["8.8.8.8", "--psize", "0"])
        assert result.exit_code == 2
        assert "packet_len" in result.output

    def test_mtr_failure(self, cli):
        stderr = read_fixture("error_output_failed_to_resolve_hostname.txt").encode()
        with _patched(FakeRunner(ProcessResult(stderr=stderr, exit_code=1))):
            result = cli.invoke(main, ["8.8.8.8"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Failed to resolve host" in result.output
        assert "Reached" not in result.output

    def test_json_export(self, cli, tmp_path):
        path = tmp_path / "trace.json"
        runner = FakeRunner(ProcessResult(stdout=read_fixture("normal_output_127.0.0.1.txt").encode()))
        with _patched(runner):
            result = cli.invoke(main, ["127.0.0.1", "--json", str(path)])

        assert result.exit_code == 0, result.output
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["target"] == "127.0.0.1"
        assert [hop["number"] for hop in data["hops"]] == [1, 2]
        assert data["hops"][1]["rtts"] == [0.028]

    def test_log_file(self, cli, tmp_path):
        log_file = tmp_path / "mtrtrace.log"
        runner = FakeRunner(ProcessResult(stdout=b"h 0 10.0.0.1\n"))
        with _patched(runner):
            result = cli.invoke(main, ["8.8.8.8", "--debug", "--log-file", str(log_file)])

        assert result.exit_code == 0, result.output
        assert "Parsed 1 hop(s) for 8.8.8.8" in log_file.read_text()
