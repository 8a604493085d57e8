"""Tests for the root arbsign CLI."""

from click.testing import CliRunner

from arbsign import __version__
from arbsign.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "arbsign" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "-q", "-v", "--log-json", "--version"])
    assert result.exit_code == 0


def test_commands_registered() -> None:
    assert set(cli.commands) == {"sign", "verify", "typed-data", "schema"}
