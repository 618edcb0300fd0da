"""Tests for the root cfurl CLI."""

import pytest
from click.testing import CliRunner

from cfurl import __version__
from cfurl.cli import cli
from cfurl.domain.catalog import COMMANDS


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "cfurl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "cfurl dns example.com" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["--no-open"], ["-c", "/tmp/cfurl.toml"]],
    ids=lambda flags: flags[0],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


# --- Commands registered ---


def test_every_catalog_command_is_registered() -> None:
    assert set(COMMANDS) <= set(cli.commands)


def test_listing_command_registered() -> None:
    assert "commands" in cli.commands


def test_help_lists_dashboard_commands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in ("dns", "security", "workers", "r2", "kv", "dash", "commands"):
        assert name in result.output
