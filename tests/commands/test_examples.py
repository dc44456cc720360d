"""Tests for the --examples flag on every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from tminus.cli import cli


@pytest.mark.parametrize("command", ["show", "add", "remove", "watch", "zones"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert result.output.startswith("Examples for '")
    assert f"tminus {command}" in result.output


@pytest.mark.parametrize("command", ["show", "add", "remove", "watch", "zones"])
def test_help_mentions_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
