"""Tests for the show CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tminus.cli import cli

LAUNCH = "https://example.org/?Launch=1767225600000%40UTC"


@pytest.mark.usefixtures("_isolated_config")
class TestShowCommand:
    def test_table_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", LAUNCH, "--at", "2025-12-30T22:58:58.999Z"])
        assert result.exit_code == 0
        assert "Launch" in result.stdout
        assert "1d 01h 01m 01s" in result.stdout
        assert "1 event" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", LAUNCH, "--at", "2026-01-01T00:00:00Z"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "show"
        assert data["data"]["now"] == 1_767_225_600_000
        assert data["data"]["items"][0]["delta_ms"] == 0

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", LAUNCH, "--at", "2026-01-02T00:00:00"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Launch\t-1d 00h 00m 00s"

    def test_no_events(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "https://example.org/"])
        assert result.exit_code == 0
        assert "No events in URL." in result.stdout

    def test_bad_instant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", LAUNCH, "--at", "soon"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_INSTANT"

    def test_url_from_env_base(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TMINUS_URL__BASE", LAUNCH)
        result = cli_runner.invoke(cli, ["--json", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["count"] == 1

    def test_display_config_hides_seconds(self, cli_runner: CliRunner) -> None:
        with open("tminus.toml", "w", encoding="utf-8") as fh:
            fh.write("[display]\nshow_seconds = false\nshow_local_time = false\n")
        result = cli_runner.invoke(cli, ["show", LAUNCH, "--at", "2025-12-30T22:58:58.999Z"])
        assert result.exit_code == 0
        assert "1d 01h 01m" in result.stdout
        assert "01s" not in result.stdout
        assert "Local time" not in result.stdout
