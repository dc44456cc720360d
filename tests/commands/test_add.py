"""Tests for the add CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tminus.cli import cli

BASE = "https://example.org/"
FIELDS = ["--name", "Launch", "--date", "2026-01-01", "--hour", "0", "--minute", "0"]


@pytest.fixture
def _tokyo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZ", "Asia/Tokyo")


@pytest.mark.usefixtures("_isolated_config", "_tokyo")
class TestAddCommand:
    def test_quiet_prints_new_url(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "add", BASE, *FIELDS, "--zone", "UTC"])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"{BASE}?Launch=1767225600000%40UTC"

    def test_appends_to_existing_events(self, cli_runner: CliRunner) -> None:
        url = f"{BASE}?a=1%40UTC"
        result = cli_runner.invoke(cli, ["--json", "add", url, *FIELDS, "--zone", "UTC"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["url"] == f"{url}&Launch=1767225600000%40UTC"
        assert data["count"] == 2

    def test_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", BASE, *FIELDS, "--zone", "Europe/Berlin"])
        assert result.exit_code == 0
        assert "add_event" in result.stdout
        assert "url: https://example.org/?Launch=1767222000000%40Europe%2FBerlin" in result.stdout

    def test_detected_zone_used(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", BASE, *FIELDS])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["zone"] == "Asia/Tokyo"

    def test_default_zone_from_config(self, cli_runner: CliRunner) -> None:
        Path("tminus.toml").write_text('[zones]\ndefault_zone = "Asia/Kolkata"\n', encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "add", BASE, *FIELDS])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["zone"] == "Asia/Kolkata"

    def test_detection_disabled_requires_zone(self, cli_runner: CliRunner) -> None:
        Path("tminus.toml").write_text("[zones]\ndetect_local = false\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "add", BASE, *FIELDS])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["detail"]["fields"] == {"time_zone": ["Time zone is not valid."]}

    def test_every_invalid_field_reported(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["add", BASE, "--date", "2026-02-30", "--hour", "7", "--minute", "99", "--zone", "UTC"],
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Name must not be empty." in result.stderr
        assert "Invalid date." in result.stderr
        assert "Minute must be a value between 0 and 59" in result.stderr
        assert "Hour" not in result.stderr

    def test_url_base_from_config(self, cli_runner: CliRunner) -> None:
        Path("tminus.toml").write_text('[url]\nbase = "https://share.example/t"\n', encoding="utf-8")
        result = cli_runner.invoke(cli, ["-q", "add", *FIELDS, "--zone", "UTC"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "https://share.example/t?Launch=1767225600000%40UTC"
