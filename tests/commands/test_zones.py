"""Tests for the zones CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tminus.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestZonesCommand:
    def test_filter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "--filter", "berlin"])
        assert result.exit_code == 0
        assert result.stdout.strip().splitlines() == ["Europe/Berlin"]

    def test_json_listing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zones"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        ids = [item["id"] for item in data["items"]]
        assert "Asia/Tokyo" in ids
        assert data["count"] == len(ids)

    def test_here(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TZ", "America/New_York")
        result = cli_runner.invoke(cli, ["--json", "zones", "--here"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["zone"] == "America/New_York"
