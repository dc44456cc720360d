"""Tests for format_result mode selection."""

from __future__ import annotations

import json

from tminus.output.formatters import OutputSettings, format_result
from tminus.services.result import ServiceResult

RESULT = ServiceResult(ok=True, op="add_event", data={"url": "?a=1%40UTC", "name": "a"})


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        assert format_result(RESULT).startswith("OK")

    def test_json(self) -> None:
        payload = json.loads(format_result(RESULT, settings=OutputSettings(json_output=True)))
        assert payload["ok"] is True
        assert payload["op"] == "add_event"
        assert payload["data"]["url"] == "?a=1%40UTC"

    def test_quiet(self) -> None:
        assert format_result(RESULT, settings=OutputSettings(quiet=True)) == "?a=1%40UTC"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "add_event"
