"""Shared pytest fixtures and test helpers for tminus tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from tminus.domain.event import Event, event_at_instant, make_event
from tminus.domain.result import Ok, Result, err
from tminus.domain.types import Instant
from tminus.infrastructure.timezones import ZoneInfoCatalog

# 2026-01-01T00:00:00Z
NEW_YEAR_2026_UTC = 1_767_225_600_000

TEST_ZONES = [
    "UTC",
    "Europe/Berlin",
    "America/New_York",
    "Asia/Tokyo",
    "Asia/Kolkata",
]


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: Instant) -> None:
        self.now = now

    def now_millis(self) -> Instant:
        return self.now


def fixed_detector(zone_id: str | None):
    """Zone detector stub: ``Ok(zone_id)``, or a failure when None."""

    def detect() -> Result[str]:
        if zone_id is None:
            return err("no zone here")
        return Ok(zone_id)

    return detect


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(scope="session")
def catalog() -> ZoneInfoCatalog:
    """Catalog restricted to a handful of well-known zones."""
    return ZoneInfoCatalog(TEST_ZONES)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NEW_YEAR_2026_UTC)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no tminus.toml, user config or TMINUS_* overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TMINUS_CONFIG", raising=False)
    monkeypatch.delenv("TMINUS_URL__BASE", raising=False)
    monkeypatch.delenv("TMINUS_ZONES__DEFAULT_ZONE", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def local_event(
    catalog: ZoneInfoCatalog,
    name: str,
    day: str,
    hour: int,
    minute: int,
    zone_id: str,
) -> Event:
    """Build an event the way a submitted form would."""
    rules = catalog.lookup(zone_id)
    assert rules is not None, zone_id
    return make_event(name, date.fromisoformat(day), hour, minute, (zone_id, rules))


def instant_event(catalog: ZoneInfoCatalog, name: str, instant: Instant, zone_id: str = "UTC") -> Event:
    """Build an event sitting exactly at *instant*."""
    rules = catalog.lookup(zone_id)
    assert rules is not None, zone_id
    return event_at_instant(name, zone_id, rules, instant)
