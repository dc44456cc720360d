"""TimeZoneCatalog backed by ``zoneinfo`` and the ``tzdata`` package.

Also hosts the one-shot local zone detection used for the "here" default.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from tminus.domain.result import Ok, Result, err
from tminus.domain.types import Instant, LocalDateTime, TimeZoneCatalog

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

LOCALTIME_PATH = Path("/etc/localtime")
TIMEZONE_FILE = Path("/etc/timezone")


@dataclass(frozen=True, slots=True)
class ZoneInfoRules:
    """ZoneRules for a single ``ZoneInfo`` zone.

    ``fold`` round-trips through :class:`LocalDateTime`, so an instant in
    the repeated hour of an overlap maps back to itself. Form-built times
    carry ``fold=0``: gaps and overlaps resolve to the earlier offset.
    """

    zone: ZoneInfo

    @property
    def key(self) -> str:
        return str(self.zone.key)

    def local_to_instant(self, local: LocalDateTime) -> Instant:
        wall = datetime(
            local.year,
            local.month,
            local.day,
            local.hour,
            local.minute,
            local.second,
            local.millisecond * 1000,
            tzinfo=self.zone,
            fold=local.fold,
        )
        return (wall - _EPOCH) // _ONE_MS

    def instant_to_local(self, instant: Instant) -> LocalDateTime:
        wall = (_EPOCH + timedelta(milliseconds=instant)).astimezone(self.zone)
        return LocalDateTime(
            year=wall.year,
            month=wall.month,
            day=wall.day,
            hour=wall.hour,
            minute=wall.minute,
            second=wall.second,
            millisecond=wall.microsecond // 1000,
            fold=wall.fold,
        )


@functools.cache
def _available_ids() -> frozenset[str]:
    return frozenset(available_timezones())


class ZoneInfoCatalog:
    """Catalog of IANA zones.

    Args:
        zone_ids: Restrict the catalog to these identifiers. Defaults to
            every zone ``zoneinfo`` can find (system data or ``tzdata``).
    """

    def __init__(self, zone_ids: Iterable[str] | None = None) -> None:
        self._ids = frozenset(zone_ids) if zone_ids is not None else _available_ids()

    def lookup(self, zone_id: str) -> ZoneInfoRules | None:
        if zone_id not in self._ids:
            return None
        try:
            return ZoneInfoRules(ZoneInfo(zone_id))
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("Zone %s listed but not loadable", zone_id)
            return None

    def known_ids(self) -> list[str]:
        return sorted(self._ids)


# --- Local zone detection ---


def _zone_from_path(path: Path) -> str | None:
    """Extract ``Area/City`` from a path containing a ``zoneinfo`` directory."""
    parts = path.parts
    if "zoneinfo" not in parts:
        return None
    index = len(parts) - 1 - parts[::-1].index("zoneinfo")
    tail = parts[index + 1 :]
    return "/".join(tail) or None


def detect_local_zone(
    catalog: TimeZoneCatalog,
    *,
    environ: Mapping[str, str] | None = None,
    localtime_path: Path = LOCALTIME_PATH,
    timezone_file: Path = TIMEZONE_FILE,
) -> Result[str]:
    """Find the host's IANA zone id.

    Checks, in order: the ``TZ`` environment variable, the target of the
    ``/etc/localtime`` symlink, and ``/etc/timezone``. Only ids known to
    *catalog* are accepted.
    """
    env = os.environ if environ is None else environ
    candidates: list[str] = []

    tz_var = env.get("TZ", "").strip().removeprefix(":")
    if tz_var:
        candidates.append(tz_var)

    if localtime_path.is_symlink():
        from_link = _zone_from_path(localtime_path.resolve())
        if from_link:
            candidates.append(from_link)

    if timezone_file.is_file():
        try:
            content = timezone_file.read_text(encoding="utf-8").strip()
        except OSError:
            logger.debug("Cannot read %s", timezone_file, exc_info=True)
        else:
            if content:
                candidates.append(content)

    for candidate in candidates:
        if catalog.lookup(candidate) is not None:
            logger.debug("Detected local zone %s", candidate)
            return Ok(candidate)

    return err("Could not determine the local time zone.")
