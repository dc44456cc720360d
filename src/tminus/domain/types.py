"""Core time types and the timezone collaborator contracts.

An *instant* is an ``int`` count of milliseconds since the Unix epoch.
Wall-clock fields (:class:`LocalDateTime`) only become an instant once they
are resolved through a zone's :class:`ZoneRules`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

Instant = int

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR


@dataclass(frozen=True, slots=True)
class LocalDateTime:
    """Wall-clock fields as read on a clock in some zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0
    millisecond: int = 0
    # 1 selects the second occurrence of a repeated wall time.
    fold: int = 0

    def isoformat(self) -> str:
        """``YYYY-MM-DDTHH:MM:SS`` (milliseconds appended when non-zero)."""
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.millisecond:
            text += f".{self.millisecond:03d}"
        return text


@runtime_checkable
class ZoneRules(Protocol):
    """Conversion rules between wall-clock fields and instants for one zone."""

    @property
    def key(self) -> str: ...

    def local_to_instant(self, local: LocalDateTime) -> Instant: ...

    def instant_to_local(self, instant: Instant) -> LocalDateTime: ...


class TimeZoneCatalog(Protocol):
    """Lookup of zone rules keyed by IANA-style identifiers."""

    def lookup(self, zone_id: str) -> ZoneRules | None: ...

    def known_ids(self) -> list[str]: ...
