"""The countdown target: a named wall-clock moment in a named zone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from tminus.domain.types import Instant, LocalDateTime, ZoneRules


@dataclass(frozen=True, slots=True)
class Event:
    """A named point in time.

    ``local`` is wall-clock, not absolute. The instant is derived from
    ``(local, zone_rules)`` on every call to :func:`absolute_instant` and
    is never stored.
    """

    name: str
    time_zone_id: str
    zone_rules: ZoneRules
    local: LocalDateTime


def make_event(
    name: str,
    day: date,
    hour: int,
    minute: int,
    zone: tuple[str, ZoneRules],
) -> Event:
    """Build an event from validated form values (seconds fixed at zero)."""
    zone_id, rules = zone
    return Event(
        name=name,
        time_zone_id=zone_id,
        zone_rules=rules,
        local=LocalDateTime(
            year=day.year,
            month=day.month,
            day=day.day,
            hour=hour,
            minute=minute,
        ),
    )


def absolute_instant(event: Event) -> Instant:
    """Resolve the event's wall-clock fields to epoch milliseconds."""
    return event.zone_rules.local_to_instant(event.local)


def event_at_instant(name: str, zone_id: str, rules: ZoneRules, instant: Instant) -> Event:
    """Build an event whose wall-clock fields are read from *instant* in *rules*."""
    return Event(
        name=name,
        time_zone_id=zone_id,
        zone_rules=rules,
        local=rules.instant_to_local(instant),
    )
