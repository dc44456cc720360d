"""Process-wide state, owned exclusively by whoever runs the reducer."""

from __future__ import annotations

from dataclasses import dataclass

from tminus.domain.countdown import Countdown, countdown
from tminus.domain.event import Event
from tminus.domain.form import EventForm
from tminus.domain.types import Instant, ZoneRules


@dataclass(frozen=True, slots=True)
class Model:
    """Everything the presentation layer needs to render a frame.

    Attributes:
        current_time: Instant of the last tick, or None before the first.
        detected_zone: ``(zone_id, rules)`` from local detection, if any.
        events: Decoded from the current URL; order is URL order.
        form: The event being composed.
        path: URL without its query; new URLs are built on it.
    """

    current_time: Instant | None
    detected_zone: tuple[str, ZoneRules] | None
    events: tuple[Event, ...]
    form: EventForm
    path: str = ""


def countdowns(model: Model) -> list[Countdown]:
    """Countdowns for every event against the last tick (empty before it)."""
    if model.current_time is None:
        return []
    return [countdown(model.current_time, event) for event in model.events]
