"""CountdownService: show, add, remove and watch events stored in a URL.

Each operation starts a fresh :class:`~tminus.runtime.host.Host` from the
given URL and drives the reducer with the same messages an interactive
front end would send, so the CLI exercises exactly the same state
transitions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from tminus.domain.form import combine, form_errors
from tminus.domain.result import Err
from tminus.domain.types import Instant
from tminus.runtime.messages import (
    DateChanged,
    Delete,
    HourChanged,
    MinuteChanged,
    NameChanged,
    Submit,
    Tick,
    ZoneChanged,
)
from tminus.runtime.model import Model, countdowns
from tminus.runtime.update import DEFAULT_TICK_INTERVAL_MS
from tminus.services._helpers import countdown_row
from tminus.services.base import BaseService
from tminus.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)


def _rows(model: Model) -> list[dict[str, Any]]:
    return [countdown_row(i, item) for i, item in enumerate(countdowns(model))]


class CountdownService(BaseService):
    """Operations on the event list carried by a URL."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def show(self, url: str, *, at: Instant | None = None) -> ServiceResult:
        """Decode *url* and compute every countdown at *at* (default: now)."""
        host = self._host()
        host.start(url, detect_zone=False)
        model = host.send(Tick(at)) if at is not None else host.tick()
        rows = _rows(model)
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "url": host.url,
                "now": model.current_time,
                "count": len(rows),
                "items": rows,
            },
        )

    def watch(
        self,
        url: str,
        *,
        ticks: int | None = None,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        on_frame: Callable[[list[dict[str, Any]]], None] | None = None,
    ) -> ServiceResult:
        """Recompute countdowns every *interval_ms* until *ticks* have passed."""
        host = self._host()
        host.start(url, tick_interval_ms=interval_ms, detect_zone=False)

        def frame(model: Model) -> None:
            if on_frame is not None:
                on_frame(_rows(model))

        model = host.run(ticks=ticks, on_frame=frame)
        rows = _rows(model)
        return ServiceResult(
            ok=True,
            op="watch",
            data={"url": host.url, "now": model.current_time, "count": len(rows), "items": rows},
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_event(
        self,
        url: str,
        *,
        name: str,
        date: str,
        hour: str,
        minute: str,
        zone: str | None = None,
    ) -> ServiceResult:
        """Append an event to *url* through the form; returns the new URL.

        With *zone* None the local zone is detected and used instead.
        """
        op = "add_event"
        warnings: list[str] = []
        host = self._host()
        model = host.start(url, detect_zone=zone is None)
        if zone is None and model.detected_zone is None:
            warnings.append("No zone given and the local time zone could not be detected.")

        for message in (
            NameChanged(name),
            DateChanged(date),
            HourChanged(str(hour)),
            MinuteChanged(str(minute)),
        ):
            model = host.send(message)
        if zone is not None:
            model = host.send(ZoneChanged(zone))

        result = combine(model.form)
        if isinstance(result, Err):
            return failure(
                op,
                "INVALID_EVENT",
                " ".join(result.errors),
                errors=list(result.errors),
                fields=form_errors(model.form),
                warnings=warnings,
            )

        event = result.value
        before = len(model.events)
        model = host.send(Submit())
        logger.debug("Added event %r; %d -> %d events", event.name, before, len(model.events))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "url": host.url,
                "name": event.name,
                "zone": event.time_zone_id,
                "local": event.local.isoformat(),
                "count": len(model.events),
            },
            warnings=warnings,
        )

    def remove_event(self, url: str, index: int) -> ServiceResult:
        """Drop the event at *index* (0-based) and return the new URL."""
        op = "remove_event"
        host = self._host()
        model = host.start(url, detect_zone=False)
        if not 0 <= index < len(model.events):
            return failure(
                op,
                "INDEX_OUT_OF_RANGE",
                f"No event at index {index} (have {len(model.events)})",
                index=index,
                count=len(model.events),
            )
        removed = model.events[index]
        model = host.send(Delete(index))
        return ServiceResult(
            ok=True,
            op=op,
            data={"url": host.url, "removed": removed.name, "count": len(model.events)},
        )
