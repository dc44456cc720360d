"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from tminus.domain.countdown import Countdown
from tminus.domain.event import absolute_instant
from tminus.domain.result import Ok, Result, err

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_instant(text: str) -> Result[int]:
    """Parse an ISO 8601 timestamp into epoch milliseconds.

    Naive timestamps are read as UTC.

    Examples:
        >>> parse_instant("1970-01-01T00:00:01Z")
        Ok(value=1000)
    """
    try:
        moment = datetime.fromisoformat(text.strip())
    except ValueError:
        return err(f"Invalid ISO 8601 instant: {text!r}")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return Ok((moment - _EPOCH) // timedelta(milliseconds=1))


def countdown_row(index: int, item: Countdown) -> dict[str, Any]:
    """Flatten a countdown into the dict shape used in ServiceResult data."""
    event = item.event
    return {
        "index": index,
        "name": event.name,
        "zone": event.time_zone_id,
        "local": event.local.isoformat(),
        "instant": absolute_instant(event),
        "delta_ms": item.delta_ms,
        "days": item.diff.days,
        "hours": item.diff.hours,
        "minutes": item.diff.minutes,
        "seconds": item.diff.seconds,
        "elapsed": item.elapsed,
    }
