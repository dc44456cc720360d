"""Countdown arithmetic: signed remaining time decomposed into D/H/M/S.

Decomposition uses truncating division: quotient and remainder both carry
the sign of the millisecond delta. An event 90,061,001 ms away reads
``1d 1h 1m 1s``; one 90,061,001 ms past reads ``-1d -1h -1m -1s``.

Less than one second past reads all zeros, exactly like less than one
second to go. :func:`diff` keeps that literal behaviour; use
:class:`Countdown` (``elapsed``) when the sign matters.
"""

from __future__ import annotations

from dataclasses import dataclass

from tminus.domain.event import Event, absolute_instant
from tminus.domain.types import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    Instant,
)


@dataclass(frozen=True, slots=True)
class Diff:
    days: int
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True, slots=True)
class Countdown:
    """A diff together with the raw delta it was decomposed from."""

    event: Event
    delta_ms: int
    diff: Diff

    @property
    def elapsed(self) -> bool:
        """True once the event's instant is strictly in the past."""
        return self.delta_ms < 0


def _truncdivmod(value: int, divisor: int) -> tuple[int, int]:
    """``divmod`` rounding toward zero; the remainder takes *value*'s sign."""
    quotient = abs(value) // divisor
    remainder = abs(value) % divisor
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


def decompose(delta_ms: int) -> Diff:
    days, rest = _truncdivmod(delta_ms, MILLIS_PER_DAY)
    hours, rest = _truncdivmod(rest, MILLIS_PER_HOUR)
    minutes, rest = _truncdivmod(rest, MILLIS_PER_MINUTE)
    seconds, _ = _truncdivmod(rest, MILLIS_PER_SECOND)
    return Diff(days=days, hours=hours, minutes=minutes, seconds=seconds)


def delta_millis(now: Instant, event: Event) -> int:
    """Milliseconds from *now* until the event; negative once it has passed."""
    return absolute_instant(event) - now


def diff(now: Instant, event: Event) -> Diff:
    return decompose(delta_millis(now, event))


def countdown(now: Instant, event: Event) -> Countdown:
    delta = delta_millis(now, event)
    return Countdown(event=event, delta_ms=delta, diff=decompose(delta))
