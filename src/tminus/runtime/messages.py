"""Messages the host delivers to the reducer, and effects it hands back.

Both are plain frozen values. The reducer never performs an effect; the
:class:`~tminus.runtime.host.Host` does, then feeds the outcome back in as
a message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tminus.domain.types import Instant

# --- Messages ---


@dataclass(frozen=True, slots=True)
class Tick:
    now: Instant


@dataclass(frozen=True, slots=True)
class NameChanged:
    raw: str


@dataclass(frozen=True, slots=True)
class DateChanged:
    raw: str


@dataclass(frozen=True, slots=True)
class HourChanged:
    raw: str


@dataclass(frozen=True, slots=True)
class MinuteChanged:
    raw: str


@dataclass(frozen=True, slots=True)
class ZoneChanged:
    raw: str


@dataclass(frozen=True, slots=True)
class ZoneDetected:
    zone_id: str


@dataclass(frozen=True, slots=True)
class ZoneDetectionFailed:
    reason: str


@dataclass(frozen=True, slots=True)
class Submit:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    index: int


@dataclass(frozen=True, slots=True)
class UrlChanged:
    url: str


Message = Union[
    Tick,
    NameChanged,
    DateChanged,
    HourChanged,
    MinuteChanged,
    ZoneChanged,
    ZoneDetected,
    ZoneDetectionFailed,
    Submit,
    Delete,
    UrlChanged,
]


# --- Effects ---


@dataclass(frozen=True, slots=True)
class ScheduleTicks:
    """Deliver a :class:`Tick` every *interval_ms* until the host stops."""

    interval_ms: int


@dataclass(frozen=True, slots=True)
class DetectZone:
    """Look up the host's zone once; answer with ZoneDetected or ZoneDetectionFailed."""


@dataclass(frozen=True, slots=True)
class PushUrl:
    """Make *url* the current URL and deliver :class:`UrlChanged` for it."""

    url: str


Effect = Union[ScheduleTicks, DetectZone, PushUrl]
