"""EventCodec: the URL query string is the only store of the event list.

Wire format, one parameter per event::

    ?<name>=<epochMillis>@<zoneId>&<name>=<epochMillis>@<zoneId>...

Both the name and the composite value are percent-encoded. Decoding is
lenient: a malformed pair is dropped and the rest of the list survives.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from tminus.domain.event import Event, absolute_instant, event_at_instant
from tminus.domain.result import Err, Ok, Result, err
from tminus.domain.types import TimeZoneCatalog

logger = logging.getLogger(__name__)

_EPOCH_MILLIS = re.compile(r"-?[0-9]+")


def encode_event(event: Event) -> str:
    """Encode one event as a ``key=value`` query parameter."""
    value = f"{absolute_instant(event)}@{event.time_zone_id}"
    return f"{quote(event.name, safe='')}={quote(value, safe='')}"


def encode_events(events: Iterable[Event]) -> str:
    """Encode an ordered event list as a query string (without the ``?``)."""
    return "&".join(encode_event(event) for event in events)


def decode_pair(pair: str, catalog: TimeZoneCatalog) -> Result[Event]:
    """Decode one ``key=value`` parameter into an event."""
    key, sep, value = pair.partition("=")
    if not sep:
        return err("missing '='")
    parts = unquote(value).split("@")
    if len(parts) != 2:
        return err("value must be <epochMillis>@<zoneId>")
    millis_text, zone_id = parts
    if not _EPOCH_MILLIS.fullmatch(millis_text):
        return err(f"invalid epoch milliseconds: {millis_text!r}")
    rules = catalog.lookup(zone_id)
    if rules is None:
        return err(f"unknown time zone: {zone_id!r}")
    try:
        event = event_at_instant(unquote(key), zone_id, rules, int(millis_text))
    except (OverflowError, ValueError):
        return err(f"instant out of range: {millis_text}")
    return Ok(event)


def decode_query(query: str, catalog: TimeZoneCatalog) -> list[Event]:
    """Decode a full query string, silently dropping unparseable pairs."""
    events: list[Event] = []
    for pair in query.removeprefix("?").split("&"):
        if not pair:
            continue
        result = decode_pair(pair, catalog)
        if isinstance(result, Err):
            logger.debug("Dropping query pair", extra={"pair": pair, "reason": "; ".join(result.errors)})
            continue
        events.append(result.value)
    return events


# --- URL helpers ---


def split_url(url: str) -> tuple[str, str]:
    """Split *url* into ``(everything before the query, query)``.

    Fragments are discarded.
    """
    parts = urlsplit(url)
    prefix = urlunsplit(parts._replace(query="", fragment=""))
    return prefix, parts.query


def build_url(path: str, events: Iterable[Event]) -> str:
    """Join *path* and the encoded events; no ``?`` when there are none."""
    query = encode_events(events)
    if not query:
        return path
    return f"{path}?{query}"
