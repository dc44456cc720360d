"""The reducer: ``update(message, model, catalog) -> (model, effects)``.

Pure. Every message is handled to completion and the resulting effects
are returned as data for the host to execute. Handlers are dispatched by
message type in :data:`_HANDLERS`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from tminus.domain.codec import build_url, decode_query, split_url
from tminus.domain.form import (
    combine,
    initial_form,
    with_date,
    with_hour,
    with_minute,
    with_name,
    with_time_zone,
)
from tminus.domain.result import Ok
from tminus.domain.types import TimeZoneCatalog
from tminus.runtime.messages import (
    DateChanged,
    Delete,
    DetectZone,
    Effect,
    HourChanged,
    Message,
    MinuteChanged,
    NameChanged,
    PushUrl,
    ScheduleTicks,
    Submit,
    Tick,
    UrlChanged,
    ZoneChanged,
    ZoneDetected,
    ZoneDetectionFailed,
)
from tminus.runtime.model import Model

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 100

Update = tuple[Model, list[Effect]]


def init(
    url: str,
    catalog: TimeZoneCatalog,
    *,
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    detect_zone: bool = True,
) -> Update:
    """Build the startup model from *url* and request ticks and zone detection."""
    path, query = split_url(url)
    model = Model(
        current_time=None,
        detected_zone=None,
        events=tuple(decode_query(query, catalog)),
        form=initial_form(catalog),
        path=path,
    )
    effects: list[Effect] = [ScheduleTicks(tick_interval_ms)]
    if detect_zone:
        effects.append(DetectZone())
    return model, effects


def update(message: Message, model: Model, catalog: TimeZoneCatalog) -> Update:
    """Apply one message to *model*."""
    handler = _HANDLERS.get(type(message))
    if handler is None:
        raise TypeError(f"Unhandled message type: {type(message).__name__}")
    return handler(message, model, catalog)


# ── Handlers ──────────────────────────────────────────────────────────


def _on_tick(msg: Tick, model: Model, _catalog: TimeZoneCatalog) -> Update:
    return replace(model, current_time=msg.now), []


def _on_name(msg: NameChanged, model: Model, _catalog: TimeZoneCatalog) -> Update:
    return replace(model, form=with_name(model.form, msg.raw)), []


def _on_date(msg: DateChanged, model: Model, _catalog: TimeZoneCatalog) -> Update:
    return replace(model, form=with_date(model.form, msg.raw)), []


def _on_hour(msg: HourChanged, model: Model, _catalog: TimeZoneCatalog) -> Update:
    return replace(model, form=with_hour(model.form, msg.raw)), []


def _on_minute(msg: MinuteChanged, model: Model, _catalog: TimeZoneCatalog) -> Update:
    return replace(model, form=with_minute(model.form, msg.raw)), []


def _on_zone(msg: ZoneChanged, model: Model, catalog: TimeZoneCatalog) -> Update:
    return replace(model, form=with_time_zone(model.form, msg.raw, catalog)), []


def _on_zone_detected(msg: ZoneDetected, model: Model, catalog: TimeZoneCatalog) -> Update:
    rules = catalog.lookup(msg.zone_id)
    if rules is None:
        logger.debug("Detected zone %s is not in the catalog", msg.zone_id)
        return model, []
    form = model.form
    # Only prefill a field the user has not typed into yet.
    if form.time_zone.raw_input == "":
        form = with_time_zone(form, msg.zone_id, catalog)
    return replace(model, detected_zone=(msg.zone_id, rules), form=form), []


def _on_zone_failed(msg: ZoneDetectionFailed, model: Model, _catalog: TimeZoneCatalog) -> Update:
    logger.debug("Zone detection failed: %s", msg.reason)
    return model, []


def _on_submit(_msg: Submit, model: Model, catalog: TimeZoneCatalog) -> Update:
    result = combine(model.form)
    if not isinstance(result, Ok):
        return model, []
    url = build_url(model.path, (*model.events, result.value))
    form = initial_form(catalog)
    if model.detected_zone is not None:
        form = with_time_zone(form, model.detected_zone[0], catalog)
    return replace(model, form=form), [PushUrl(url)]


def _on_delete(msg: Delete, model: Model, _catalog: TimeZoneCatalog) -> Update:
    if not 0 <= msg.index < len(model.events):
        return model, []
    remaining = model.events[: msg.index] + model.events[msg.index + 1 :]
    return model, [PushUrl(build_url(model.path, remaining))]


def _on_url(msg: UrlChanged, model: Model, catalog: TimeZoneCatalog) -> Update:
    path, query = split_url(msg.url)
    return replace(model, path=path, events=tuple(decode_query(query, catalog))), []


_HANDLERS: dict[type, Callable[[Any, Model, TimeZoneCatalog], Update]] = {
    Tick: _on_tick,
    NameChanged: _on_name,
    DateChanged: _on_date,
    HourChanged: _on_hour,
    MinuteChanged: _on_minute,
    ZoneChanged: _on_zone,
    ZoneDetected: _on_zone_detected,
    ZoneDetectionFailed: _on_zone_failed,
    Submit: _on_submit,
    Delete: _on_delete,
    UrlChanged: _on_url,
}
