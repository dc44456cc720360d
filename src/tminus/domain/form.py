"""EventForm: five independent fields combined applicatively into an Event.

Fields are never cross-checked. Validity is only assessed by
:func:`combine`, which reports every invalid field's messages in field
order (name, date, hour, minute, timezone) rather than the first failure.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any

from tminus.domain.event import Event, make_event
from tminus.domain.fields import (
    Field,
    new_field,
    parse_date,
    parse_hour,
    parse_minute,
    parse_name,
    set_value,
    time_zone_parser,
)
from tminus.domain.result import Result, apply_all, curry, errors_of, is_ok, succeed
from tminus.domain.types import TimeZoneCatalog, ZoneRules

FIELD_ORDER = ("name", "date", "hour", "minute", "time_zone")


@dataclass(frozen=True, slots=True)
class EventForm:
    """The five inputs needed to define an event."""

    name: Field[str]
    date: Field[date]
    hour: Field[int]
    minute: Field[int]
    time_zone: Field[tuple[str, ZoneRules]]

    def fields(self) -> tuple[Field[Any], ...]:
        return tuple(getattr(self, attr) for attr in FIELD_ORDER)


def initial_form(catalog: TimeZoneCatalog) -> EventForm:
    """A blank form; every field starts out invalid."""
    return EventForm(
        name=new_field("Name", parse_name),
        date=new_field("Date", parse_date),
        hour=new_field("Hour", parse_hour),
        minute=new_field("Minute", parse_minute),
        time_zone=new_field("Time zone", time_zone_parser(catalog)),
    )


def with_name(form: EventForm, raw: str) -> EventForm:
    return replace(form, name=set_value(parse_name, raw, form.name))


def with_date(form: EventForm, raw: str) -> EventForm:
    return replace(form, date=set_value(parse_date, raw, form.date))


def with_hour(form: EventForm, raw: str) -> EventForm:
    return replace(form, hour=set_value(parse_hour, raw, form.hour))


def with_minute(form: EventForm, raw: str) -> EventForm:
    return replace(form, minute=set_value(parse_minute, raw, form.minute))


def with_time_zone(form: EventForm, raw: str, catalog: TimeZoneCatalog) -> EventForm:
    parse = time_zone_parser(catalog)
    return replace(form, time_zone=set_value(parse, raw, form.time_zone))


def combine(form: EventForm) -> Result[Event]:
    """Validate the whole form, accumulating every field's errors."""
    start = succeed(curry(make_event, len(FIELD_ORDER)))
    return apply_all(start, (field.validated for field in form.fields()))


def is_form_valid(form: EventForm) -> bool:
    return is_ok(combine(form))


def form_errors(form: EventForm) -> dict[str, list[str]]:
    """Per-field error messages, keyed by attribute name, invalid fields only."""
    errors: dict[str, list[str]] = {}
    for attr in FIELD_ORDER:
        field = getattr(form, attr)
        if not field.is_valid:
            errors[attr] = list(errors_of(field.validated))
    return errors
