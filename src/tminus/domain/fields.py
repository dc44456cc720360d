"""Single-field validation: raw text plus its derived validated value.

A :class:`Field` is a frozen value. The only way to change it is
:func:`set_value`, which replaces the raw input and recomputes the
validated result in one step.

INVARIANT: ``field.validated == parse(field.raw_input)`` for the parser
used at the last ``set_value``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

from tminus.domain.result import Ok, Result, err
from tminus.domain.types import TimeZoneCatalog, ZoneRules

T = TypeVar("T")

Parser = Callable[[str], Result[T]]

NAME_EMPTY = "Name must not be empty."
DATE_INVALID = "Invalid date."
HOUR_INVALID = "Hour must be a value between 0 and 23"
MINUTE_INVALID = "Minute must be a value between 0 and 59"
ZONE_INVALID = "Time zone is not valid."

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class Field(Generic[T]):
    """A labelled form input and the result of validating it."""

    label: str
    raw_input: str
    validated: Result[T]

    @property
    def is_valid(self) -> bool:
        return isinstance(self.validated, Ok)


def set_value(parse: Parser[T], raw: str, field: Field[T]) -> Field[T]:
    """Return *field* with *raw* as its input and ``parse(raw)`` as its result."""
    return Field(label=field.label, raw_input=raw, validated=parse(raw))


def new_field(label: str, parse: Parser[T], raw: str = "") -> Field[T]:
    """Create a field already validated against *raw* (empty by default)."""
    return Field(label=label, raw_input=raw, validated=parse(raw))


# --- Parsers ---


def parse_name(raw: str) -> Result[str]:
    if raw == "":
        return err(NAME_EMPTY)
    return Ok(raw)


def parse_date(raw: str) -> Result[date]:
    """Parse an ISO-8601 calendar date (``YYYY-MM-DD``)."""
    text = raw.strip()
    if not _ISO_DATE.fullmatch(text):
        return err(DATE_INVALID)
    try:
        return Ok(date.fromisoformat(text))
    except ValueError:
        return err(DATE_INVALID)


def _bounded_int(raw: str, low: int, high: int, message: str) -> Result[int]:
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return err(message)
    value = int(text)
    if not low <= value <= high:
        return err(message)
    return Ok(value)


def parse_hour(raw: str) -> Result[int]:
    return _bounded_int(raw, 0, 23, HOUR_INVALID)


def parse_minute(raw: str) -> Result[int]:
    return _bounded_int(raw, 0, 59, MINUTE_INVALID)


def time_zone_parser(catalog: TimeZoneCatalog) -> Parser[tuple[str, ZoneRules]]:
    """Build the timezone parser bound to *catalog*."""

    def parse_time_zone(raw: str) -> Result[tuple[str, ZoneRules]]:
        rules = catalog.lookup(raw)
        if rules is None:
            return err(ZONE_INVALID)
        return Ok((raw, rules))

    return parse_time_zone
