"""Command: remove one event from a URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tminus.commands._base import TmCommand, url_argument

if TYPE_CHECKING:
    from tminus.commands._context import AppContext


@click.command(
    cls=TmCommand,
    examples="""\
  tminus remove '?Launch=1767225600000%40UTC&Review=1769954400000%40UTC' 0
  tminus -q remove "$URL" 2""",
)
@url_argument(required=True)
@click.argument("index", type=int)
@click.pass_obj
def remove(app: AppContext, url: str, index: int) -> None:
    """Remove the event at INDEX (0-based, as listed by show) from URL."""
    app.emit(app.countdowns().remove_event(url, index))
