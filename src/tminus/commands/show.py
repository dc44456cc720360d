"""Command: print countdowns for every event in a URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tminus.commands._base import TmCommand, url_argument

if TYPE_CHECKING:
    from tminus.commands._context import AppContext


@click.command(
    cls=TmCommand,
    examples="""\
  tminus show 'https://example.org/?Launch=1767225600000%40UTC'
  tminus show '?Launch=1767225600000%40UTC' --at 2025-12-31T23:00:00Z
  tminus --json show '?Launch=1767225600000%40UTC'""",
)
@url_argument()
@click.option(
    "--at",
    "at",
    default=None,
    metavar="ISO_INSTANT",
    help="Compute countdowns at this instant instead of now (naive = UTC).",
)
@click.pass_obj
def show(app: AppContext, url: str | None, at: str | None) -> None:
    """Show the countdown to every event stored in URL."""
    from tminus.domain.result import Err
    from tminus.services._helpers import parse_instant
    from tminus.services.result import failure

    instant: int | None = None
    if at is not None:
        parsed = parse_instant(at)
        if isinstance(parsed, Err):
            app.emit(failure("show", "INVALID_INSTANT", " ".join(parsed.errors), at=at))
            return
        instant = parsed.value

    app.emit(app.countdowns().show(app.resolve_url(url), at=instant))
