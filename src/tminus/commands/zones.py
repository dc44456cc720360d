"""Command: list known time zones or show the detected local zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tminus.commands._base import TmCommand

if TYPE_CHECKING:
    from tminus.commands._context import AppContext


@click.command(
    cls=TmCommand,
    examples="""\
  tminus zones
  tminus zones --filter europe
  tminus zones --here""",
)
@click.option("--filter", "contains", default=None, help="Case-insensitive substring match.")
@click.option("--here", is_flag=True, help="Show the detected local zone instead.")
@click.pass_obj
def zones(app: AppContext, contains: str | None, here: bool) -> None:
    """List the zone ids accepted by --zone."""
    svc = app.zones()
    if here:
        app.emit(svc.detect())
    else:
        app.emit(svc.list_zones(contains=contains))
