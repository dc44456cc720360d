"""Command: add an event to a URL through the event form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tminus.commands._base import TmCommand, url_argument

if TYPE_CHECKING:
    from tminus.commands._context import AppContext


@click.command(
    cls=TmCommand,
    examples="""\
  tminus add --name Launch --date 2026-01-01 --hour 9 --minute 30 --zone Europe/Berlin
  tminus add 'https://example.org/?Launch=1767225600000%40UTC' \\
      --name Review --date 2026-02-01 --hour 14 --minute 0 --zone UTC
  tminus -q add --name Lunch --date 2026-01-02 --hour 12 --minute 0""",
)
@url_argument()
@click.option("--name", "name", default="", help="Event name (must not be empty).")
@click.option("--date", "date", default="", metavar="YYYY-MM-DD", help="Local calendar date.")
@click.option("--hour", "hour", default="", metavar="0-23", help="Local hour.")
@click.option("--minute", "minute", default="", metavar="0-59", help="Local minute.")
@click.option(
    "--zone",
    "zone",
    default=None,
    metavar="ZONE_ID",
    help="IANA zone id. Defaults to [zones] default_zone, then the detected local zone.",
)
@click.pass_obj
def add(
    app: AppContext,
    url: str | None,
    name: str,
    date: str,
    hour: str,
    minute: str,
    zone: str | None,
) -> None:
    """Add an event to URL and print the resulting URL.

    Every invalid field is reported, not only the first.
    """
    zones = app.settings.zones
    if zone is None and zones.default_zone:
        zone = zones.default_zone
    if zone is None and not zones.detect_local:
        zone = ""

    app.emit(
        app.countdowns().add_event(
            app.resolve_url(url),
            name=name,
            date=date,
            hour=hour,
            minute=minute,
            zone=zone,
        )
    )
