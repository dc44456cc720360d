"""Command: live countdown table, refreshed every tick."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tminus.commands._base import TmCommand, url_argument

if TYPE_CHECKING:
    from tminus.commands._context import AppContext


@click.command(
    cls=TmCommand,
    examples="""\
  tminus watch 'https://example.org/?Launch=1767225600000%40UTC'
  tminus watch "$URL" --interval 1000
  tminus watch "$URL" --ticks 50""",
)
@url_argument()
@click.option(
    "--ticks",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many ticks (default: until interrupted).",
)
@click.option(
    "--interval",
    "interval_ms",
    type=click.IntRange(min=1),
    default=None,
    help="Milliseconds between ticks (default: [clock] tick_interval_ms).",
)
@click.pass_obj
def watch(app: AppContext, url: str | None, ticks: int | None, interval_ms: int | None) -> None:
    """Re-render the countdowns in URL until interrupted.

    The final frame is emitted like ``show`` when the loop ends.
    """
    from rich.console import Console
    from rich.live import Live

    from tminus.output.renderers import countdown_table

    settings = app.output_settings
    interval = interval_ms or app.settings.clock.tick_interval_ms
    svc = app.countdowns()
    target = app.resolve_url(url)

    console = Console()
    if settings.json_output or settings.quiet or not console.is_terminal:
        app.emit(svc.watch(target, ticks=ticks, interval_ms=interval))
        return

    def table(rows: list[dict[str, Any]]) -> Any:
        return countdown_table(
            rows,
            show_seconds=settings.show_seconds,
            show_local_time=settings.show_local_time,
        )

    with Live(table([]), console=console, auto_refresh=False, transient=True) as live:

        def on_frame(rows: list[dict[str, Any]]) -> None:
            live.update(table(rows), refresh=True)

        try:
            result = svc.watch(target, ticks=ticks, interval_ms=interval, on_frame=on_frame)
        except KeyboardInterrupt:
            result = svc.show(target)
    app.emit(result)
