"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tminus.output.console import create_console, get_output, style_for_row

if TYPE_CHECKING:
    from rich.console import Console

    from tminus.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_seconds: bool = True,
    show_local_time: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(
            result,
            console,
            verbose=verbose,
            show_seconds=show_seconds,
            show_local_time=show_local_time,
        )
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if "url" in result.data and result.op in ("add_event", "remove_event"):
        return str(result.data["url"])

    items = result.data.get("items")
    if isinstance(items, list):
        if result.op == "list_zones":
            return "\n".join(str(item.get("id", "")) for item in items)
        return "\n".join(f"{item['name']}\t{format_remaining(item)}" for item in items)

    return f"OK: {result.op}"


def format_remaining(row: dict[str, Any], *, show_seconds: bool = True) -> str:
    """``3d 04h 05m 06s`` style text for a countdown row.

    A row that is elapsed but reads all zeros (under a second past) is
    shown as ``-0d 00h 00m 00s`` so it is not mistaken for a future event.
    """
    days, hours, minutes, seconds = (
        int(row["days"]),
        int(row["hours"]),
        int(row["minutes"]),
        int(row["seconds"]),
    )
    sign = "-" if row.get("elapsed") else ""
    text = f"{sign}{abs(days)}d {abs(hours):02d}h {abs(minutes):02d}m"
    if show_seconds:
        text += f" {abs(seconds):02d}s"
    return text


def countdown_table(
    rows: Sequence[dict[str, Any]],
    *,
    show_seconds: bool = True,
    show_local_time: bool = True,
) -> Table:
    """Build a Rich Table for countdown rows (used by ``show`` and ``watch``)."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="tm.name")
    table.add_column("Zone", style="tm.zone", no_wrap=True)
    if show_local_time:
        table.add_column("Local time", no_wrap=True)
    table.add_column("Remaining", justify="right", no_wrap=True)

    for row in rows:
        cells: list[Any] = [str(row["index"]), str(row["name"]), str(row["zone"])]
        if show_local_time:
            cells.append(str(row["local"]))
        cells.append(Text(format_remaining(row, show_seconds=show_seconds), style=style_for_row(row)))
        table.add_row(*cells)

    return table


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tm.ok")
    op = Text(f"  {result.op}", style="tm.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tm.key")
    if key == "url":
        v = Text(str(value), style="tm.url")
    elif key in ("name", "removed"):
        v = Text(str(value), style="tm.name")
    elif key == "zone":
        v = Text(str(value), style="tm.zone")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="tm.warning"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    label = Text("ERROR", style="tm.error")
    op = Text(f"  {result.op}", style="tm.op")
    if err is None:
        console.print(label, op, Text(" - "), "Unknown error")
        return

    errors = err.detail.get("errors")
    if isinstance(errors, list) and errors:
        console.print(label, op)
        for message in errors:
            console.print(f"  - {message}")
    else:
        console.print(label, op, Text(" - "), err.message)

    for warning in err.detail.get("warnings") or []:
        console.print(Text(f"  warning: {warning}", style="tm.warning"))

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_countdowns(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_seconds: bool = True,
    show_local_time: bool = True,
) -> None:
    """Render show/watch results as a countdown table."""
    items = result.data.get("items", [])
    if not items:
        console.print("No events in URL.")
        return
    console.print(countdown_table(items, show_seconds=show_seconds, show_local_time=show_local_time))
    count = result.data.get("count", len(items))
    console.print(f"\n{count} event{'s' if count != 1 else ''}")
    if verbose:
        _field(console, "now", result.data.get("now"))
        _field(console, "url", result.data.get("url"))


def _render_url_change(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    **_display: bool,
) -> None:
    """Render add_event/remove_event: what changed, then the new URL."""
    _status_line(console, result)
    for key in ("name", "zone", "local", "removed", "count"):
        if key in result.data:
            _field(console, key, result.data[key])
    _field(console, "url", result.data.get("url", ""))
    _render_warnings(console, result)


def _render_zones(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    **_display: bool,
) -> None:
    items = result.data.get("items", [])
    for item in items:
        console.print(Text(str(item.get("id", "")), style="tm.zone"))
    console.print(f"\n{result.data.get('count', len(items))} zones")


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    **_display: bool,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "show": _render_countdowns,
    "watch": _render_countdowns,
    "add_event": _render_url_change,
    "remove_event": _render_url_change,
    "list_zones": _render_zones,
    "detect_zone": _render_generic,
}
