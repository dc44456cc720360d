"""Rich Console factory and theme for tminus output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TM_THEME = Theme(
    {
        "tm.ok": "bold green",
        "tm.error": "bold red",
        "tm.warning": "bold yellow",
        "tm.op": "bold cyan",
        "tm.key": "dim",
        "tm.name": "bold",
        "tm.zone": "blue",
        "tm.url": "underline",
        "tm.future": "green",
        "tm.elapsed": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_row(row: dict[str, object]) -> str:
    """Rich style for a countdown row: elapsed events render in red."""
    return "tm.elapsed" if row.get("elapsed") else "tm.future"
