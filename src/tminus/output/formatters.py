"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich tables and colors), for
scripts (``--quiet``: bare URLs, ids, tab-separated countdowns) or for
machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tminus.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from tminus.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI and [display] config."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_seconds: bool = True
    show_local_time: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderers.
    """
    s = settings or OutputSettings()
    if s.json_output:
        return result.model_dump_json(indent=2)
    if s.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=s.verbose,
        show_seconds=s.show_seconds,
        show_local_time=s.show_local_time,
    )
