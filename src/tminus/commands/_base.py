"""Click building blocks shared by every tminus command.

``TmCommand`` accepts an ``examples`` parameter: ``--examples`` prints
them and exits, which keeps ``--help`` concise. ``url_argument`` is the
optional positional URL most commands take.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TmCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def url_argument(*, required: bool = False) -> Callable[[F], F]:
    """Positional ``URL`` holding the event list in its query string.

    When optional and omitted, commands fall back to ``[url] base``.
    """
    return click.argument("url", required=required)
