"""Subcommand modules for tminus.

Provides register_commands() which uses deferred imports to keep
``tminus --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from tminus.commands.add import add
    from tminus.commands.remove import remove
    from tminus.commands.show import show
    from tminus.commands.watch import watch
    from tminus.commands.zones import zones

    cli.add_command(show)
    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(watch)
    cli.add_command(zones)
