"""Root CLI group for tminus with global flags and command registration."""

from __future__ import annotations

import click

from tminus import __version__
from tminus.commands import register_commands
from tminus.commands._context import AppContext
from tminus.config.settings import TmSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tminus")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (URLs, ids, tab-separated rows).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tminus: countdowns to events, stored entirely in a shareable URL."""
    ctx.ensure_object(dict)
    settings = TmSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
