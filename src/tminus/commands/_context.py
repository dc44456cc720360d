"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the lazily built zone catalog, the services
and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tminus.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tminus.config.settings import TmSettings
    from tminus.infrastructure.timezones import ZoneInfoCatalog
    from tminus.services.countdown import CountdownService
    from tminus.services.result import ServiceResult
    from tminus.services.zones import ZoneService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The catalog is built on
    first use so ``--help`` and ``--version`` never scan zone data.
    """

    def __init__(self, settings: TmSettings) -> None:
        self.settings = settings
        self._catalog: ZoneInfoCatalog | None = None

        from tminus.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> ZoneInfoCatalog:
        """The zone catalog (created lazily on first access)."""
        if self._catalog is None:
            from tminus.infrastructure.timezones import ZoneInfoCatalog

            self._catalog = ZoneInfoCatalog()
        return self._catalog

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_seconds=self.settings.display.show_seconds,
            show_local_time=self.settings.display.show_local_time,
        )

    def resolve_url(self, url: str | None) -> str:
        """*url* as given, or the configured base when omitted."""
        return url if url is not None else self.settings.url.base

    def countdowns(self) -> CountdownService:
        from tminus.services.countdown import CountdownService

        return CountdownService(self.catalog)

    def zones(self) -> ZoneService:
        from tminus.services.zones import ZoneService

        return ZoneService(self.catalog)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON carries warnings in the payload; the Rich renderers print them inline.
            if settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
