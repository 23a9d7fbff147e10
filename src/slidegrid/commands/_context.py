"""AppContext: the object behind ``@click.pass_obj`` for every command.

Logging is configured as soon as the root group has settings. The layout
service (catalog, plugins, resolver) is built on first use, so ``--help``
and ``--version`` never load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from slidegrid.config.logging import configure_logging
from slidegrid.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from slidegrid.config.settings import SlideGridSettings
    from slidegrid.services.layouts import LayoutService
    from slidegrid.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: SlideGridSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._service: LayoutService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> LayoutService:
        if self._service is None:
            from slidegrid.services.layouts import build_layout_service

            self._service = build_layout_service(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Write *result* to stdout, or to stderr and exit 1 when it failed."""
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise click.exceptions.Exit(1)
