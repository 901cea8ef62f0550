"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arenagraph.config.logging import configure_logging
from arenagraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from arenagraph.config.settings import ArenaSettings
    from arenagraph.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: ArenaSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            trace=settings.trace,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
