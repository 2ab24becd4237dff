"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.config.logging import configure_logging
from rosterctl.output.formatters import OutputSettings, format_result
from rosterctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.services.result import ServiceResult


class AppContext:
    """Settings plus output plumbing for one CLI invocation."""

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with code 1.

        Warnings of successful results go to stderr unless JSON output is on,
        where they are already part of the payload.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
