"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns the process-lifetime :class:`Ledger` (created
lazily so ``--help`` never touches the roster) and routes ServiceResult
output to stdout/stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payledger.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from payledger.config.settings import PayledgerSettings
    from payledger.infrastructure.ledger import Ledger
    from payledger.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PayledgerSettings) -> None:
        self.settings = settings
        self._ledger: Ledger | None = None

        from payledger.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from payledger.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def ledger(self) -> Ledger:
        """The ledger instance (created on first access)."""
        if self._ledger is None:
            from payledger.config.logging import bind_roster
            from payledger.infrastructure.ledger import Ledger

            self._ledger = Ledger(self.settings)
            bind_roster(self._ledger.roster_path)
        return self._ledger

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult.

        * Success: stdout.  Warnings go to stderr outside JSON mode.
        * Failure: stderr, then exit code 1 unless *exit_on_error* is
          False (the interactive shell keeps running after errors).
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
