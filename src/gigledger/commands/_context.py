"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the ledger lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gigledger.config.logging import configure_logging
from gigledger.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gigledger.config.settings import LedgerSettings
    from gigledger.infrastructure.ledger import Ledger
    from gigledger.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The ledger is opened on first use so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: LedgerSettings) -> None:
        self.settings = settings
        self._ledger: Ledger | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from gigledger.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def ledger(self) -> Ledger:
        """The ledger instance (opened lazily on first access)."""
        if self._ledger is None:
            from gigledger.infrastructure.ledger import Ledger

            self._ledger = Ledger.from_settings(self.settings)
        return self._ledger

    def close(self) -> None:
        if self._ledger is not None:
            self._ledger.close()
            self._ledger = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
