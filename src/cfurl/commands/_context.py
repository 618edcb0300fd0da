"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

import click

from cfurl.domain.types import exit_code_for
from cfurl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cfurl.config.settings import CfurlSettings
    from cfurl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: CfurlSettings) -> None:
        self.settings = settings

        from cfurl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def status(self, message: str) -> AbstractContextManager[Any]:
        """Transient spinner on stderr; a no-op unless a human is watching."""
        if self.settings.json_output or self.settings.quiet:
            return nullcontext()

        from cfurl.output.console import create_status_console

        console = create_status_console()
        if not console.is_terminal:
            return nullcontext()
        return console.status(message, spinner="dots")

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with the error code's status.
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
            raise SystemExit(exit_code_for(result.error.code if result.error else None))
