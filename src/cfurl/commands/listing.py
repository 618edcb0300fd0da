"""Command: list the available dashboard commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cfurl.commands._base import CfCommand

if TYPE_CHECKING:
    from cfurl.commands._context import AppContext


@click.command(
    "commands",
    cls=CfCommand,
    examples="""\
  cfurl commands
  cfurl -v commands
  cfurl --json commands""",
)
@click.pass_obj
def list_commands(app: AppContext) -> None:
    """List dashboard commands and the arguments they take."""
    from cfurl.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).list_commands())
