"""Subcommand modules for cfurl.

Provides register_commands(), which adds one generated command per
dashboard catalog entry plus the standalone ``commands`` listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all dashboard commands and standalone commands on the root group."""
    from cfurl.commands.dashboard import build_command
    from cfurl.domain.catalog import COMMANDS

    for spec in COMMANDS.values():
        cli.add_command(build_command(spec))

    # --- Standalone commands ---
    from cfurl.commands.listing import list_commands

    cli.add_command(list_commands)
