"""Subcommand modules for gigledger.

Provides register_commands(), which uses deferred imports to keep
``gigledger --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from gigledger.commands.performance import performance
    from gigledger.commands.performer import performer

    cli.add_command(performer)
    cli.add_command(performance)
