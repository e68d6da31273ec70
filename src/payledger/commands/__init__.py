"""Subcommand modules for payledger.

Provides register_commands(), which imports command modules lazily so
``payledger --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    from payledger.commands.roster import roster
    from payledger.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(roster)
