"""Subcommand modules for rosterctl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every subcommand to the root group.

    Imports are deferred so ``rosterctl --help`` stays cheap.
    """
    from rosterctl.commands.departments import departments
    from rosterctl.commands.load import load

    cli.add_command(load)
    cli.add_command(departments)
