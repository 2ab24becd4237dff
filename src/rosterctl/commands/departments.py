"""Command: list the departments of a roster."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples="""\
  rosterctl departments
  rosterctl departments staff.csv
  rosterctl --json departments staff.csv""",
)
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.pass_obj
def departments(app: AppContext, path: str | None) -> None:
    """List departments of PATH in first-seen order with headcounts."""
    from rosterctl.services.roster import RosterService

    app.emit(RosterService(app.settings).departments(path))
