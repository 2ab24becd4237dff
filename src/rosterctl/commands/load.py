"""Command: load a roster and print its people."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples="""\
  rosterctl load
  rosterctl load staff.csv
  rosterctl load staff.csv --summary-only
  rosterctl --json load staff.csv
  rosterctl -q load staff.csv""",
)
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option("--summary-only", is_flag=True, help="Print only the people/department counts.")
@click.pass_obj
def load(app: AppContext, path: str | None, summary_only: bool) -> None:
    """Load PATH (default: the configured roster file) and list its people."""
    from rosterctl.services.roster import RosterService

    include_people = app.settings.report.show_people and not summary_only
    app.emit(RosterService(app.settings).load(path, include_people=include_people))
