"""Command group: one-shot, read-only queries against the roster file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payledger.commands._base import PayGroup
from payledger.services.payroll import PayrollService
from payledger.services.roster import RosterService

if TYPE_CHECKING:
    from payledger.commands._context import AppContext


def _load_or_exit(app: AppContext) -> None:
    """Load the roster into the (fresh) ledger, exiting 1 on failure."""
    result = RosterService(app.ledger).load()
    if not result.ok:
        app.emit(result)


@click.group(
    cls=PayGroup,
    examples="""\
  payledger roster show
  payledger --json roster show
  payledger --roster staff.txt roster salary ana""",
)
def roster() -> None:
    """Inspect the saved roster without starting the shell."""


@roster.command(
    examples="""\
  payledger roster show
  payledger -v roster show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """List every employee in the roster file with current pay."""
    _load_or_exit(app)
    app.emit(PayrollService(app.ledger).list_employees())


@roster.command(
    examples="""\
  payledger roster salary ana
  payledger -q roster salary LUIS"""
)
@click.argument("name")
@click.pass_obj
def salary(app: AppContext, name: str) -> None:
    """Print the pay of the first employee named NAME (case-insensitive)."""
    _load_or_exit(app)
    app.emit(PayrollService(app.ledger).query_salary(name))
