"""Command: interactive menu over one in-memory ledger.

The shell is a thin driver: it prompts, calls the services, and prints
their results.  Errors are reported and the loop keeps going.  End of
input ends the session like the exit option does.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payledger.commands._base import PayCommand
from payledger.domain.types import EmployeeKind, parse_kind
from payledger.services.payroll import PayrollService
from payledger.services.roster import RosterService

if TYPE_CHECKING:
    from payledger.commands._context import AppContext

_MENU = (
    ("1", "Register employee"),
    ("2", "Record hours worked"),
    ("3", "Query salary"),
    ("4", "Save roster"),
    ("5", "Load roster"),
    ("6", "List employees"),
    ("7", "Exit"),
)

_AMOUNT_LABELS: dict[EmployeeKind, str] = {
    EmployeeKind.FIXED: "Fixed salary",
    EmployeeKind.HOURLY: "Hourly rate",
}


def _print_menu(title: str) -> None:
    click.echo(f"\n--- {title} ---")
    for key, label in _MENU:
        click.echo(f"{key}. {label}")


def _register(app: AppContext, payroll: PayrollService) -> None:
    name = click.prompt("Employee name")
    kind = click.prompt("Employee kind (1 = fixed, 2 = hourly)")
    amount = ""
    try:
        label = _AMOUNT_LABELS[parse_kind(kind)]
    except ValueError:
        pass  # the service reports the unknown kind
    else:
        amount = click.prompt(label)
    app.emit(payroll.register_employee(kind, name, amount), exit_on_error=False)


def _record_hours(app: AppContext, payroll: PayrollService) -> None:
    name = click.prompt("Employee name")
    hours = click.prompt("Hours worked")
    app.emit(payroll.accrue_hours(name, hours), exit_on_error=False)


def _query_salary(app: AppContext, payroll: PayrollService) -> None:
    name = click.prompt("Employee name")
    app.emit(payroll.query_salary(name), exit_on_error=False)


@click.command(
    cls=PayCommand,
    examples="""\
  payledger shell
  payledger --roster staff.txt shell
  PAYLEDGER_ROSTER__FORMAT=tagged payledger shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive payroll menu."""
    payroll = PayrollService(app.ledger)
    roster = RosterService(app.ledger)

    actions = {
        "1": lambda: _register(app, payroll),
        "2": lambda: _record_hours(app, payroll),
        "3": lambda: _query_salary(app, payroll),
        "4": lambda: app.emit(roster.save(), exit_on_error=False),
        "5": lambda: app.emit(roster.load(), exit_on_error=False),
        "6": lambda: app.emit(payroll.list_employees(), exit_on_error=False),
    }

    while True:
        _print_menu(app.settings.shell.title)
        try:
            choice = click.prompt("Select an option").strip()
            if choice == "7":
                break
            action = actions.get(choice)
            if action is None:
                click.echo("Invalid option.")
                continue
            action()
        except click.Abort:
            click.echo()
            break

    if app.settings.shell.save_on_exit:
        app.emit(roster.save(), exit_on_error=False)
