"""Registry — the ordered, in-memory roster of employees.

Insertion order is preserved and names are not unique: lookups scan
linearly and return the first case-insensitive match.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal
from typing import Any

from payledger.domain.employees import Employee, ValidationResult, build_employee


class Registry:
    """Ordered collection of :class:`Employee` records."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: list[Employee] = list(employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __getitem__(self, index: int) -> Employee:
        return self._employees[index]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, employee: Employee) -> Employee:
        """Append *employee* and return it."""
        self._employees.append(employee)
        return employee

    def register(self, kind: str, name: str, amount: Any) -> Employee:
        """Build an employee of *kind* and append it.

        Raises:
            ValueError: If the kind, name, or amount is rejected.  Nothing
                is appended in that case.
        """
        return self.add(build_employee(kind, name, amount))

    def replace(self, employees: Iterable[Employee]) -> None:
        """Drop every record and take *employees* as the new roster."""
        self._employees = list(employees)

    def accrue_hours(self, employee: Employee, hours: int) -> ValidationResult:
        return employee.accrue_hours(hours)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_name(self, name: str) -> Employee | None:
        """First employee whose name equals *name*, ignoring case."""
        for employee in self._employees:
            if employee.matches(name):
                return employee
        return None

    @staticmethod
    def compute_salary(employee: Employee) -> Decimal:
        return employee.salary()

    def total_payroll(self) -> Decimal:
        """Sum of every employee's current pay."""
        return sum((e.salary() for e in self._employees), Decimal(0))
