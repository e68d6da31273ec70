"""PayrollService — registration, hour accrual, and salary queries."""

from __future__ import annotations

import logging
from typing import Any

from payledger.domain.employees import parse_hours
from payledger.services.base import BaseService
from payledger.services.result import ErrorCode, ServiceResult, failure
from payledger.services.telemetry import traced

logger = logging.getLogger(__name__)


def _validation_message(exc: ValueError) -> str:
    """First human-readable message from a ValueError or pydantic error."""
    errors = getattr(exc, "errors", None)
    if callable(errors):
        first = errors()[0]
        return str(first["msg"]).removeprefix("Value error, ")
    return str(exc)


class PayrollService(BaseService):
    """Operations the driver calls against the in-memory registry."""

    @traced
    def register_employee(self, kind: str, name: str, amount: Any) -> ServiceResult:
        """Register a fixed (*amount* = salary) or hourly (*amount* = rate) employee."""
        op = "register_employee"
        try:
            employee = self._registry.register(kind, name, amount)
        except ValueError as exc:
            return failure(
                op,
                ErrorCode.VALIDATION_ERROR,
                _validation_message(exc),
                kind=str(kind),
                name=name,
            )

        logger.debug("Registered %s employee %r", employee.kind.value, employee.name)
        data = employee.summary()
        data["position"] = len(self._registry)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def accrue_hours(self, name: str, hours: Any) -> ServiceResult:
        """Add *hours* to the first employee named *name*.

        All-or-nothing: a malformed or negative delta changes nothing.
        """
        op = "accrue_hours"
        employee = self._registry.find_by_name(name)
        if employee is None:
            return failure(op, ErrorCode.NOT_FOUND, f"No employee named {name!r}", name=name)

        try:
            delta = parse_hours(hours)
        except ValueError as exc:
            return failure(op, ErrorCode.VALIDATION_ERROR, str(exc), name=name)

        vr = self._registry.accrue_hours(employee, delta)
        if not vr.valid:
            return failure(
                op,
                ErrorCode.INVALID_HOURS,
                "; ".join(vr.errors),
                name=employee.name,
                hours=delta,
            )

        logger.debug("Accrued %d hours for %r", delta, employee.name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": employee.name,
                "hours_added": delta,
                "hours_worked": employee.hours_worked,
            },
        )

    @traced
    def query_salary(self, name: str) -> ServiceResult:
        """Pay owed to the first employee named *name*."""
        op = "query_salary"
        employee = self._registry.find_by_name(name)
        if employee is None:
            return failure(op, ErrorCode.NOT_FOUND, f"No employee named {name!r}", name=name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": employee.name,
                "kind": employee.kind.value,
                "salary": self._registry.compute_salary(employee),
            },
        )

    @traced
    def list_employees(self) -> ServiceResult:
        """Every employee in registry order, with current pay."""
        items = [employee.summary() for employee in self._registry]
        return ServiceResult(
            ok=True,
            op="list_employees",
            data={
                "items": items,
                "count": len(items),
                "total_payroll": self._registry.total_payroll(),
            },
        )
