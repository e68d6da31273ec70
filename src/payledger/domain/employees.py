"""Employee models — the two pay variants and their shared accrual rules.

``Employee`` is a tagged union over :class:`FixedEmployee` and
:class:`HourlyEmployee` with ``kind`` as the discriminant.  Pay is
computed by :meth:`Employee.salary`:

- Fixed: the stored ``base_salary``, independent of hours.
- Hourly: ``hours_worked * hourly_rate``; ``base_salary`` stays 0.

INVARIANT: ``hours_worked`` never decreases and is never negative.
Accrual returns a :class:`ValidationResult` instead of raising, so a
rejected call leaves the record untouched.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from payledger.domain.types import EmployeeKind, parse_kind

# Characters that would corrupt a comma-separated roster line.
FORBIDDEN_NAME_CHARS = frozenset({",", "\r", "\n"})

_AMOUNT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_HOURS_RE = re.compile(r"^[+-]?\d+$")


# ---------------------------------------------------------------------------
# Validation result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a domain rule check."""

    valid: bool
    errors: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------


def parse_amount(raw: Any) -> Decimal:
    """Parse a salary or rate into a finite :class:`Decimal`.

    Sign is not checked here; the models enforce non-negative amounts.

    Raises:
        ValueError: If *raw* is not a plain decimal number.
    """
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int) and not isinstance(raw, bool):
        value = Decimal(raw)
    else:
        text = str(raw).strip()
        if not _AMOUNT_RE.match(text):
            msg = f"Not a decimal amount: {raw!r}"
            raise ValueError(msg)
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            msg = f"Not a decimal amount: {raw!r}"
            raise ValueError(msg) from exc
    if not value.is_finite():
        msg = f"Amount must be finite: {raw!r}"
        raise ValueError(msg)
    return value


def parse_hours(raw: Any) -> int:
    """Parse an hour count into an ``int`` (sign preserved).

    Raises:
        ValueError: If *raw* is not a whole number.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not _HOURS_RE.match(text):
        msg = f"Not a whole number of hours: {raw!r}"
        raise ValueError(msg)
    return int(text)


def validate_hours(hours: int) -> ValidationResult:
    """Check that an hour delta can be accrued."""
    if hours < 0:
        return ValidationResult(valid=False, errors=["Hours worked cannot be negative."])
    return ValidationResult(valid=True)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Employee(BaseModel, ABC):
    """Common employee record.  Subclasses define how pay is computed."""

    model_config = {"validate_assignment": True}

    kind: EmployeeKind
    name: str = Field(min_length=1)
    base_salary: Decimal = Field(default=Decimal(0), ge=0)
    hours_worked: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _name_is_line_safe(cls, value: str) -> str:
        if not value.strip():
            msg = "Employee name must not be blank"
            raise ValueError(msg)
        bad = sorted(ch for ch in FORBIDDEN_NAME_CHARS if ch in value)
        if bad:
            msg = f"Employee name must not contain {', '.join(repr(ch) for ch in bad)}"
            raise ValueError(msg)
        return value

    @abstractmethod
    def salary(self) -> Decimal:
        """Pay owed for the hours accrued so far."""

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison used for lookups."""
        return self.name.lower() == name.lower()

    def accrue_hours(self, hours: int) -> ValidationResult:
        """Add *hours* to the running total.

        Negative deltas are rejected and leave ``hours_worked`` unchanged.
        """
        vr = validate_hours(hours)
        if vr.valid:
            self.hours_worked += hours
        return vr

    def summary(self) -> dict[str, Any]:
        """Flat view used by service payloads."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "base_salary": self.base_salary,
            "hours_worked": self.hours_worked,
            "salary": self.salary(),
        }


class FixedEmployee(Employee):
    """Salaried employee; pay ignores hours."""

    kind: Literal[EmployeeKind.FIXED] = EmployeeKind.FIXED

    def salary(self) -> Decimal:
        return self.base_salary


class HourlyEmployee(Employee):
    """Hourly employee; ``base_salary`` is kept at 0 and not used for pay."""

    kind: Literal[EmployeeKind.HOURLY] = EmployeeKind.HOURLY
    hourly_rate: Decimal = Field(ge=0)

    def salary(self) -> Decimal:
        return self.hours_worked * self.hourly_rate

    def summary(self) -> dict[str, Any]:
        data = super().summary()
        data["hourly_rate"] = self.hourly_rate
        return data


AnyEmployee = Annotated[FixedEmployee | HourlyEmployee, Field(discriminator="kind")]

_employee_adapter: TypeAdapter[FixedEmployee | HourlyEmployee] = TypeAdapter(AnyEmployee)


def employee_from_dict(data: dict[str, Any]) -> FixedEmployee | HourlyEmployee:
    """Validate a ``kind``-tagged mapping into the matching variant."""
    return _employee_adapter.validate_python(data)


def build_employee(kind: str | EmployeeKind, name: str, amount: Any) -> Employee:
    """Construct a fresh employee with ``hours_worked = 0``.

    *amount* is the fixed salary for ``fixed`` and the hourly rate for
    ``hourly``.

    Raises:
        ValueError: Unknown kind, malformed amount, or a field rule
            violation (pydantic's ``ValidationError`` is a ``ValueError``).
    """
    resolved = kind if isinstance(kind, EmployeeKind) else parse_kind(kind)
    value = parse_amount(amount)
    if resolved is EmployeeKind.FIXED:
        return FixedEmployee(name=name, base_salary=value)
    return HourlyEmployee(name=name, hourly_rate=value)
