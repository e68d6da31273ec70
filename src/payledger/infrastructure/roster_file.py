"""Flat-file roster codec — one employee per line, comma-separated.

Line layouts (no header, no quoting):

- ``legacy``: ``name,base_salary,hours_worked``.  Every line is read back
  as a :class:`FixedEmployee`; hourly employees come back with their
  stored ``base_salary`` of 0 and lose their rate.
- ``tagged``: ``name,base_salary,hours_worked,kind,hourly_rate``.  The
  reader also accepts 3-field legacy lines (as fixed employees).

Names cannot contain commas; the models reject them at registration.
Blank lines are skipped by the reader.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from payledger.domain.employees import (
    Employee,
    FixedEmployee,
    HourlyEmployee,
    employee_from_dict,
    parse_amount,
    parse_hours,
)
from payledger.domain.types import EmployeeKind, RosterFormat

FIELD_SEPARATOR = ","

_FIELD_COUNTS: dict[RosterFormat, tuple[int, ...]] = {
    RosterFormat.LEGACY: (3,),
    RosterFormat.TAGGED: (3, 5),
}


class RosterParseError(ValueError):
    """A roster line could not be turned into an employee."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}")


# ---------------------------------------------------------------------------
# Line codec
# ---------------------------------------------------------------------------


def encode_employee(employee: Employee, fmt: RosterFormat = RosterFormat.LEGACY) -> str:
    """Render one employee as a roster line (no trailing newline)."""
    fields = [employee.name, str(employee.base_salary), str(employee.hours_worked)]
    if fmt is RosterFormat.TAGGED:
        rate = employee.hourly_rate if isinstance(employee, HourlyEmployee) else 0
        fields += [employee.kind.value, str(rate)]
    return FIELD_SEPARATOR.join(fields)


def decode_line(
    line: str,
    fmt: RosterFormat = RosterFormat.LEGACY,
    *,
    line_no: int = 1,
) -> Employee:
    """Parse one roster line.

    Raises:
        RosterParseError: Wrong field count, unparsable or negative
            numbers, unknown kind, or an invalid name.
    """
    fields = line.split(FIELD_SEPARATOR)
    expected = _FIELD_COUNTS[fmt]
    if len(fields) not in expected:
        counts = " or ".join(str(n) for n in expected)
        raise RosterParseError(line_no, line, f"expected {counts} fields, got {len(fields)}")

    name, raw_salary, raw_hours = fields[:3]
    try:
        data = {
            "name": name,
            "base_salary": parse_amount(raw_salary),
            "hours_worked": parse_hours(raw_hours),
        }
        if len(fields) == 3:
            return FixedEmployee(**data)
        data["kind"] = EmployeeKind(fields[3].strip().lower())
        if data["kind"] is EmployeeKind.HOURLY:
            data["hourly_rate"] = parse_amount(fields[4])
        return employee_from_dict(data)
    except ValueError as exc:
        raise RosterParseError(line_no, line, _reason(exc)) from exc


def _reason(exc: ValueError) -> str:
    errors = getattr(exc, "errors", None)
    if callable(errors):
        first = errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ()))
        return f"{loc}: {first['msg']}" if loc else str(first["msg"])
    return str(exc)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_roster(
    path: Path,
    employees: Iterable[Employee],
    fmt: RosterFormat = RosterFormat.LEGACY,
    *,
    encoding: str = "utf-8",
) -> int:
    """Write *employees* to *path*, one line each, replacing the file.

    Every line is encoded before the file is opened, so an employee the
    *encoding* cannot represent leaves the previous roster intact.

    Returns the number of lines written.

    Raises:
        UnicodeEncodeError: A name the encoding cannot represent.
        OSError: The file cannot be written.
    """
    lines = [encode_employee(employee, fmt) + "\n" for employee in employees]
    path.write_bytes("".join(lines).encode(encoding))
    return len(lines)


def iter_roster(
    path: Path,
    fmt: RosterFormat = RosterFormat.LEGACY,
    *,
    encoding: str = "utf-8",
) -> Iterator[Employee]:
    """Yield employees from *path* in file order.

    Lines are parsed lazily, so a caller that appends as it iterates keeps
    every record yielded before a :class:`RosterParseError`.  The file is
    opened on first ``next()`` and closed when iteration ends or fails.

    Raises:
        OSError: The file is missing or unreadable.
        UnicodeDecodeError: Bytes the encoding cannot decode.
        RosterParseError: A malformed line.
    """
    with path.open(encoding=encoding) as fh:
        for line_no, raw in enumerate(fh, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            yield decode_line(line, fmt, line_no=line_no)
