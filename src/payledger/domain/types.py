"""Employee kinds and roster file formats."""

from __future__ import annotations

from enum import StrEnum


class EmployeeKind(StrEnum):
    """Pay variants an employee can be registered as."""

    FIXED = "fixed"
    HOURLY = "hourly"


class RosterFormat(StrEnum):
    """Line layouts understood by the roster file reader/writer.

    ``legacy`` is ``name,salary,hours`` and cannot tell hourly employees
    apart. ``tagged`` appends ``kind,rate`` so both variants round-trip.
    """

    LEGACY = "legacy"
    TAGGED = "tagged"


# Menu codes accepted for the employee kind (1 = fixed, 2 = hourly).
KIND_CODES: dict[str, EmployeeKind] = {
    "1": EmployeeKind.FIXED,
    "2": EmployeeKind.HOURLY,
}


def parse_kind(raw: str) -> EmployeeKind:
    """Resolve *raw* to an :class:`EmployeeKind`.

    Accepts the kind names (case-insensitive) and the menu codes ``1``/``2``.

    Raises:
        ValueError: If *raw* names no known kind.
    """
    token = str(raw).strip().lower()
    if token in KIND_CODES:
        return KIND_CODES[token]
    try:
        return EmployeeKind(token)
    except ValueError:
        choices = ", ".join(k.value for k in EmployeeKind)
        msg = f"Unknown employee kind: {raw!r} (expected one of {choices}, or 1/2)"
        raise ValueError(msg) from None
