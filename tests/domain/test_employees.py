"""Tests for the employee models, accrual rules, and value parsing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from payledger.domain.employees import (
    Employee,
    FixedEmployee,
    HourlyEmployee,
    build_employee,
    employee_from_dict,
    parse_amount,
    parse_hours,
    validate_hours,
)
from payledger.domain.types import EmployeeKind


class TestParseAmount:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1000", Decimal("1000")),
            ("1000.0", Decimal("1000.0")),
            (" 15.5 ", Decimal("15.5")),
            (".5", Decimal("0.5")),
            ("1e3", Decimal("1000")),
            (12, Decimal(12)),
            (Decimal("7.25"), Decimal("7.25")),
        ],
    )
    def test_valid(self, raw: object, expected: Decimal) -> None:
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1,000", "NaN", "Infinity", "1_000", "12a"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_amount(raw)


class TestParseHours:
    @pytest.mark.parametrize("raw,expected", [("10", 10), ("+3", 3), ("-4", -4), (7, 7), (" 2", 2)])
    def test_valid(self, raw: object, expected: int) -> None:
        assert parse_hours(raw) == expected

    @pytest.mark.parametrize("raw", ["", "ten", "1.5", "1_0", "3h"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_hours(raw)


class TestValidateHours:
    def test_zero_and_positive_are_valid(self) -> None:
        assert validate_hours(0).valid
        assert validate_hours(40).valid

    def test_negative_is_invalid(self) -> None:
        vr = validate_hours(-1)
        assert vr.valid is False
        assert vr.errors == ["Hours worked cannot be negative."]


class TestFixedEmployee:
    def test_defaults(self) -> None:
        emp = FixedEmployee(name="Ana", base_salary=Decimal("1000"))
        assert emp.kind is EmployeeKind.FIXED
        assert emp.hours_worked == 0
        assert emp.salary() == Decimal("1000")

    def test_salary_ignores_hours(self) -> None:
        emp = FixedEmployee(name="Ana", base_salary=Decimal("1000"))
        for hours in (5, 0, 120):
            emp.accrue_hours(hours)
        assert emp.hours_worked == 125
        assert emp.salary() == Decimal("1000")

    def test_negative_salary_rejected(self) -> None:
        with pytest.raises(ValueError):
            FixedEmployee(name="Ana", base_salary=Decimal("-1"))


class TestHourlyEmployee:
    def test_base_salary_slot_is_zero(self) -> None:
        emp = HourlyEmployee(name="Luis", hourly_rate=Decimal("15"))
        assert emp.kind is EmployeeKind.HOURLY
        assert emp.base_salary == Decimal(0)
        assert emp.salary() == Decimal(0)

    @pytest.mark.parametrize(
        "hours,rate,expected",
        [
            (10, "15", "150"),
            (0, "15", "0"),
            (3, "0.1", "0.3"),
            (7, "0", "0"),
            (40, "12.345", "493.800"),
        ],
    )
    def test_salary_is_exact_product(self, hours: int, rate: str, expected: str) -> None:
        emp = HourlyEmployee(name="Luis", hourly_rate=Decimal(rate))
        emp.accrue_hours(hours)
        assert emp.salary() == Decimal(expected)

    def test_summary_includes_rate(self) -> None:
        emp = HourlyEmployee(name="Luis", hourly_rate=Decimal("15"))
        summary = emp.summary()
        assert summary["hourly_rate"] == Decimal("15")
        assert summary["kind"] == "hourly"


class TestAccrual:
    def test_accrual_is_additive(self) -> None:
        emp = FixedEmployee(name="Ana", base_salary=Decimal("1"))
        assert emp.accrue_hours(4).valid
        assert emp.accrue_hours(6).valid
        assert emp.hours_worked == 10

    def test_negative_accrual_leaves_hours_unchanged(self) -> None:
        emp = HourlyEmployee(name="Luis", hourly_rate=Decimal("15"))
        emp.accrue_hours(8)
        vr = emp.accrue_hours(-3)
        assert vr.valid is False
        assert emp.hours_worked == 8

    def test_direct_negative_assignment_rejected(self) -> None:
        emp = FixedEmployee(name="Ana", base_salary=Decimal("1"))
        with pytest.raises(ValueError):
            emp.hours_worked = -1


class TestNames:
    @pytest.mark.parametrize("name", ["", "   ", "Ana,Maria", "Ana\nMaria", "Ana\r"])
    def test_unsafe_names_rejected(self, name: str) -> None:
        with pytest.raises(ValueError):
            FixedEmployee(name=name, base_salary=Decimal("1"))

    def test_match_is_case_insensitive(self) -> None:
        emp = FixedEmployee(name="Ana", base_salary=Decimal("1"))
        assert emp.matches("ANA")
        assert emp.matches("ana")
        assert not emp.matches("Anabel")

    def test_match_is_plain_lowercase(self) -> None:
        emp = FixedEmployee(name="Straße", base_salary=Decimal("1"))
        assert emp.matches("STRAßE")
        assert not emp.matches("STRASSE")


class TestBuildEmployee:
    def test_fixed(self) -> None:
        emp = build_employee("fixed", "Ana", "1000")
        assert isinstance(emp, FixedEmployee)
        assert emp.base_salary == Decimal("1000")

    def test_hourly_by_menu_code(self) -> None:
        emp = build_employee("2", "Luis", "15")
        assert isinstance(emp, HourlyEmployee)
        assert emp.hourly_rate == Decimal("15")
        assert emp.base_salary == Decimal(0)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown employee kind"):
            build_employee("3", "Ana", "1000")

    def test_bad_amount(self) -> None:
        with pytest.raises(ValueError):
            build_employee("fixed", "Ana", "lots")

    def test_negative_rate(self) -> None:
        with pytest.raises(ValueError):
            build_employee("hourly", "Luis", "-2")


class TestTaggedUnion:
    def test_dispatch_on_kind(self) -> None:
        hourly = employee_from_dict(
            {"kind": EmployeeKind.HOURLY, "name": "Luis", "hourly_rate": Decimal("15")}
        )
        fixed = employee_from_dict(
            {"kind": EmployeeKind.FIXED, "name": "Ana", "base_salary": Decimal("1000")}
        )
        assert isinstance(hourly, HourlyEmployee)
        assert isinstance(fixed, FixedEmployee)

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Employee(kind=EmployeeKind.FIXED, name="Ana")  # type: ignore[abstract]
