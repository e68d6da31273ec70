"""Tests for op-specific Rich renderers."""

from __future__ import annotations

from decimal import Decimal

from payledger.output.renderers import render_quiet, render_result
from payledger.services.result import ErrorCode, ServiceResult, failure


def _list_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="list_employees",
        data={
            "items": [
                {
                    "name": "Ana",
                    "kind": "fixed",
                    "base_salary": Decimal("1000"),
                    "hours_worked": 0,
                    "salary": Decimal("1000"),
                },
                {
                    "name": "Luis",
                    "kind": "hourly",
                    "base_salary": Decimal(0),
                    "hourly_rate": Decimal("15"),
                    "hours_worked": 10,
                    "salary": Decimal("150"),
                },
            ],
            "count": 2,
            "total_payroll": Decimal("1150"),
        },
    )


class TestRenderResult:
    def test_employee_table(self) -> None:
        output = render_result(_list_result())
        for text in ("Name", "Pay", "Ana", "Luis", "hourly", "150", "2 employees"):
            assert text in output
        assert "total payroll: 1150" in output

    def test_salary_line(self) -> None:
        result = ServiceResult(
            ok=True,
            op="query_salary",
            data={"name": "Luis", "kind": "hourly", "salary": Decimal("150")},
        )
        assert render_result(result) == "Luis (hourly): 150"

    def test_mutation_fields(self) -> None:
        result = ServiceResult(
            ok=True,
            op="accrue_hours",
            data={"name": "Luis", "hours_added": 4, "hours_worked": 14},
        )
        output = render_result(result)
        assert output.splitlines()[0].startswith("OK")
        assert "hours_added: 4" in output
        assert "hours_worked: 14" in output

    def test_persist_fields(self) -> None:
        result = ServiceResult(
            ok=True,
            op="load_roster",
            data={"path": "employees.txt", "loaded": 2, "total": 4, "mode": "append"},
        )
        output = render_result(result)
        assert "mode: append" in output
        assert "total: 4" in output

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="something_else", data={"k": [1, 2]})
        output = render_result(result)
        assert "something_else" in output
        assert "k: [1,2]" in output

    def test_error_with_detail_in_verbose(self) -> None:
        result = failure("load_roster", ErrorCode.PARSE_FAILURE, "bad line", line=3, applied=2)
        quiet = render_result(result)
        loud = render_result(result, verbose=True)
        assert "line: 3" not in quiet
        assert "line: 3" in loud
        assert "applied: 2" in loud

    def test_verbose_meta(self) -> None:
        result = ServiceResult(
            ok=True,
            op="save_roster",
            data={"saved": 1},
            meta={"telemetry": {"name": "RosterService.save", "duration_ms": 1.5}},
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "RosterService.save" in output


class TestRenderQuiet:
    def test_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="register_employee")) == (
            "OK: register_employee"
        )

    def test_error(self) -> None:
        result = failure("query_salary", ErrorCode.NOT_FOUND, "No employee named 'X'")
        assert render_quiet(result) == "ERROR: query_salary — No employee named 'X'"
