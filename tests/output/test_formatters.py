"""Tests for format_result and OutputSettings."""

import json
from decimal import Decimal

from payledger.output.formatters import OutputSettings, format_result
from payledger.services.result import ErrorCode, ServiceResult, failure


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


class TestJson:
    def test_success(self) -> None:
        output = format_result(
            _ok("query_salary", name="Luis", salary=Decimal("150")),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["name"] == "Luis"
        assert Decimal(str(data["data"]["salary"])) == Decimal("150")

    def test_error(self) -> None:
        output = format_result(
            failure("query_salary", ErrorCode.NOT_FOUND, "No employee named 'X'"),
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"


class TestQuiet:
    def test_success(self) -> None:
        output = format_result(_ok("save_roster", saved=2), settings=OutputSettings(quiet=True))
        assert output == "OK: save_roster"

    def test_salary_prints_only_amount(self) -> None:
        result = _ok("query_salary", name="Luis", salary=Decimal("150"))
        assert format_result(result, settings=OutputSettings(quiet=True)) == "150"

    def test_error(self) -> None:
        result = failure("load_roster", ErrorCode.IO_FAILURE, "Could not read roster")
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: load_roster")
        assert "Could not read roster" in output


class TestDefault:
    def test_human_success(self) -> None:
        output = format_result(_ok("save_roster", path="/x/employees.txt", saved=2))
        assert "OK" in output
        assert "save_roster" in output
        assert "saved: 2" in output

    def test_human_error(self) -> None:
        output = format_result(failure("accrue_hours", ErrorCode.INVALID_HOURS, "negative"))
        assert "ERROR" in output
        assert "negative" in output
        assert "INVALID_HOURS" in output
