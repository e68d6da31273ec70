"""Shared pytest fixtures and helpers for payledger tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from payledger.config.models import RosterConfig
from payledger.config.settings import PayledgerSettings
from payledger.infrastructure.ledger import Ledger
from payledger.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep the developer's PAYLEDGER_* environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("PAYLEDGER_"):
            monkeypatch.delenv(key)
    yield
    disable_telemetry()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def ledger_root(tmp_path: Path) -> Path:
    """Temporary directory holding the roster file."""
    return tmp_path


def make_ledger(root: Path, **roster: Any) -> Ledger:
    """Ledger on *root* with optional ``[roster]`` overrides."""
    settings = PayledgerSettings.from_cli(ledger_root=root, roster=RosterConfig(**roster))
    return Ledger(settings)


@pytest.fixture
def ledger(ledger_root: Path) -> Ledger:
    """Empty ledger using the faithful legacy format and append-on-load."""
    return make_ledger(ledger_root)


@pytest.fixture
def tagged_ledger(ledger_root: Path) -> Ledger:
    return make_ledger(ledger_root, format="tagged")


@pytest.fixture
def replacing_ledger(ledger_root: Path) -> Ledger:
    return make_ledger(ledger_root, replace_on_load=True)


@pytest.fixture
def _isolated_root(ledger_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests with CWD at a temp directory (roster lands there)."""
    monkeypatch.chdir(ledger_root)


def register(ledger: Ledger, kind: str, name: str, amount: Any) -> dict[str, Any]:
    """Register via PayrollService, asserting success."""
    from payledger.services.payroll import PayrollService

    result = PayrollService(ledger).register_employee(kind, name, amount)
    assert result.ok, result.error
    return result.data


def accrue(ledger: Ledger, name: str, hours: Any) -> dict[str, Any]:
    """Accrue hours via PayrollService, asserting success."""
    from payledger.services.payroll import PayrollService

    result = PayrollService(ledger).accrue_hours(name, hours)
    assert result.ok, result.error
    return result.data
