"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller
extracts the text via ``get_output(console)``.  Renderers are dispatched
by ``result.op`` in :func:`render_result`; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from payledger.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from payledger.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "query_salary":
        return str(result.data.get("salary", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pay.ok")
    op = Text(f"  {result.op}", style="pay.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pay.key")
    if key == "name":
        v = Text(str(value), style="pay.name")
    elif key in ("salary", "base_salary", "hourly_rate", "total_payroll"):
        v = Text(str(value), style="pay.money")
    elif key == "path":
        v = Text(str(value), style="pay.path")
    elif key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    line = f"{prefix}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pay.error")
    op = Text(f"  {result.op}", style="pay.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err and err.code:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render register_employee / accrue_hours results."""
    _status_line(console, result)
    keys = (
        "name",
        "kind",
        "base_salary",
        "hourly_rate",
        "hours_added",
        "hours_worked",
        "salary",
        "position",
    )
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_salary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    name = Text(str(d.get("name", "?")), style="pay.name")
    kind = Text(f" ({d.get('kind', '?')})", style=style_for_kind(str(d.get("kind", ""))))
    salary = Text(str(d.get("salary", "")), style="pay.money")
    console.print(name, kind, Text(": "), salary, sep="")
    if verbose:
        _render_meta(console, result)


def _render_roster_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list_employees as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="pay.name")
    table.add_column("Kind")
    table.add_column("Base", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Hours", justify="right")
    table.add_column("Pay", justify="right", style="pay.money")

    for index, item in enumerate(items, start=1):
        kind = str(item.get("kind", ""))
        table.add_row(
            str(index),
            str(item.get("name", "")),
            Text(kind, style=style_for_kind(kind)),
            str(item.get("base_salary", "")),
            str(item.get("hourly_rate", "-")),
            str(item.get("hours_worked", "")),
            str(item.get("salary", "")),
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} employees")
    console.print(f"total payroll: {result.data.get('total_payroll', 0)}")
    if verbose:
        _render_meta(console, result)


def _render_persist(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render save_roster / load_roster results."""
    _status_line(console, result)
    for key in ("path", "format", "mode", "saved", "loaded", "total"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "register_employee": _render_mutation,
    "accrue_hours": _render_mutation,
    "query_salary": _render_salary,
    "list_employees": _render_roster_table,
    "save_roster": _render_persist,
    "load_roster": _render_persist,
}
