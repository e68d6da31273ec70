"""Rich Console factory and theme for payledger output.

Consoles render into a StringIO buffer so that renderers keep a
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAY_THEME = Theme(
    {
        "pay.ok": "bold green",
        "pay.error": "bold red",
        "pay.warning": "bold yellow",
        "pay.op": "bold cyan",
        "pay.key": "dim",
        "pay.name": "bold",
        "pay.money": "magenta",
        "pay.path": "dim",
        "pay.kind.fixed": "green",
        "pay.kind.hourly": "blue",
    }
)

_KIND_STYLES: dict[str, str] = {
    "fixed": "pay.kind.fixed",
    "hourly": "pay.kind.hourly",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=PAY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Rich style name for an employee kind ("" if unknown)."""
    return _KIND_STYLES.get(kind, "")
