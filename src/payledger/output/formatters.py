"""Output mode selection for ServiceResult.

Humans get Rich rendering, scripts get ``--quiet`` one-liners, and
machines get the ServiceResult as JSON (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from payledger.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from payledger.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings* (defaults: human)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
