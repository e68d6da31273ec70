"""Locate ``payledger.toml``.

``PAYLEDGER_CONFIG`` names the file outright.  Otherwise the nearest
``payledger.toml`` in the starting directory or one of its parents is
used, so a ledger can be driven from any subdirectory of its root.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "payledger.toml"
CONFIG_ENV_VAR = "PAYLEDGER_CONFIG"


def iter_candidates(start: Path | None = None) -> Iterator[Path]:
    """Yield each place a config file may live, nearest first."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a ledger rooted at or above *start*.

    An explicit ``PAYLEDGER_CONFIG`` that does not exist yields None
    rather than falling back to the walk-up search.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return next((c for c in iter_candidates(start) if c.is_file()), None)
