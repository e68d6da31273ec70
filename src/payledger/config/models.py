"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, payledger.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, field_validator

from payledger.domain.types import RosterFormat


class RosterConfig(BaseModel):
    """[roster] section."""

    model_config = {"frozen": True}

    path: str = "employees.txt"
    format: RosterFormat = RosterFormat.LEGACY
    replace_on_load: bool = False
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"Unknown roster encoding: {v!r}"
            raise ValueError(msg) from None
        return v


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    save_on_exit: bool = False
    title: str = "Payroll Ledger"
