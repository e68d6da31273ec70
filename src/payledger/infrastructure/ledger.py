"""Ledger — the single dependency injected into every service.

A Ledger owns one :class:`Registry` for the lifetime of the process and
knows where and how the roster is persisted.  It is constructed
explicitly by the CLI context (or a test) and never shared between
threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payledger.domain.registry import Registry

if TYPE_CHECKING:
    from pathlib import Path

    from payledger.config.settings import PayledgerSettings
    from payledger.domain.types import RosterFormat

logger = logging.getLogger(__name__)


class Ledger:
    """In-memory registry plus its persistence settings."""

    def __init__(self, settings: PayledgerSettings, registry: Registry | None = None) -> None:
        self._settings = settings
        self.registry = registry if registry is not None else Registry()
        logger.debug("Ledger opened; roster file %s", self.roster_path)

    @property
    def settings(self) -> PayledgerSettings:
        return self._settings

    @property
    def roster_path(self) -> Path:
        return self._settings.roster_path

    @property
    def roster_format(self) -> RosterFormat:
        return self._settings.roster.format

    @property
    def replace_on_load(self) -> bool:
        return self._settings.roster.replace_on_load

    @property
    def encoding(self) -> str:
        return self._settings.roster.encoding
