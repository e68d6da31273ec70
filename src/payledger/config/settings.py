"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PAYLEDGER_*`` prefix
  3. TOML file    — ``payledger.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`payledger.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from payledger.config.discovery import find_config
from payledger.config.models import RosterConfig, ShellConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``payledger.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PayledgerSettings(BaseSettings):
    """Settings for the payledger CLI, frozen after construction.

    Attributes:
        ledger_root: Directory relative roster paths resolve against
            (parent of ``payledger.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        roster_file: Explicit ``--roster`` override of ``roster.path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PAYLEDGER_",
        "env_nested_delimiter": "__",
    }

    ledger_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    roster_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    roster: RosterConfig = Field(default_factory=RosterConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        ledger_root: Path | None = None,
        roster_file: str | Path | None = None,
        **cli_flags: Any,
    ) -> PayledgerSettings:
        """Construct settings from a CLI invocation.

        Discovers ``payledger.toml`` via walk-up (or explicit *config_path*),
        resolves *ledger_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.  A relative
        *roster_file* is taken from the current directory, not the root.

        Raises:
            click.ClickException: Invalid TOML or a setting that fails
                validation.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(ledger_root)

        resolved_root = ledger_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        overrides = dict(cli_flags)
        if roster_file is not None:
            # --roster is relative to where the user typed it
            overrides["roster_file"] = Path.cwd() / roster_file

        _tls.toml_path = toml_path
        try:
            return cls(
                ledger_root=resolved_root,
                config_path=toml_path,
                **overrides,
            )
        except ValidationError as exc:
            import click

            source = toml_path or "environment"
            msg = f"Invalid configuration ({source}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

    @property
    def roster_path(self) -> Path:
        """Absolute-or-root-relative path of the roster file."""
        path = self.roster_file if self.roster_file is not None else Path(self.roster.path)
        if path.is_absolute():
            return path
        return self.ledger_root / path
