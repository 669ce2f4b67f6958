"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GIGLEDGER_*`` prefix
  3. TOML file    — ``gigledger.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from gigledger.config.discovery import find_config, load_config
from gigledger.config.models import LedgerConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``gigledger.toml`` file discovered via walk-up.

    Only the keys present in the file are contributed, so env vars for
    other keys in the same section still apply.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = load_config(toml_path).model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class LedgerSettings(BaseSettings):
    """Unified settings for the gigledger CLI.

    Stored on the :class:`~gigledger.commands._context.AppContext` at the
    CLI root level and frozen after construction.

    Attributes:
        ledger_root: Directory holding ``.gigledger/`` (parent of
            ``gigledger.toml``, or CWD if no config found).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GIGLEDGER_",
        "env_nested_delimiter": "__",
    }

    ledger_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    in_memory: bool = False

    # --- TOML sections ---
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)

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
        **cli_flags: Any,
    ) -> LedgerSettings:
        """Construct settings from a CLI invocation.

        Discovers ``gigledger.toml`` via walk-up (or explicit
        *config_path*), resolves *ledger_root* from the config file's
        parent directory, and merges CLI flags as highest-priority
        overrides.
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

        _tls.toml_path = toml_path
        try:
            return cls(
                ledger_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
