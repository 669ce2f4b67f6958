"""Locate and read ``gigledger.toml``.

The file is searched from the working directory upwards, so commands
run anywhere inside a ledger directory pick up its settings.
``GIGLEDGER_CONFIG`` names a file explicitly and disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from gigledger.config.models import GigConfig

CONFIG_FILENAME = "gigledger.toml"
CONFIG_ENV_VAR = "GIGLEDGER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``gigledger.toml`` at or above *start*, or None.

    When ``GIGLEDGER_CONFIG`` is set, only that path is considered.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None) -> GigConfig:
    """Parse and validate *path*; a missing file means all defaults.

    Raises:
        click.ClickException: The file is not valid TOML or a section
            has values of the wrong type.
    """
    if path is None or not path.is_file():
        return GigConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    try:
        return GigConfig.model_validate(data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid config in {path}: {exc}") from exc
