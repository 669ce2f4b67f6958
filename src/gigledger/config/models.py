"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gigledger.toml only contains
overrides. A fresh ledger needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LedgerConfig(BaseModel):
    """[ledger] section."""

    model_config = {"frozen": True}

    name: str = "my-ledger"
    persist: bool = True
    db_filename: str = "gigledger.db"


class GigConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
