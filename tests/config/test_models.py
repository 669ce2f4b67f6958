"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from gigledger.config.models import GigConfig, LedgerConfig


class TestLedgerConfig:
    def test_defaults(self) -> None:
        cfg = LedgerConfig()
        assert cfg.name == "my-ledger"
        assert cfg.persist is True
        assert cfg.db_filename == "gigledger.db"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            LedgerConfig().persist = False  # type: ignore[misc]


class TestGigConfig:
    def test_sparse_validate(self) -> None:
        cfg = GigConfig.model_validate({"ledger": {"persist": False}})
        assert cfg.ledger.persist is False
        assert cfg.ledger.name == "my-ledger"
