"""Tests for BaseService helpers."""

from gigledger.domain.types import ErrorKind
from gigledger.infrastructure.ledger import Ledger
from gigledger.services.base import BaseService


class TestReject:
    def test_builds_failed_result(self, ledger: Ledger) -> None:
        result = BaseService(ledger)._reject(
            "schedule_performance",
            ErrorKind.PERFORMER_NOT_FOUND,
            "No performer",
            sender="x",
        )
        assert result.ok is False
        assert result.op == "schedule_performance"
        assert result.error is not None
        assert result.error.message == "No performer"
        assert result.error.detail == {"token": "ERR-PERFORMER-NOT-FOUND", "sender": "x"}
