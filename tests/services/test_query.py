"""Tests for QueryFacade."""

import pytest

from gigledger.infrastructure.ledger import Ledger
from gigledger.services.query import QueryFacade
from tests.conftest import register, schedule


class TestGetPerformerDetails:
    def test_registered(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        result = QueryFacade(ledger).get_performer_details("wallet_1")
        assert result.ok is True
        assert result.op == "get_performer"
        assert result.data == {
            "identity": "wallet_1",
            "performer": {"name": "Alice", "hourly_rate": 100, "total_earned": 0, "active": True},
        }

    def test_unknown_returns_default_view(self, ledger: Ledger) -> None:
        result = QueryFacade(ledger).get_performer_details("nonexistent")
        assert result.ok is True
        assert result.data["performer"] == {
            "name": "",
            "hourly_rate": 0,
            "total_earned": 0,
            "active": False,
        }

    def test_does_not_create_record(self, ledger: Ledger) -> None:
        QueryFacade(ledger).get_performer_details("nonexistent")
        assert ledger.get_performer("nonexistent") is None


class TestGetPerformance:
    def test_stored(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        schedule(ledger, "wallet_1")
        result = QueryFacade(ledger).get_performance(1)
        assert result.ok is True
        assert result.data["id"] == 1
        assert result.data["performance"]["venue"] == "MainStage"

    @pytest.mark.parametrize("performance_id", [0, 1, 99, -1])
    def test_unknown_returns_default_view(self, ledger: Ledger, performance_id: int) -> None:
        result = QueryFacade(ledger).get_performance(performance_id)
        assert result.ok is True
        assert result.data["performance"] == {
            "performer_id": "",
            "venue": "",
            "duration": 0,
            "payment_amount": 0,
            "payment_status": "scheduled",
            "date": 0,
        }


class TestListings:
    def test_list_performers(self, ledger: Ledger) -> None:
        register(ledger, "wallet_2", "Bob", 50)
        register(ledger, "wallet_1", "Alice", 100)
        result = QueryFacade(ledger).list_performers()
        assert result.data["count"] == 2
        assert [item["identity"] for item in result.data["items"]] == ["wallet_1", "wallet_2"]
        assert result.data["items"][0]["name"] == "Alice"

    def test_list_performers_empty(self, ledger: Ledger) -> None:
        result = QueryFacade(ledger).list_performers()
        assert result.ok is True
        assert result.data == {"items": [], "count": 0}

    def test_list_performances(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        register(ledger, "wallet_2", "Bob", 50)
        schedule(ledger, "wallet_1")
        schedule(ledger, "wallet_2")
        schedule(ledger, "wallet_1")
        result = QueryFacade(ledger).list_performances()
        assert [item["id"] for item in result.data["items"]] == [1, 2, 3]

    def test_list_performances_for_performer(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        register(ledger, "wallet_2", "Bob", 50)
        schedule(ledger, "wallet_1")
        schedule(ledger, "wallet_2")
        schedule(ledger, "wallet_1")
        result = QueryFacade(ledger).list_performances(performer_id="wallet_1")
        assert result.data["count"] == 2
        assert [item["id"] for item in result.data["items"]] == [1, 3]
