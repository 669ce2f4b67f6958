"""Tests for PerformanceScheduler."""

import pytest

from gigledger.domain.types import ErrorKind
from gigledger.infrastructure.ledger import Ledger
from gigledger.services.query import QueryFacade
from gigledger.services.scheduler import PerformanceScheduler
from tests.conftest import register, schedule


class TestSchedulePerformance:
    def test_success(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        result = PerformanceScheduler(ledger).schedule_performance(
            "wallet_1", "MainStage", 2, 20250516
        )
        assert result.ok is True
        assert result.op == "schedule_performance"
        assert result.data["id"] == 1
        assert result.data["performance"] == {
            "performer_id": "wallet_1",
            "venue": "MainStage",
            "duration": 2,
            "payment_amount": 200,
            "payment_status": "scheduled",
            "date": 20250516,
        }

    def test_stored_record_matches(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        pid = schedule(ledger, "wallet_1", duration=3)["id"]
        stored = ledger.get_performance(pid)
        assert stored is not None
        assert stored.payment_amount == 300
        assert stored.payment_status == "scheduled"

    def test_ids_are_sequential(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        register(ledger, "wallet_2", "Bob", 50)
        ids = [
            schedule(ledger, "wallet_1")["id"],
            schedule(ledger, "wallet_2")["id"],
            schedule(ledger, "wallet_1")["id"],
        ]
        assert ids == [1, 2, 3]

    @pytest.mark.parametrize(("duration", "rate"), [(1, 100), (0.5, 80), (4, 0), (2, -10)])
    def test_payment_amount_is_duration_times_rate(
        self, ledger: Ledger, duration: float, rate: float
    ) -> None:
        register(ledger, "wallet_1", "Alice", rate)
        data = schedule(ledger, "wallet_1", duration=duration)
        assert data["performance"]["payment_amount"] == duration * rate

    def test_payment_is_snapshot_of_rate(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        schedule(ledger, "wallet_1", duration=2)
        register(ledger, "wallet_1", "Alice", 500)
        second = schedule(ledger, "wallet_1", duration=2)
        assert ledger.get_performance(1).payment_amount == 200  # type: ignore[union-attr]
        assert second["performance"]["payment_amount"] == 1000

    def test_venue_and_date_are_unvalidated(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        data = schedule(ledger, "wallet_1", venue="", date=-7)
        assert data["performance"]["venue"] == ""
        assert data["performance"]["date"] == -7

    @pytest.mark.parametrize("date", [20250516.5, 2**70])
    def test_date_any_numeric_token(self, ledger: Ledger, date: int | float) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        data = schedule(ledger, "wallet_1", date=date)
        assert data["performance"]["date"] == date

    def test_does_not_change_total_earned(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        schedule(ledger, "wallet_1")
        details = QueryFacade(ledger).get_performer_details("wallet_1").data["performer"]
        assert details["total_earned"] == 0


class TestScheduleFailures:
    @pytest.mark.parametrize("duration", [0, -1, -0.01])
    def test_invalid_duration(self, ledger: Ledger, duration: float) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        result = PerformanceScheduler(ledger).schedule_performance(
            "wallet_1", "MainStage", duration, 20250516
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DURATION"
        assert result.error.kind is ErrorKind.INVALID_DURATION
        assert result.error.detail["token"] == "ERR-INVALID-DURATION"
        assert "id" not in result.data

    def test_invalid_duration_does_not_allocate_id(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        scheduler = PerformanceScheduler(ledger)
        assert not scheduler.schedule_performance("wallet_1", "MainStage", 0, 20250516).ok
        assert not scheduler.schedule_performance("wallet_1", "MainStage", -3, 20250516).ok
        assert ledger.performances() == []
        assert schedule(ledger, "wallet_1")["id"] == 1

    def test_unknown_performer(self, ledger: Ledger) -> None:
        result = PerformanceScheduler(ledger).schedule_performance(
            "wallet_unknown", "MainStage", 2, 20250516
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "PERFORMER_NOT_FOUND"
        assert result.error.detail["token"] == "ERR-PERFORMER-NOT-FOUND"
        assert result.error.detail["sender"] == "wallet_unknown"

    def test_unknown_performer_wins_over_bad_duration(self, ledger: Ledger) -> None:
        result = PerformanceScheduler(ledger).schedule_performance(
            "wallet_unknown", "MainStage", 0, 20250516
        )
        assert result.error is not None
        assert result.error.code == "PERFORMER_NOT_FOUND"

    def test_unknown_performer_does_not_allocate_id(self, ledger: Ledger) -> None:
        PerformanceScheduler(ledger).schedule_performance("nobody", "MainStage", 2, 20250516)
        register(ledger, "wallet_1", "Alice", 100)
        assert schedule(ledger, "wallet_1")["id"] == 1

    def test_other_senders_record_is_not_used(self, ledger: Ledger) -> None:
        register(ledger, "wallet_1", "Alice", 100)
        result = PerformanceScheduler(ledger).schedule_performance(
            "wallet_2", "MainStage", 2, 20250516
        )
        assert result.ok is False
