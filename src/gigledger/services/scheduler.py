"""PerformanceScheduler — validated creation of performances.

Pipeline: VALIDATE → ALLOCATE → PERSIST → RESPOND

Validation runs before an id is claimed, so rejected requests leave the
counter untouched and ids stay dense. No money moves here; the payment
amount is a snapshot of ``duration * hourly_rate`` at scheduling time.
"""

from __future__ import annotations

from gigledger.domain.models import Performance
from gigledger.domain.rules import check_schedule, payment_amount
from gigledger.domain.types import ErrorKind, PaymentStatus
from gigledger.services.base import BaseService
from gigledger.services.result import ServiceResult
from gigledger.services.telemetry import trace_span, traced

_OP = "schedule_performance"


class PerformanceScheduler(BaseService):
    """Creates performance records against registered performers."""

    @traced
    def schedule_performance(
        self,
        sender: str,
        venue: str,
        duration: float,
        date: int | float,
    ) -> ServiceResult:
        """Schedule a performance for the performer registered as *sender*.

        Returns the new performance id in ``data["id"]`` on success.
        Fails with ``PERFORMER_NOT_FOUND`` if *sender* has no active
        performer record, then with ``INVALID_DURATION`` if *duration*
        is not strictly positive.
        """
        with self._ledger.transaction() as txn:
            # ── VALIDATE ──────────────────────────────────────────
            with trace_span("validate") as span:
                performer = txn.get_performer(sender)
                failure = check_schedule(performer, duration)
                if span:
                    span.annotate("outcome", failure.value if failure else "ok")

            if performer is None or failure is ErrorKind.PERFORMER_NOT_FOUND:
                return self._reject(
                    _OP,
                    ErrorKind.PERFORMER_NOT_FOUND,
                    f"No active performer registered for '{sender}'",
                    sender=sender,
                )
            if failure is ErrorKind.INVALID_DURATION:
                return self._reject(
                    _OP,
                    failure,
                    f"Duration must be greater than zero, got {duration}",
                    sender=sender,
                    duration=duration,
                )

            # ── ALLOCATE + PERSIST ────────────────────────────────
            with trace_span("allocate") as span:
                performance = Performance(
                    performer_id=sender,
                    venue=venue,
                    duration=duration,
                    payment_amount=payment_amount(duration, performer.hourly_rate),
                    payment_status=PaymentStatus.SCHEDULED,
                    date=date,
                )
                performance_id = txn.add_performance(performance)
                if span:
                    span.annotate("performance_id", performance_id)

        # ── RESPOND ───────────────────────────────────────────────
        self._log.info(
            "performance.scheduled",
            sender=sender,
            performance_id=performance_id,
            payment_amount=performance.payment_amount,
        )
        return ServiceResult(
            ok=True,
            op=_OP,
            data={"id": performance_id, "performance": performance.to_view()},
        )
