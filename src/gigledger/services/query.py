"""QueryFacade — read-only accessors over the ledger.

Lookups never fail: a miss returns the zero-value view with the same
fields as a stored record, so callers can render or compare it without
checking existence first.
"""

from __future__ import annotations

from gigledger.domain.models import Performance, Performer
from gigledger.services.base import BaseService
from gigledger.services.result import ServiceResult
from gigledger.services.telemetry import traced


class QueryFacade(BaseService):
    """Read-only queries. Never mutates ledger state."""

    @traced
    def get_performer_details(self, identity: str) -> ServiceResult:
        """Return the performer registered as *identity*, or the default view."""
        performer = self._ledger.get_performer(identity)
        if performer is None:
            performer = Performer.default()
        return ServiceResult(
            ok=True,
            op="get_performer",
            data={"identity": identity, "performer": performer.to_view()},
        )

    @traced
    def get_performance(self, performance_id: int) -> ServiceResult:
        """Return the performance stored under *performance_id*, or the default view."""
        performance = self._ledger.get_performance(performance_id)
        if performance is None:
            performance = Performance.default()
        return ServiceResult(
            ok=True,
            op="get_performance",
            data={"id": performance_id, "performance": performance.to_view()},
        )

    @traced
    def list_performers(self) -> ServiceResult:
        items = [
            {"identity": identity, **performer.to_view()}
            for identity, performer in self._ledger.performers()
        ]
        return ServiceResult(
            ok=True,
            op="list_performers",
            data={"items": items, "count": len(items)},
        )

    @traced
    def list_performances(self, *, performer_id: str | None = None) -> ServiceResult:
        """List performances in id order, optionally for one performer only."""
        items = [
            {"id": performance_id, **performance.to_view()}
            for performance_id, performance in self._ledger.performances()
            if performer_id is None or performance.performer_id == performer_id
        ]
        return ServiceResult(
            ok=True,
            op="list_performances",
            data={"items": items, "count": len(items)},
        )
