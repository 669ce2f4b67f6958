"""PerformerRegistry — performer registration.

Registration never fails: any identity may (re-)register with any name
and rate. A repeat registration replaces the earlier record entirely,
including resetting accumulated earnings.
"""

from __future__ import annotations

from gigledger.domain.models import Performer
from gigledger.services.base import BaseService
from gigledger.services.result import ServiceResult
from gigledger.services.telemetry import traced


class PerformerRegistry(BaseService):
    """Owns the performer records of a ledger."""

    @traced
    def register_performer(self, sender: str, name: str, hourly_rate: float) -> ServiceResult:
        """Insert or replace the performer record for *sender*.

        Always returns ``ok=True``. ``data["replaced"]`` reports whether an
        earlier record was overwritten.
        """
        performer = Performer.register(name, hourly_rate)
        warnings: list[str] = []

        with self._ledger.transaction() as txn:
            previous = txn.get_performer(sender)
            txn.put_performer(sender, performer)

        if previous is not None:
            warnings.append(f"Replaced existing performer record for '{sender}'")

        self._log.info(
            "performer.registered",
            sender=sender,
            hourly_rate=performer.hourly_rate,
            replaced=previous is not None,
        )
        return ServiceResult(
            ok=True,
            op="register_performer",
            data={
                "identity": sender,
                "performer": performer.to_view(),
                "replaced": previous is not None,
            },
            warnings=warnings,
        )
