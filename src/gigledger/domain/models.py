"""Pydantic models for ledger records.

Performers are keyed by an opaque identity string (the caller's
"sender"); performances by an integer id allocated by the ledger.
Both record types are frozen: a re-registration replaces the whole
performer record, and performances never change after creation.

The ``default()`` constructors build the zero-value views returned by
read accessors on a miss. They have the same field set as a stored
record so callers never need a separate existence check.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from gigledger.domain.types import PaymentStatus


class Performer(BaseModel):
    """A registered performer and their billing rate."""

    model_config = {"frozen": True}

    name: str
    hourly_rate: float
    total_earned: float = 0.0
    active: bool = True

    @classmethod
    def register(cls, name: str, hourly_rate: float) -> Performer:
        """Fresh record for a (re-)registration; earnings always start at zero."""
        return cls(name=name, hourly_rate=hourly_rate, total_earned=0.0, active=True)

    @classmethod
    def default(cls) -> Performer:
        """Zero-value view for an unknown identity."""
        return cls(name="", hourly_rate=0.0, total_earned=0.0, active=False)

    def to_view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class Performance(BaseModel):
    """A scheduled booking with its payment snapshot."""

    model_config = {"frozen": True}

    performer_id: str
    venue: str
    duration: float
    payment_amount: float
    payment_status: PaymentStatus = PaymentStatus.SCHEDULED
    # Opaque token; never parsed as a calendar date.
    date: int | float

    @classmethod
    def default(cls) -> Performance:
        """Zero-value view for an unknown performance id."""
        return cls(
            performer_id="",
            venue="",
            duration=0.0,
            payment_amount=0.0,
            payment_status=PaymentStatus.SCHEDULED,
            date=0,
        )

    def to_view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
