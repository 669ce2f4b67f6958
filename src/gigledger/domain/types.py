"""Booking status and error classification enums."""

from __future__ import annotations

from enum import StrEnum


class PaymentStatus(StrEnum):
    """Payment state of a performance.

    Scheduling is the only transition the ledger performs, so every
    stored performance is ``scheduled``.
    """

    SCHEDULED = "scheduled"


class ErrorKind(StrEnum):
    """Expected, recoverable failure kinds returned by the scheduler."""

    PERFORMER_NOT_FOUND = "PERFORMER_NOT_FOUND"
    INVALID_DURATION = "INVALID_DURATION"

    @property
    def token(self) -> str:
        """Legacy wire token, e.g. ``ERR-INVALID-DURATION``."""
        return "ERR-" + self.value.replace("_", "-")
