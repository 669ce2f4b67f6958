"""Scheduling rules: precondition checks and payment derivation.

Pure functions over domain models. The scheduler service applies them
before touching ledger state, so a rejected request never allocates an
id.
"""

from __future__ import annotations

from gigledger.domain.models import Performer
from gigledger.domain.types import ErrorKind


def check_schedule(performer: Performer | None, duration: float) -> ErrorKind | None:
    """Return the first failing precondition for a schedule request, or None.

    Order matters: an unknown or inactive performer is reported before
    a bad duration.
    """
    if performer is None or not performer.active:
        return ErrorKind.PERFORMER_NOT_FOUND
    if not duration > 0:
        return ErrorKind.INVALID_DURATION
    return None


def payment_amount(duration: float, hourly_rate: float) -> float:
    """Payment owed for *duration* hours at *hourly_rate*.

    Computed once at scheduling time; later rate changes do not
    affect stored performances.
    """
    return duration * hourly_rate
