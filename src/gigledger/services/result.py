"""ServiceResult and ServiceError — the return type of every service call.

Expected failures (unknown performer, bad duration) are returned as a
``ServiceResult`` with ``ok=False`` instead of being raised. Success
payloads live in ``data``, so an allocated id can never be confused
with an error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from gigledger.domain.types import ErrorKind


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_kind(cls, kind: ErrorKind, message: str, **detail: Any) -> ServiceError:
        """Build an error for a known :class:`ErrorKind`, carrying its legacy token."""
        return cls(code=kind.value, message=message, detail={"token": kind.token, **detail})

    @property
    def kind(self) -> ErrorKind | None:
        """The matching :class:`ErrorKind`, or None for codes outside the taxonomy."""
        try:
            return ErrorKind(self.code)
        except ValueError:
            return None


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"schedule_performance"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, telemetry).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
