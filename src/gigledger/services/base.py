"""BaseService — shared foundation for ledger services.

Every service receives a :class:`Ledger` at construction time and owns
its transaction boundaries via ``self._ledger.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from gigledger.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from gigledger.domain.types import ErrorKind
    from gigledger.infrastructure.ledger import Ledger


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PerformerRegistry(BaseService):
            def register_performer(self, sender: str, ...) -> ServiceResult:
                with self._ledger.transaction() as txn:
                    ...
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger
        self._log = structlog.get_logger(type(self).__module__)

    def _reject(self, op: str, kind: ErrorKind, message: str, **detail: Any) -> ServiceResult:
        """Return (and log) an expected failure of *kind*."""
        self._log.info("request.rejected", op=op, code=kind.value, **detail)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError.from_kind(kind, message, **detail),
        )
