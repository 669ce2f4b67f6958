"""Service layer — business logic returning ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""

from gigledger.services.performers import PerformerRegistry
from gigledger.services.query import QueryFacade
from gigledger.services.result import ServiceError, ServiceResult
from gigledger.services.scheduler import PerformanceScheduler

__all__ = [
    "PerformanceScheduler",
    "PerformerRegistry",
    "QueryFacade",
    "ServiceError",
    "ServiceResult",
]
