"""SQLite snapshot store: engine, schema, and id counters via SQLAlchemy Core."""

from gigledger.infrastructure.database.counters import (
    PERFORMANCE_COUNTER,
    load_next_value,
    store_next_value,
)
from gigledger.infrastructure.database.engine import create_db_engine, init_database
from gigledger.infrastructure.database.schema import (
    id_counters,
    metadata,
    performances,
    performers,
)

__all__ = [
    "PERFORMANCE_COUNTER",
    "create_db_engine",
    "id_counters",
    "init_database",
    "load_next_value",
    "metadata",
    "performances",
    "performers",
    "store_next_value",
]
