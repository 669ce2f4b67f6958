"""Database engine setup for the SQLite snapshot store.

The DB is stored at ``{ledger_root}/.gigledger/{db_filename}``.
SQLAlchemy Core (not ORM) is used because the CLI is a short-lived
process that loads the whole ledger once and writes back changed rows.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Engine

from gigledger.infrastructure.database.counters import PERFORMANCE_COUNTER
from gigledger.infrastructure.database.schema import id_counters, metadata

DATA_DIRNAME = ".gigledger"
DEFAULT_DB_FILENAME = "gigledger.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(ledger_root: Path, db_filename: str = DEFAULT_DB_FILENAME) -> Engine:
    """Initialize the ledger database under ``{ledger_root}/.gigledger/``.

    Creates the data directory, all tables, and seeds the performance
    counter at 1. Idempotent, so safe to call on an existing ledger.
    """
    data_dir = ledger_root / DATA_DIRNAME
    data_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(data_dir / db_filename)
    metadata.create_all(engine)
    _seed_counters(engine)
    return engine


def _seed_counters(engine: Engine) -> None:
    with engine.begin() as conn:
        row = conn.execute(
            select(id_counters.c.name).where(id_counters.c.name == PERFORMANCE_COUNTER)
        ).first()
        if row is None:
            conn.execute(insert(id_counters).values(name=PERFORMANCE_COUNTER, next_value=1))
