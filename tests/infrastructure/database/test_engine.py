"""Tests for database engine setup."""

from pathlib import Path

from sqlalchemy import inspect, select, text

from gigledger.infrastructure.database.engine import init_database
from gigledger.infrastructure.database.schema import id_counters


class TestInitDatabase:
    def test_creates_db_file(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            assert (tmp_path / ".gigledger" / "gigledger.db").is_file()
        finally:
            engine.dispose()

    def test_custom_filename(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path, "bookings.db")
        try:
            assert (tmp_path / ".gigledger" / "bookings.db").is_file()
        finally:
            engine.dispose()

    def test_creates_tables(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            tables = set(inspect(engine).get_table_names())
            assert {"performers", "performances", "id_counters"} <= tables
        finally:
            engine.dispose()

    def test_wal_mode(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path)
        try:
            with engine.connect() as conn:
                mode = conn.execute(text("PRAGMA journal_mode")).scalar()
            assert mode == "wal"
        finally:
            engine.dispose()

    def test_idempotent(self, tmp_path: Path) -> None:
        init_database(tmp_path).dispose()
        engine = init_database(tmp_path)
        try:
            with engine.connect() as conn:
                rows = conn.execute(select(id_counters)).fetchall()
            assert len(rows) == 1
            assert rows[0].next_value == 1
        finally:
            engine.dispose()
