"""SQLAlchemy Core table definitions for the ledger snapshot store."""

from __future__ import annotations

from sqlalchemy import (
    REAL,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

performers = Table(
    "performers",
    metadata,
    Column("identity", Text, primary_key=True),
    Column("name", Text, nullable=False),
    # REAL columns are nullable: SQLite stores NaN as NULL.
    Column("hourly_rate", REAL),
    Column("total_earned", REAL, default=0.0, server_default="0.0"),
    Column("active", Integer, default=1, server_default="1"),
)

performances = Table(
    "performances",
    metadata,
    # Assigned by the ledger counter, never by SQLite.
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("performer_id", Text, ForeignKey("performers.identity"), nullable=False),
    Column("venue", Text, nullable=False),
    Column("duration", REAL),
    Column("payment_amount", REAL),
    Column("payment_status", Text, nullable=False),
    # Stored as text so ints of any size and floats both round-trip.
    Column("date", Text, nullable=False),
)

Index("ix_performances_performer", performances.c.performer_id)

id_counters = Table(
    "id_counters",
    metadata,
    Column("name", Text, primary_key=True),
    Column("next_value", Integer, nullable=False, default=1, server_default="1"),
)
