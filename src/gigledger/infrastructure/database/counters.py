"""Persisted id counters for ledger snapshots.

The in-memory :class:`~gigledger.infrastructure.ledger.LedgerState`
allocates ids; the ``id_counters`` table only records the next value so
a reopened ledger continues the sequence instead of reusing ids.

The caller owns the transaction: pass a ``Connection`` obtained from
``engine.begin()`` so the counter write participates in the same
atomic transaction as the record writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select, update

from gigledger.infrastructure.database.schema import id_counters

if TYPE_CHECKING:
    from sqlalchemy import Connection

PERFORMANCE_COUNTER = "performance"

_VALID_COUNTERS = frozenset({PERFORMANCE_COUNTER})


def _check_name(name: str) -> None:
    if name not in _VALID_COUNTERS:
        msg = f"Unknown id counter: {name!r}. Expected one of {sorted(_VALID_COUNTERS)}"
        raise ValueError(msg)


def load_next_value(conn: Connection, name: str) -> int:
    """Return the next unallocated value stored for counter *name*.

    Raises:
        ValueError: If *name* is not a known counter.
    """
    _check_name(name)
    row = conn.execute(select(id_counters.c.next_value).where(id_counters.c.name == name)).one()
    return int(row.next_value)


def store_next_value(conn: Connection, name: str, next_value: int) -> None:
    """Record *next_value* for counter *name*.

    Counters only move forward; storing a smaller value than the one on
    disk is rejected.

    Raises:
        ValueError: If *name* is unknown or *next_value* would rewind the counter.
    """
    current = load_next_value(conn, name)
    if next_value < current:
        msg = f"Counter {name!r} cannot move backwards ({current} -> {next_value})"
        raise ValueError(msg)
    conn.execute(
        update(id_counters).where(id_counters.c.name == name).values(next_value=next_value)
    )
