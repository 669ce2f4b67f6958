"""Ledger — the single state object injected into every service.

The Ledger owns both registries (performers by identity, performances by
id) and the performance id counter. All mutations go through
:meth:`Ledger.transaction`, which serializes access with one lock around
the registry pair and makes each operation atomic:

- **Memory**: The state is snapshotted on entry and restored if the
  block raises.
- **DB** (optional): When the ledger is backed by a SQLite store, rows
  touched in the transaction are written with ``engine.begin()`` after
  the block succeeds. A failed write rolls back both the DB and memory.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from gigledger.domain.models import Performance, Performer
from gigledger.infrastructure.database.counters import (
    PERFORMANCE_COUNTER,
    load_next_value,
    store_next_value,
)
from gigledger.infrastructure.database.engine import DEFAULT_DB_FILENAME, init_database
from gigledger.infrastructure.database.schema import performances, performers

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from gigledger.config.settings import LedgerSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# In-memory state
# ---------------------------------------------------------------------------


@dataclass
class LedgerState:
    """The two registries plus the next unallocated performance id."""

    performers: dict[str, Performer] = field(default_factory=dict)
    performances: dict[int, Performance] = field(default_factory=dict)
    next_performance_id: int = 1

    def claim_performance_id(self) -> int:
        """Allocate the next performance id. Ids are never reused."""
        performance_id = self.next_performance_id
        self.next_performance_id += 1
        return performance_id

    def snapshot(self) -> LedgerState:
        # Records are frozen, so copying the dicts is enough.
        return LedgerState(
            performers=dict(self.performers),
            performances=dict(self.performances),
            next_performance_id=self.next_performance_id,
        )


# ---------------------------------------------------------------------------
# LedgerTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class LedgerTransaction:
    """Active transaction with tracked writes.

    All writes must go through :meth:`put_performer` and
    :meth:`add_performance` so the Ledger knows which rows to persist.
    """

    state: LedgerState
    _dirty_performers: set[str] = field(default_factory=set, repr=False)
    _new_performances: list[int] = field(default_factory=list, repr=False)

    def get_performer(self, identity: str) -> Performer | None:
        return self.state.performers.get(identity)

    def put_performer(self, identity: str, performer: Performer) -> None:
        """Insert or fully replace the performer record for *identity*."""
        self.state.performers[identity] = performer
        self._dirty_performers.add(identity)

    def add_performance(self, performance: Performance) -> int:
        """Allocate an id, store *performance* under it, and return the id."""
        performance_id = self.state.claim_performance_id()
        self.state.performances[performance_id] = performance
        self._new_performances.append(performance_id)
        return performance_id

    @property
    def has_writes(self) -> bool:
        return bool(self._dirty_performers or self._new_performances)

    def flush(self, conn: Connection) -> None:
        """Write tracked rows and the counter through *conn*."""
        for identity in sorted(self._dirty_performers):
            record = self.state.performers[identity]
            stmt = sqlite_insert(performers).values(
                identity=identity,
                name=record.name,
                hourly_rate=record.hourly_rate,
                total_earned=record.total_earned,
                active=int(record.active),
            )
            conn.execute(
                stmt.on_conflict_do_update(
                    index_elements=[performers.c.identity],
                    set_={
                        "name": stmt.excluded.name,
                        "hourly_rate": stmt.excluded.hourly_rate,
                        "total_earned": stmt.excluded.total_earned,
                        "active": stmt.excluded.active,
                    },
                )
            )

        for performance_id in self._new_performances:
            record = self.state.performances[performance_id]
            conn.execute(
                insert(performances).values(
                    id=performance_id,
                    performer_id=record.performer_id,
                    venue=record.venue,
                    duration=record.duration,
                    payment_amount=record.payment_amount,
                    payment_status=str(record.payment_status),
                    date=_encode_date(record.date),
                )
            )

        store_next_value(conn, PERFORMANCE_COUNTER, self.state.next_performance_id)


# ---------------------------------------------------------------------------
# Ledger
# ---------------------------------------------------------------------------


class Ledger:
    """Registry pair with serialized, atomic transactions.

    Use :meth:`in_memory` for a throwaway ledger (tests, embedding) and
    :meth:`open` for one backed by a SQLite snapshot store.
    """

    def __init__(self, engine: Engine | None = None, state: LedgerState | None = None) -> None:
        self._engine = engine
        self._state = state if state is not None else LedgerState()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def in_memory(cls) -> Ledger:
        return cls()

    @classmethod
    def open(cls, root: Path, *, db_filename: str = DEFAULT_DB_FILENAME) -> Ledger:
        """Open (creating if needed) the ledger stored under *root*."""
        engine = init_database(root, db_filename)
        state = _load_state(engine)
        logger.debug(
            "Loaded ledger from %s: %d performers, %d performances",
            root,
            len(state.performers),
            len(state.performances),
        )
        return cls(engine=engine, state=state)

    @classmethod
    def from_settings(cls, settings: LedgerSettings) -> Ledger:
        if settings.in_memory or not settings.ledger.persist:
            return cls.in_memory()
        return cls.open(settings.ledger_root, db_filename=settings.ledger.db_filename)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @property
    def persistent(self) -> bool:
        return self._engine is not None

    def get_performer(self, identity: str) -> Performer | None:
        with self._lock:
            return self._state.performers.get(identity)

    def get_performance(self, performance_id: int) -> Performance | None:
        with self._lock:
            return self._state.performances.get(performance_id)

    def performers(self) -> list[tuple[str, Performer]]:
        """All performers, ordered by identity."""
        with self._lock:
            return sorted(self._state.performers.items())

    def performances(self) -> list[tuple[int, Performance]]:
        """All performances, ordered by id."""
        with self._lock:
            return sorted(self._state.performances.items())

    @property
    def next_performance_id(self) -> int:
        with self._lock:
            return self._state.next_performance_id

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[LedgerTransaction]:
        """Run a block of mutations atomically.

        Memory changes are discarded if the block raises or the DB write
        fails.
        """
        with self._lock:
            backup = self._state.snapshot()
            txn = LedgerTransaction(state=self._state)
            try:
                yield txn
                if self._engine is not None and txn.has_writes:
                    with self._engine.begin() as conn:
                        txn.flush(conn)
            except Exception:
                logger.warning("Ledger transaction rolled back", exc_info=True)
                self._state = backup
                raise

    def close(self) -> None:
        """Release the DB engine, if any."""
        if self._engine is not None:
            self._engine.dispose()


def _load_state(engine: Engine) -> LedgerState:
    state = LedgerState()
    with engine.connect() as conn:
        for row in conn.execute(select(performers)):
            state.performers[row.identity] = Performer(
                name=row.name,
                hourly_rate=_real(row.hourly_rate),
                total_earned=_real(row.total_earned),
                active=bool(row.active),
            )
        for row in conn.execute(select(performances).order_by(performances.c.id)):
            state.performances[row.id] = Performance(
                performer_id=row.performer_id,
                venue=row.venue,
                duration=_real(row.duration),
                payment_amount=_real(row.payment_amount),
                payment_status=row.payment_status,
                date=_decode_date(row.date),
            )
        state.next_performance_id = load_next_value(conn, PERFORMANCE_COUNTER)
    return state


def _real(value: float | None) -> float:
    """Map a NULL read from a REAL column back to NaN."""
    return float("nan") if value is None else value


def _encode_date(date: int | float) -> str:
    return repr(date)


def _decode_date(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)
