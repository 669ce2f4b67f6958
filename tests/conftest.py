"""Shared pytest fixtures and test helpers for gigledger tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from gigledger.infrastructure.database.engine import init_database
from gigledger.infrastructure.ledger import Ledger
from gigledger.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Keep ``--verbose`` CLI invocations from leaking telemetry into other tests."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Engine:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ledger() -> Ledger:
    """Fresh in-memory ledger: no performers, next performance id is 1."""
    return Ledger.in_memory()


@pytest.fixture
def persistent_ledger(tmp_path: Path) -> Ledger:
    """Ledger backed by a SQLite store under ``tmp_path``."""
    led = Ledger.open(tmp_path)
    try:
        yield led
    finally:
        led.close()


@pytest.fixture
def _isolated_ledger(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated ledger there.

    Use via ``@pytest.mark.usefixtures("_isolated_ledger")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GIGLEDGER_SENDER", raising=False)
    monkeypatch.delenv("GIGLEDGER_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def register(ledger: Ledger, sender: str, name: str, rate: float) -> dict[str, Any]:
    """Register a performer via PerformerRegistry, asserting success."""
    from gigledger.services.performers import PerformerRegistry

    result = PerformerRegistry(ledger).register_performer(sender, name, rate)
    assert result.ok, result.error
    return result.data


def schedule(
    ledger: Ledger,
    sender: str,
    venue: str = "MainStage",
    duration: float = 2,
    date: int | float = 20250516,
) -> dict[str, Any]:
    """Schedule a performance via PerformanceScheduler, asserting success."""
    from gigledger.services.scheduler import PerformanceScheduler

    result = PerformanceScheduler(ledger).schedule_performance(sender, venue, duration, date)
    assert result.ok, result.error
    return result.data
