"""Command group: scheduling and inspecting performances."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gigledger.commands._base import NUMBER, GigGroup, sender_option
from gigledger.config.logging import bind_request_context
from gigledger.services.query import QueryFacade
from gigledger.services.scheduler import PerformanceScheduler

if TYPE_CHECKING:
    from gigledger.commands._context import AppContext

_PERFORMANCE_EXAMPLES = """\
  gigledger performance schedule MainStage 2 20250516 --sender wallet_1
  gigledger performance show 1
  gigledger performance list --performer wallet_1"""


@click.group(cls=GigGroup, examples=_PERFORMANCE_EXAMPLES)
@click.pass_obj
def performance(app: AppContext) -> None:
    """Schedule and inspect performances."""


@performance.command(
    examples="""\
  gigledger performance schedule MainStage 2 20250516 --sender wallet_1
  gigledger --json performance schedule "Club 9" 1.5 20250601 --sender wallet_1"""
)
@click.argument("venue")
@click.argument("duration", type=float)
@click.argument("date", type=NUMBER)
@sender_option
@click.pass_obj
def schedule(
    app: AppContext, venue: str, duration: float, date: int | float, sender: str
) -> None:
    """Schedule a performance of DURATION hours at VENUE for the sender.

    DATE is an opaque numeric token (e.g. 20250516); it is stored as given.
    """
    bind_request_context(sender=sender, command="performance.schedule")
    result = PerformanceScheduler(app.ledger).schedule_performance(sender, venue, duration, date)
    app.emit(result)


@performance.command(
    examples="""\
  gigledger performance show 1
  gigledger --json performance show 42"""
)
@click.argument("performance_id", type=int)
@click.pass_obj
def show(app: AppContext, performance_id: int) -> None:
    """Show the performance stored under PERFORMANCE_ID (zero values if unknown)."""
    app.emit(QueryFacade(app.ledger).get_performance(performance_id))


@performance.command(
    "list",
    examples="""\
  gigledger performance list
  gigledger performance list --performer wallet_1""",
)
@click.option("--performer", "performer_id", default=None, help="Only this performer's bookings.")
@click.pass_obj
def list_cmd(app: AppContext, performer_id: str | None) -> None:
    """List scheduled performances in id order."""
    app.emit(QueryFacade(app.ledger).list_performances(performer_id=performer_id))
