"""Command group: performer registration and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gigledger.commands._base import GigGroup, sender_option
from gigledger.config.logging import bind_request_context
from gigledger.services.performers import PerformerRegistry
from gigledger.services.query import QueryFacade

if TYPE_CHECKING:
    from gigledger.commands._context import AppContext

_PERFORMER_EXAMPLES = """\
  gigledger performer register Alice 100 --sender wallet_1
  gigledger performer show wallet_1
  gigledger --json performer list"""


@click.group(cls=GigGroup, examples=_PERFORMER_EXAMPLES)
@click.pass_obj
def performer(app: AppContext) -> None:
    """Register and inspect performers."""


@performer.command(
    examples="""\
  gigledger performer register Alice 100 --sender wallet_1
  GIGLEDGER_SENDER=wallet_2 gigledger performer register "The Band" 250.5
  gigledger performer register --sender wallet_3 -- Busker -5"""
)
@click.argument("name")
@click.argument("hourly_rate", type=float)
@sender_option
@click.pass_obj
def register(app: AppContext, name: str, hourly_rate: float, sender: str) -> None:
    """Register (or re-register) the sender as a performer at HOURLY_RATE."""
    bind_request_context(sender=sender, command="performer.register")
    result = PerformerRegistry(app.ledger).register_performer(sender, name, hourly_rate)
    app.emit(result)


@performer.command(
    examples="""\
  gigledger performer show wallet_1
  gigledger --json performer show wallet_unknown"""
)
@click.argument("identity")
@click.pass_obj
def show(app: AppContext, identity: str) -> None:
    """Show performer details for IDENTITY (zero values if unregistered)."""
    app.emit(QueryFacade(app.ledger).get_performer_details(identity))


@performer.command(
    "list",
    examples="""\
  gigledger performer list
  gigledger -q performer list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all registered performers."""
    app.emit(QueryFacade(app.ledger).list_performers())
