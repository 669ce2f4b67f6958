"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gigledger.output.console import create_console, format_money, get_output, style_for_status

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from gigledger.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which
    is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items)

    key = _extract_key(result.data)
    return key or f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: dict[str, Any]) -> str:
    for key in ("id", "identity"):
        val = item.get(key)
        if val is not None:
            return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="gig.ok")
    op = Text(f"  {result.op}", style="gig.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gig.key")
    if key in ("id", "identity", "performer_id"):
        v = Text(str(value), style="gig.id")
    elif key in ("hourly_rate", "total_earned", "payment_amount"):
        v = Text(format_money(float(value)), style="gig.money")
    elif key == "name":
        v = Text(str(value), style="gig.name")
    elif key == "payment_status":
        v = Text(str(value), style=style_for_status(str(value)))
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    annotations = span.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gig.error")
    op = Text(f"  {result.op}", style="gig.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")
    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_register(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "identity", d.get("identity", ""))
    for key, value in d.get("performer", {}).items():
        _field(console, key, value)
    if d.get("replaced"):
        _field(console, "replaced", True)


def _render_schedule(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "id", d.get("id", ""))
    for key, value in d.get("performance", {}).items():
        _field(console, key, value)


# ── Query renderers ───────────────────────────────────────────────────


def _render_performer(result: ServiceResult, console: Console) -> None:
    """Render get_performer as a panel. Unknown identities show the default view."""
    performer = result.data.get("performer", {})
    active = bool(performer.get("active"))
    lines = [
        f"name: {performer.get('name', '')}",
        f"hourly rate: {format_money(float(performer.get('hourly_rate', 0)))}",
        f"total earned: {format_money(float(performer.get('total_earned', 0)))}",
        f"active: {'yes' if active else 'no'}",
    ]
    console.print(
        Panel(
            Text("\n".join(lines)),
            title=str(result.data.get("identity", "?")),
            border_style="gig.active" if active else "gig.inactive",
            expand=False,
        )
    )


def _render_performance(result: ServiceResult, console: Console) -> None:
    """Render get_performance as a panel."""
    performance = result.data.get("performance", {})
    status = str(performance.get("payment_status", ""))
    lines = [
        f"performer: {performance.get('performer_id', '')}",
        f"venue: {performance.get('venue', '')}",
        f"date: {performance.get('date', 0)}",
        f"duration: {performance.get('duration', 0)} h",
        f"payment: {format_money(float(performance.get('payment_amount', 0)))} ({status})",
    ]
    console.print(
        Panel(
            Text("\n".join(lines)),
            title=f"performance {result.data.get('id', '?')}",
            border_style=style_for_status(status) or "dim",
            expand=False,
        )
    )


def _render_performer_table(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Identity", style="gig.id", no_wrap=True)
    table.add_column("Name", style="gig.name")
    table.add_column("Rate", style="gig.money", justify="right")
    table.add_column("Earned", style="gig.money", justify="right")
    table.add_column("Active")
    for item in items:
        table.add_row(
            str(item.get("identity", "")),
            str(item.get("name", "")),
            format_money(float(item.get("hourly_rate", 0))),
            format_money(float(item.get("total_earned", 0))),
            "yes" if item.get("active") else "no",
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} performers")


def _render_performance_table(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="gig.id", justify="right", no_wrap=True)
    table.add_column("Performer", no_wrap=True)
    table.add_column("Venue")
    table.add_column("Date")
    table.add_column("Hours", justify="right")
    table.add_column("Payment", style="gig.money", justify="right")
    table.add_column("Status")
    for item in items:
        status = str(item.get("payment_status", ""))
        table.add_row(
            str(item.get("id", "")),
            str(item.get("performer_id", "")),
            str(item.get("venue", "")),
            str(item.get("date", "")),
            str(item.get("duration", "")),
            format_money(float(item.get("payment_amount", 0))),
            Text(status, style=style_for_status(status)),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} performances")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "register_performer": _render_register,
    "schedule_performance": _render_schedule,
    "get_performer": _render_performer,
    "get_performance": _render_performance,
    "list_performers": _render_performer_table,
    "list_performances": _render_performance_table,
}
