"""Rich Console factory and theme for gigledger output.

Consoles render to a StringIO buffer so renderers keep a
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GIG_THEME = Theme(
    {
        "gig.ok": "bold green",
        "gig.error": "bold red",
        "gig.warning": "bold yellow",
        "gig.op": "bold cyan",
        "gig.key": "dim",
        "gig.id": "bold blue",
        "gig.name": "bold",
        "gig.money": "magenta",
        "gig.active": "green",
        "gig.inactive": "dim red",
        "gig.status.scheduled": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GIG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a payment status ("" if unstyled)."""
    name = f"gig.status.{status}"
    return name if name in GIG_THEME.styles else ""


def format_money(amount: float) -> str:
    """Render an amount with two decimals (``200`` -> ``200.00``)."""
    return f"{amount:,.2f}"
