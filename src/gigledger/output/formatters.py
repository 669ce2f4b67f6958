"""Output mode dispatch for ServiceResult.

Three modes, chosen from the global CLI flags:
- ``--json``: the full ServiceResult as JSON
- ``--quiet``: ids only (or a one-line status)
- default: Rich renderers keyed by ``result.op``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from gigledger.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from gigledger.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*.

    JSON wins over quiet; quiet wins over verbose.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
