"""Output mode dispatch for ServiceResult.

JSON for machines, a one-line summary for ``--quiet``, and Rich
rendering for everything else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from drillkit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from drillkit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the root CLI group."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* according to *settings* (defaults: human output)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
