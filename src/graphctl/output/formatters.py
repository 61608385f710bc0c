"""Format a ServiceResult for the requested output mode.

``--json`` dumps the model, ``--quiet`` prints ids and paths only, and
the default path goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from graphctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from graphctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related flags extracted from GraphSettings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    precision: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Render *result* as a string according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, precision=settings.precision)
