"""Output mode dispatch.

``--json`` dumps the ServiceResult as-is, ``--quiet`` prints ids only, and
the default goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from rosterctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from rosterctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* according to *settings* (human-readable by default)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
