"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``rosterctl.toml`` only holds
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    # Roster read when no PATH argument is given, relative to the working directory.
    default_file: str = "foreign_names.csv"


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    show_people: bool = True
