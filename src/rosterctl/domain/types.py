"""Enumerations shared by the roster models."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Gender recorded for a person."""

    MALE = "male"
    FEMALE = "female"
