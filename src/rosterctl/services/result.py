"""ServiceResult and ServiceError — what every service operation returns.

The CLI never sees domain exceptions: services translate them into a
ServiceError with a stable ``code`` and render-ready ``detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is one of the roster error codes (``INVALID_DATE``,
    ``MALFORMED_COLUMN_COUNT``, ...) or ``FILE_ACCESS_ERROR``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, used to pick a renderer (e.g. ``"load_people"``).
        data: Operation payload on success.
        warnings: Non-fatal notes for the user.
        error: Set when ``ok`` is False.
        meta: Timing and telemetry, populated in verbose mode.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
