"""RosterService — load a roster file and summarise it.

Wraps the domain loader so that callers get a ServiceResult instead of an
exception. Loading stays all-or-nothing: a failed load carries no people.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rosterctl.domain.errors import RosterFormatError
from rosterctl.domain.loader import load_roster
from rosterctl.services.result import ServiceError, ServiceResult
from rosterctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.domain.models import Roster

logger = logging.getLogger(__name__)


class RosterService:
    """Roster operations backing the ``load`` and ``departments`` commands."""

    def __init__(self, settings: RosterSettings) -> None:
        self._settings = settings

    def resolve_source(self, path: str | Path | None) -> Path:
        """The explicit *path*, or the configured default file in the cwd."""
        if path:
            return Path(path)
        return Path(self._settings.input.default_file)

    @traced
    def load(self, path: str | Path | None = None, *, include_people: bool = True) -> ServiceResult:
        """Load every person from the roster at *path*."""
        op = "load_people"
        source = self.resolve_source(path)
        roster = self._read(op, source)
        if isinstance(roster, ServiceResult):
            return roster

        data: dict[str, Any] = {
            "source": str(source),
            "count": len(roster.people),
            "department_count": roster.unique_department_count(),
        }
        if include_people:
            data["people"] = [person.to_row() for person in roster.people]
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def departments(self, path: str | Path | None = None) -> ServiceResult:
        """List departments in first-seen order with their headcounts."""
        op = "list_departments"
        source = self.resolve_source(path)
        roster = self._read(op, source)
        if isinstance(roster, ServiceResult):
            return roster

        headcounts = roster.headcounts()
        items = [
            {"id": dept.id, "name": dept.name, "headcount": headcounts[dept.id]}
            for dept in roster.departments
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": str(source), "count": len(items), "items": items},
        )

    def _read(self, op: str, source: Path) -> Roster | ServiceResult:
        """Run the loader; failures come back as an error ServiceResult."""
        try:
            logger.debug(
                "Reading roster %s (cwd=%s, exists=%s)", source, Path.cwd(), source.exists()
            )
            with trace_span("load_roster") as span:
                roster = load_roster(source)
                if span is not None:
                    span.annotate("people", len(roster.people))
                    span.annotate("departments", len(roster.departments))
        except RosterFormatError as exc:
            logger.debug("Roster rejected: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail()),
            )
        except (OSError, UnicodeDecodeError) as exc:
            message = f"Cannot read {source}: {getattr(exc, 'strerror', None) or exc}"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="FILE_ACCESS_ERROR",
                    message=message,
                    detail={"path": str(source)},
                ),
            )
        return roster
