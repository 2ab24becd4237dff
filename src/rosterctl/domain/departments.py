"""Department deduplication for a single roster load."""

from __future__ import annotations

from collections.abc import Iterator

from rosterctl.domain.models import Department


def normalize_department_name(name: str | None) -> str:
    """Lookup key for a department name: trimmed and case-folded.

    Internal whitespace is left alone, so ``"R&D  Lab"`` and ``"R&D Lab"``
    remain different departments.
    """
    if name is None:
        return ""
    return name.strip().casefold()


class DepartmentRegistry:
    """Insertion-ordered map of normalized name -> :class:`Department`.

    Ids are handed out sequentially from 1 in first-seen order. A registry
    belongs to one load and is not shared between loads.
    """

    def __init__(self) -> None:
        self._by_key: dict[str, Department] = {}

    def resolve(self, raw_name: str) -> Department:
        """Return the department for *raw_name*, creating it on first sight."""
        key = normalize_department_name(raw_name)
        dept = self._by_key.get(key)
        if dept is None:
            dept = Department(id=len(self._by_key) + 1, name=raw_name.strip())
            self._by_key[key] = dept
        return dept

    def __iter__(self) -> Iterator[Department]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, raw_name: object) -> bool:
        return isinstance(raw_name, str) and normalize_department_name(raw_name) in self._by_key
