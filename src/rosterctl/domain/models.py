"""Roster value models.

All models use Pydantic with frozen config for immutability. A
:class:`Department` is created once per load and the same instance is
shared by every :class:`Person` that belongs to it.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from rosterctl.domain.types import Gender


class Department(BaseModel):
    """A department as first seen in the roster."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    name: str


class Person(BaseModel):
    """One roster row."""

    model_config = {"frozen": True}

    id: int
    name: str
    gender: Gender
    department: Department
    salary: float
    birth_date: date

    def to_row(self) -> dict[str, object]:
        """Flatten into a JSON-friendly row for output."""
        return {
            "id": self.id,
            "name": self.name,
            "gender": self.gender.value,
            "birth_date": self.birth_date.isoformat(),
            "department_id": self.department.id,
            "department": self.department.name,
            "salary": self.salary,
        }


class Roster(BaseModel):
    """Result of one load: people in file order, departments in first-seen order."""

    model_config = {"frozen": True}

    people: tuple[Person, ...] = ()
    departments: tuple[Department, ...] = ()

    def unique_department_count(self) -> int:
        """Number of distinct department ids referenced by loaded people."""
        return len({person.department.id for person in self.people})

    def headcounts(self) -> dict[int, int]:
        """People per department id, keyed in first-seen department order."""
        counts = {dept.id: 0 for dept in self.departments}
        for person in self.people:
            counts[person.department.id] += 1
        return counts
