"""Tests for roster value models."""

from datetime import date

import pytest

from rosterctl.domain.models import Department, Person, Roster
from rosterctl.domain.types import Gender


def _person(pid: int, dept: Department) -> Person:
    return Person(
        id=pid,
        name=f"P{pid}",
        gender=Gender.FEMALE,
        department=dept,
        salary=10.5,
        birth_date=date(2000, 1, 2),
    )


class TestModels:
    def test_department_frozen(self) -> None:
        dept = Department(id=1, name="Ops")
        with pytest.raises(Exception):
            dept.name = "Other"  # type: ignore[misc]

    def test_department_id_positive(self) -> None:
        with pytest.raises(Exception):
            Department(id=0, name="Ops")

    def test_person_to_row(self) -> None:
        row = _person(7, Department(id=2, name="Ops")).to_row()
        assert row == {
            "id": 7,
            "name": "P7",
            "gender": "female",
            "birth_date": "2000-01-02",
            "department_id": 2,
            "department": "Ops",
            "salary": 10.5,
        }


class TestRoster:
    def test_unique_department_count(self) -> None:
        ops = Department(id=1, name="Ops")
        hr = Department(id=2, name="HR")
        roster = Roster(
            people=(_person(1, ops), _person(2, hr), _person(3, ops)),
            departments=(ops, hr),
        )
        assert roster.unique_department_count() == 2
        assert roster.headcounts() == {1: 2, 2: 1}

    def test_empty(self) -> None:
        roster = Roster()
        assert roster.unique_department_count() == 0
        assert roster.headcounts() == {}
