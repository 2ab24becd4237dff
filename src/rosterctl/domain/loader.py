"""Roster loader — lines of CSV text to an ordered list of people.

Single pass, fail-fast: the first malformed line raises and no partial
result is returned. Pipeline per line:

  COUNT → SKIP BLANK → SNIFF HEADER → TOKENIZE → CHECK WIDTH → NORMALIZE → RESOLVE

Header detection only applies to the first physical line. A line is a header
when it mentions id, name and department markers (English or Russian), or
when its first field is not an integer. The second rule also swallows a
data row whose id is not numeric; that is accepted behaviour.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rosterctl.domain.departments import DepartmentRegistry
from rosterctl.domain.errors import MalformedColumnCount
from rosterctl.domain.models import Person, Roster
from rosterctl.domain.normalizers import (
    is_int,
    parse_date,
    parse_decimal,
    parse_gender,
    parse_int,
)
from rosterctl.domain.tokenizer import DELIMITER, split_line

logger = logging.getLogger(__name__)

COLUMN_COUNT = 6

# Column positions in the fixed schema.
COL_ID = 0
COL_NAME = 1
COL_GENDER = 2
COL_BIRTH_DATE = 3
COL_DEPARTMENT = 4
COL_SALARY = 5

# Each group must be matched by at least one marker for a header line.
HEADER_MARKERS: tuple[tuple[str, ...], ...] = (
    ("id", "ид"),
    ("name", "имя"),
    ("department", "подраздел"),
)

SOURCE_ENCODING = "utf-8-sig"


def looks_like_header(line: str) -> bool:
    """Return True when *line* mentions id, name and department columns."""
    lowered = line.lower()
    return all(any(marker in lowered for marker in group) for group in HEADER_MARKERS)


def parse_roster(lines: Iterable[str]) -> Roster:
    """Parse roster lines into a :class:`Roster`.

    *lines* may carry trailing newlines. Raises a
    :class:`~rosterctl.domain.errors.RosterFormatError` subclass on the first
    bad line.
    """
    registry = DepartmentRegistry()
    people: list[Person] = []

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line_no == 1 and looks_like_header(line):
            logger.debug("Skipping header line: %s", line)
            continue

        cols = split_line(line, DELIMITER)
        if len(cols) < COLUMN_COUNT:
            raise MalformedColumnCount(
                line_no=line_no,
                expected=COLUMN_COUNT,
                actual=len(cols),
                line=line,
            )

        if line_no == 1 and not is_int(cols[COL_ID]):
            logger.debug("Skipping implicit header line: %s", line)
            continue

        person_id = parse_int(cols[COL_ID], "id", line_no)
        name = cols[COL_NAME].strip()
        gender = parse_gender(cols[COL_GENDER], "gender", line_no)
        birth_date = parse_date(cols[COL_BIRTH_DATE], "birthDate", line_no)
        salary = parse_decimal(cols[COL_SALARY], "salary", line_no)
        department = registry.resolve(cols[COL_DEPARTMENT])

        people.append(
            Person(
                id=person_id,
                name=name,
                gender=gender,
                department=department,
                salary=salary,
                birth_date=birth_date,
            )
        )

    return Roster(people=tuple(people), departments=tuple(registry))


def load_roster(path: Path | str) -> Roster:
    """Read *path* as UTF-8 and parse it.

    The file is closed before returning, whether parsing succeeds or not.
    ``OSError`` from opening or reading propagates unchanged.
    """
    path = Path(path)
    with path.open(encoding=SOURCE_ENCODING) as fh:
        roster = parse_roster(fh)
    logger.debug(
        "Loaded %d people in %d departments from %s",
        len(roster.people),
        len(roster.departments),
        path,
    )
    return roster


def load_people(path: Path | str) -> list[Person]:
    """Load *path* and return its people in file order."""
    return list(load_roster(path).people)
