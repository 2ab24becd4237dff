"""Field normalizers — raw column text to typed values.

Each parser takes the raw field text, the column label and the 1-based
line number. On malformed input it raises the matching
:class:`~rosterctl.domain.errors.FieldParseError` subclass, so the message
always names the line, the column and the offending text.
"""

from __future__ import annotations

import re
from datetime import date

from rosterctl.domain.errors import (
    InvalidDate,
    InvalidDecimal,
    InvalidGenderToken,
    InvalidInteger,
)
from rosterctl.domain.types import Gender

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DATE_RE = re.compile(r"([0-9]{2})\.([0-9]{2})\.([0-9]{4})")

# Recognised spellings, already case-folded. Add a language by adding rows.
GENDER_TOKENS: dict[str, Gender] = {
    "m": Gender.MALE,
    "male": Gender.MALE,
    "man": Gender.MALE,
    "м": Gender.MALE,
    "муж": Gender.MALE,
    "мужчина": Gender.MALE,
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "ж": Gender.FEMALE,
    "жен": Gender.FEMALE,
    "женщина": Gender.FEMALE,
}


def is_int(value: str | None) -> bool:
    """Return True when *value* would pass :func:`parse_int`."""
    if value is None:
        return False
    return _INT_RE.fullmatch(value.strip()) is not None


def parse_int(value: str, field: str, line_no: int) -> int:
    """Parse a plain, optionally signed, base-10 integer."""
    text = value.strip()
    if _INT_RE.fullmatch(text) is None:
        raise InvalidInteger(line_no=line_no, field=field, value=value)
    return int(text)


def parse_decimal(value: str, field: str, line_no: int) -> float:
    """Parse a decimal number written with either ``.`` or ``,`` as separator.

    Thousands separators are not supported: ``1,234.5`` is rejected, as are
    ``NaN``, ``Infinity`` and ``1.5d``/``1.5f`` style type suffixes, so a salary
    is always a finite number.
    """
    text = value.strip().replace(",", ".")
    if _DECIMAL_RE.fullmatch(text) is None:
        raise InvalidDecimal(line_no=line_no, field=field, value=value)
    return float(text)


def parse_date(value: str, field: str, line_no: int) -> date:
    """Parse ``dd.MM.yyyy`` into a calendar date."""
    match = _DATE_RE.fullmatch(value.strip())
    if match is None:
        raise InvalidDate(line_no=line_no, field=field, value=value)
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDate(line_no=line_no, field=field, value=value) from exc


def parse_gender(value: str | None, field: str, line_no: int) -> Gender | None:
    """Map a gender token to :class:`Gender`.

    ``None`` means the column was absent and yields ``None``; an empty or
    unknown token is an error.
    """
    if value is None:
        return None
    gender = GENDER_TOKENS.get(value.strip().casefold())
    if gender is None:
        raise InvalidGenderToken(line_no=line_no, field=field, value=value)
    return gender
