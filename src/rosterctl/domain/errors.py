"""Roster parsing errors.

Every error raised while reading a roster derives from
:class:`RosterFormatError` and carries the 1-based line number plus a
machine-readable ``code`` that the service layer copies into
``ServiceError.code``.

I/O failures are not wrapped here: ``OSError`` propagates from the loader
unchanged.
"""

from __future__ import annotations

from typing import Any, ClassVar


class RosterFormatError(ValueError):
    """Base class for malformed roster input."""

    code: ClassVar[str] = "ROSTER_FORMAT"

    def __init__(self, message: str, *, line_no: int) -> None:
        super().__init__(message)
        self.line_no = line_no

    def detail(self) -> dict[str, Any]:
        """Structured context for error reporting."""
        return {"line_no": self.line_no}


class MalformedColumnCount(RosterFormatError):
    """A data line has fewer columns than the roster schema requires."""

    code = "MALFORMED_COLUMN_COUNT"

    def __init__(self, *, line_no: int, expected: int, actual: int, line: str) -> None:
        msg = f"Line {line_no}: expected {expected} columns, got {actual}. Line: {line}"
        super().__init__(msg, line_no=line_no)
        self.expected = expected
        self.actual = actual
        self.line = line

    def detail(self) -> dict[str, Any]:
        return {
            "line_no": self.line_no,
            "expected": self.expected,
            "actual": self.actual,
            "line": self.line,
        }


class FieldParseError(RosterFormatError):
    """A single field could not be normalized."""

    reason: ClassVar[str] = "invalid value"

    def __init__(self, *, line_no: int, field: str, value: str | None) -> None:
        msg = f"Line {line_no}: bad {field} ({self.reason}) = {value!r}"
        super().__init__(msg, line_no=line_no)
        self.field = field
        self.value = value

    def detail(self) -> dict[str, Any]:
        return {"line_no": self.line_no, "field": self.field, "value": self.value}


class InvalidInteger(FieldParseError):
    code = "INVALID_INTEGER"
    reason = "expected an integer"


class InvalidDecimal(FieldParseError):
    code = "INVALID_DECIMAL"
    reason = "expected a decimal number"


class InvalidDate(FieldParseError):
    code = "INVALID_DATE"
    reason = "expected dd.MM.yyyy"


class InvalidGenderToken(FieldParseError):
    code = "INVALID_GENDER_TOKEN"
    reason = "unknown gender token"
