"""
Visitor Models and Input Validation

Type definitions for visitor records. These are not ORM models but rather
TypedDict classes for type hints and documentation purposes, plus the
field validation applied before every write.
"""

import re
import datetime
from typing import Any, Callable, Dict, List, Mapping, TypedDict, Union

from ..core.exceptions import InputFormatError, InputTypeError, InvalidColumnError
from ..core.messages import format_error_messages


class VisitorInput(TypedDict):
    """Writable visitor fields, as supplied by the caller."""
    name: str
    age: int
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    assistant: str
    comments: str


class VisitorRecord(TypedDict):
    """Visitor row as decoded by the driver."""
    id: int
    name: str
    age: int
    date: Union[str, datetime.date]
    time: Union[str, datetime.time]
    assistant: str
    comments: str


VisitorList = List[VisitorRecord]

# Insert order, and the only columns an update may target
WRITABLE_COLUMNS = ("name", "age", "date", "time", "assistant", "comments")

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^\d{2}:\d{2}$")

MIN_AGE = 0
MAX_AGE = 150


def _require_string(field: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InputTypeError(field, value)


def _check_age(value: Any) -> None:
    # bool is an int subclass; True is not an age
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not MIN_AGE <= value <= MAX_AGE
    ):
        raise InputFormatError("age", format_error_messages.AGE_FORMAT_ERROR)


def _check_date(value: Any) -> None:
    _require_string("date", value)
    if not DATE_PATTERN.fullmatch(value):
        raise InputFormatError("date", format_error_messages.DATE_OF_VISIT_FORMAT_ERROR)


def _check_time(value: Any) -> None:
    _require_string("time", value)
    if not TIME_PATTERN.fullmatch(value):
        raise InputFormatError("time", format_error_messages.TIME_OF_VISIT_FORMAT_ERROR)


_FIELD_CHECKS: Dict[str, Callable[[Any], None]] = {
    "name": lambda value: _require_string("name", value),
    "age": _check_age,
    "date": _check_date,
    "time": _check_time,
    "assistant": lambda value: _require_string("assistant", value),
    "comments": lambda value: _require_string("comments", value),
}


def validate_column(column: Any) -> str:
    """
    Check that a column name belongs to the writable set.

    Returns:
        The column name, safe to interpolate into SQL

    Raises:
        InvalidColumnError: if the column is not writable
    """
    if not isinstance(column, str) or column not in WRITABLE_COLUMNS:
        raise InvalidColumnError(column)
    return column


def validate_field(column: str, value: Any) -> None:
    """
    Validate a single writable field.

    Raises:
        InvalidColumnError: if the column is not writable
        InputTypeError: if the value is not of the expected type
        InputFormatError: if the value fails its pattern or range
    """
    _FIELD_CHECKS[validate_column(column)](value)


def validate_visitor(visitor: Mapping[str, Any]) -> None:
    """
    Validate all writable fields of a visitor, stopping at the first failure.

    Fields are checked in insert order: name, age, date, time, assistant,
    comments. A missing field is checked as None.

    Args:
        visitor: Mapping with the six writable fields

    Raises:
        InputTypeError: if a field is not a string (message embeds the value)
        InputFormatError: if age, date or time fails its format check
    """
    for column in WRITABLE_COLUMNS:
        _FIELD_CHECKS[column](visitor.get(column))


def visitor_params(visitor: Mapping[str, Any]) -> List[Any]:
    """Bind parameters for an insert, in WRITABLE_COLUMNS order."""
    return [visitor[column] for column in WRITABLE_COLUMNS]


__all__ = [
    "VisitorInput",
    "VisitorRecord",
    "VisitorList",
    "WRITABLE_COLUMNS",
    "DATE_PATTERN",
    "TIME_PATTERN",
    "MIN_AGE",
    "MAX_AGE",
    "validate_column",
    "validate_field",
    "validate_visitor",
    "visitor_params",
]
