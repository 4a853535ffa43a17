"""
Status and Error Message Catalog

Fixed response vocabulary for visitor operations. Success and not-found
outcomes are ``Status`` members; since ``Status`` is a ``str`` enum, a member
compares equal to its message text.

Usage:
    from visitor_log.core.messages import Status, input_error_messages

    if result is Status.VISITOR_ADDED:
        ...
"""

from enum import Enum
from typing import Any


class Status(str, Enum):
    """Outcome of a visitor operation."""

    TABLE_CREATED = "Visitors table created"
    VISITOR_ADDED = "Visitor added"
    VISITOR_UPDATED = "Visitor updated"
    VISITOR_DELETED = "Visitor deleted"
    VISITOR_NOT_FOUND = "Visitor not found"
    ALL_VISITORS_DELETED = "All visitors deleted"
    NO_VISITORS_FOUND = "No visitors found"

    def __str__(self) -> str:
        return self.value


class _InputErrorMessages:
    """Messages for fields of the wrong primitive type."""

    @staticmethod
    def string(value: Any) -> str:
        return f"Invalid input: {value!r} is not a string"


class _FormatErrorMessages:
    """Messages for fields that fail their pattern or range."""

    AGE_FORMAT_ERROR = "Age must be a whole number between 0 and 150"
    DATE_OF_VISIT_FORMAT_ERROR = "Date of visit must be in YYYY-MM-DD format"
    TIME_OF_VISIT_FORMAT_ERROR = "Time of visit must be in HH:MM format"


input_error_messages = _InputErrorMessages()
format_error_messages = _FormatErrorMessages()


def invalid_column_message(column: Any) -> str:
    return f"Invalid column: {column!r} cannot be updated"


__all__ = [
    "Status",
    "input_error_messages",
    "format_error_messages",
    "invalid_column_message",
]
