"""
Custom Exceptions for the Visitor Log

Every exception carries a ``message`` drawn from the catalog in
``core.messages``. Store errors (psycopg2.Error) are not wrapped.

Usage:
    from visitor_log.core.exceptions import VisitorNotFoundError

    if result.row_count < 1:
        raise VisitorNotFoundError(visitor_id)
"""

from typing import Optional, Any

from .messages import (
    Status,
    input_error_messages,
    invalid_column_message,
)


class VisitorLogError(Exception):
    """
    Base exception for all visitor log errors.

    All custom exceptions inherit from this class, allowing
    catch-all handling when needed.
    """

    def __init__(
        self,
        message: str = "Visitor log error occurred",
        details: Optional[Any] = None,
    ):
        self.message = str(message)
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class VisitorValidationError(VisitorLogError):
    """Raised when visitor input fails validation."""


class InputTypeError(VisitorValidationError):
    """Raised when a field is not of the expected primitive type."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(input_error_messages.string(value))


class InputFormatError(VisitorValidationError):
    """Raised when a field fails its pattern or range check."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidColumnError(VisitorValidationError):
    """Raised when an update targets a column outside the writable set."""

    def __init__(self, column: Any):
        self.column = column
        super().__init__(invalid_column_message(column))


class VisitorNotFoundError(VisitorLogError):
    """Raised when an update or delete matches no visitor."""

    def __init__(self, visitor_id: Any, details: Optional[Any] = None):
        self.visitor_id = visitor_id
        super().__init__(Status.VISITOR_NOT_FOUND.value, details)


class DatabaseConnectionError(VisitorLogError):
    """Raised when no database connection is available."""

    def __init__(
        self,
        message: str = "Database connection failed",
        details: Optional[Any] = None,
    ):
        super().__init__(message, details)


__all__ = [
    "VisitorLogError",
    "VisitorValidationError",
    "InputTypeError",
    "InputFormatError",
    "InvalidColumnError",
    "VisitorNotFoundError",
    "DatabaseConnectionError",
]
