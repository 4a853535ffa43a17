"""
Core module for the Visitor Log.

Contains centralized configuration, logging, exceptions, and the
status/error message catalog.
"""

from .config import settings, get_settings, Settings
from .logger import logger, get_logger
from .messages import Status, input_error_messages, format_error_messages
from .exceptions import (
    VisitorLogError,
    VisitorValidationError,
    InputTypeError,
    InputFormatError,
    InvalidColumnError,
    VisitorNotFoundError,
    DatabaseConnectionError,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",
    # Logger
    "logger",
    "get_logger",
    # Messages
    "Status",
    "input_error_messages",
    "format_error_messages",
    # Exceptions
    "VisitorLogError",
    "VisitorValidationError",
    "InputTypeError",
    "InputFormatError",
    "InvalidColumnError",
    "VisitorNotFoundError",
    "DatabaseConnectionError",
]
