"""
Centralized Logging Configuration

Provides consistent logging across all visitor log modules.
Uses [OK], [WARNING], [ERROR] prefix style for console output.

Usage:
    from visitor_log.core.logger import get_logger
    logger = get_logger(__name__)

    logger.info("Visitor added")           # [OK] Visitor added
    logger.warning("Invalid date")         # [WARNING] Invalid date
    logger.error("Connection failed")      # [ERROR] Connection failed
"""

import sys
import logging
from typing import List, Optional
from pathlib import Path

from .config import settings


# =============================================================================
# FORMATTERS
# =============================================================================

class PrefixFormatter(logging.Formatter):
    """Console formatter with [OK], [WARNING], [ERROR] prefixes."""

    LEVEL_PREFIXES = {
        logging.DEBUG: "[DEBUG]",
        logging.INFO: "[OK]",
        logging.WARNING: "[WARNING]",
        logging.ERROR: "[ERROR]",
        logging.CRITICAL: "[CRITICAL]",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.LEVEL_PREFIXES.get(record.levelno, "[INFO]")
        message = record.getMessage()

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            message = f"{message}\n{record.exc_text}"

        return f"{prefix} {message}"


class TimestampFormatter(logging.Formatter):
    """Formatter with timestamps for file logging."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        formatted = f"[{record.levelname}] {timestamp} - {record.name} - {record.getMessage()}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            formatted = f"{formatted}\n{record.exc_text}"

        return formatted


# =============================================================================
# CONFIGURATION
# =============================================================================

# Root logger name - all module loggers are children of this
ROOT_LOGGER_NAME = "visitor_log"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level_name: Optional[str] = None) -> int:
    """Resolve a level name, falling back to the LOG_LEVEL setting, then INFO."""
    level_name = level_name or settings.logging.log_level
    return LEVELS.get(level_name.upper(), logging.INFO)


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(PrefixFormatter())
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(TimestampFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
    return handlers


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    (Re)configure the root visitor_log logger.

    Existing handlers are closed and replaced. Runs once on import with the
    values from LoggingSettings; call again to change level or log file.

    Args:
        level: Level name (default: LOG_LEVEL)
        log_file: Path of a timestamped log file (default: LOG_FILE)

    Returns:
        The root visitor_log logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_level = get_log_level(level)
    root_logger.setLevel(log_level)
    for handler in _build_handlers(log_level, log_file or settings.logging.log_file):
        root_logger.addHandler(handler)

    # Don't propagate to Python's root logger
    root_logger.propagate = False
    return root_logger


# =============================================================================
# PUBLIC API
# =============================================================================

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., __name__, "visitors").
              If None, returns the root visitor_log logger.

    Returns:
        Logger that inherits handlers from the root visitor_log logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    prefix = f"{ROOT_LOGGER_NAME}."
    if name.startswith(prefix):
        name = name[len(prefix):]

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


logger = configure_logging()


__all__ = [
    "logger",
    "get_logger",
    "get_log_level",
    "configure_logging",
    "PrefixFormatter",
    "TimestampFormatter",
    "ROOT_LOGGER_NAME",
]
