"""
Visitor Data Access

One function per visitor operation. Each takes a QueryPool, runs exactly one
statement from the query catalog and turns the result into a Status, a row,
or an exception carrying a catalog message.

Usage:
    from visitor_log.db.connection import PostgresPool, init_connection_pool
    from visitor_log.db import visitors

    init_connection_pool()
    pool = PostgresPool()
    visitors.create_visitors_table(pool)
    visitors.add_new_visitor(pool, {...})
"""

from typing import Any, Mapping, Optional

from ..core.exceptions import VisitorNotFoundError, VisitorValidationError
from ..core.logger import get_logger
from ..core.messages import Status
from . import queries
from .connection import QueryPool
from .models import (
    VisitorList,
    VisitorRecord,
    validate_column,
    validate_field,
    validate_visitor,
    visitor_params,
)

logger = get_logger(__name__)


def create_visitors_table(pool: QueryPool) -> Status:
    """Create the visitors table if it does not exist."""
    pool.query(queries.CREATE_VISITORS_TABLE)
    logger.info("Visitors table ready")
    return Status.TABLE_CREATED


def add_new_visitor(pool: QueryPool, visitor: Mapping[str, Any]) -> Status:
    """
    Validate and insert a visitor.

    Args:
        pool: Store to run the insert against
        visitor: Mapping with name, age, date, time, assistant, comments

    Returns:
        Status.VISITOR_ADDED

    Raises:
        InputTypeError: if a field is not a string
        InputFormatError: if age, date or time is malformed
    """
    try:
        validate_visitor(visitor)
    except VisitorValidationError as e:
        logger.warning(f"Rejected visitor: {e.message}")
        raise

    pool.query(queries.ADD_NEW_VISITOR, visitor_params(visitor))
    logger.info("Visitor added")
    return Status.VISITOR_ADDED


def list_all_visitors(pool: QueryPool) -> VisitorList:
    """Return every visitor row, in the order the store returns them."""
    return pool.query(queries.LIST_ALL_VISITORS).rows


def view_one_visitor(pool: QueryPool, visitor_id: int) -> Optional[VisitorRecord]:
    """
    Get one visitor by id.

    Returns:
        The visitor row, or None if no visitor has this id
    """
    rows = pool.query(queries.VIEW_ONE_VISITOR, [visitor_id]).rows
    return rows[0] if rows else None


def view_last_visitor(pool: QueryPool) -> Optional[VisitorRecord]:
    """Get the most recently inserted visitor, or None if the table is empty."""
    rows = pool.query(queries.VIEW_LAST_VISITOR).rows
    return rows[0] if rows else None


def update_visitor(
    pool: QueryPool,
    visitor_id: int,
    column: str,
    value: Any,
) -> Status:
    """
    Set a single column of one visitor.

    The column must be one of models.WRITABLE_COLUMNS and the value must
    pass that column's validation.

    Args:
        pool: Store to run the update against
        visitor_id: Id of the visitor to update
        column: Column to set
        value: New value, bound as a parameter

    Returns:
        Status.VISITOR_UPDATED

    Raises:
        InvalidColumnError: if the column is not writable
        InputTypeError / InputFormatError: if the value is invalid
        VisitorNotFoundError: if no row was updated
    """
    try:
        column = validate_column(column)
        validate_field(column, value)
    except VisitorValidationError as e:
        logger.warning(f"Rejected update of visitor {visitor_id}: {e.message}")
        raise

    result = pool.query(queries.UPDATE_VISITOR.format(column=column), [value, visitor_id])
    if result.row_count < 1:
        raise VisitorNotFoundError(visitor_id)

    logger.info(f"Updated {column} of visitor {visitor_id}")
    return Status.VISITOR_UPDATED


def delete_visitor(pool: QueryPool, visitor_id: int) -> Status:
    """
    Delete one visitor by id.

    Raises:
        VisitorNotFoundError: if no row was deleted
    """
    result = pool.query(queries.DELETE_VISITOR, [visitor_id])
    if result.row_count < 1:
        raise VisitorNotFoundError(visitor_id)

    logger.info(f"Deleted visitor {visitor_id}")
    return Status.VISITOR_DELETED


def delete_all_visitors(pool: QueryPool) -> Status:
    """
    Delete every visitor.

    An empty table is not an error: returns Status.NO_VISITORS_FOUND.
    """
    result = pool.query(queries.DELETE_ALL_VISITORS)
    if result.row_count < 1:
        return Status.NO_VISITORS_FOUND

    logger.info(f"Deleted all visitors ({result.row_count} rows)")
    return Status.ALL_VISITORS_DELETED


__all__ = [
    "create_visitors_table",
    "add_new_visitor",
    "list_all_visitors",
    "view_one_visitor",
    "view_last_visitor",
    "update_visitor",
    "delete_visitor",
    "delete_all_visitors",
]
