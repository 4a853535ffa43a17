"""
Visitor Log

Data access for a visitor log table: create, add, list, view, update and
delete visitors, with input validation and a fixed status/error vocabulary.
"""

from .core.messages import Status
from .core.exceptions import VisitorLogError, VisitorNotFoundError, VisitorValidationError
from .db import (
    PostgresPool,
    QueryResult,
    create_visitors_table,
    add_new_visitor,
    list_all_visitors,
    view_one_visitor,
    view_last_visitor,
    update_visitor,
    delete_visitor,
    delete_all_visitors,
)

__version__ = "1.0.0"

__all__ = [
    "Status",
    "VisitorLogError",
    "VisitorNotFoundError",
    "VisitorValidationError",
    "PostgresPool",
    "QueryResult",
    "create_visitors_table",
    "add_new_visitor",
    "list_all_visitors",
    "view_one_visitor",
    "view_last_visitor",
    "update_visitor",
    "delete_visitor",
    "delete_all_visitors",
]
