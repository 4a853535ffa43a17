"""
Database Module

Provides connection management, the visitor query catalog, input
validation, and the visitor operations.

Usage:
    from visitor_log.db import PostgresPool, init_connection_pool
    from visitor_log.db import add_new_visitor, list_all_visitors
"""

# Connection management
from .connection import (
    QueryResult,
    QueryPool,
    PostgresPool,
    get_db_connection,
    get_connection,
    init_connection_pool,
    check_connection,
    close_connection_pool,
)

# Models and validation
from .models import (
    VisitorInput,
    VisitorRecord,
    VisitorList,
    WRITABLE_COLUMNS,
    validate_column,
    validate_field,
    validate_visitor,
)

# Visitor operations
from .visitors import (
    create_visitors_table,
    add_new_visitor,
    list_all_visitors,
    view_one_visitor,
    view_last_visitor,
    update_visitor,
    delete_visitor,
    delete_all_visitors,
)

__all__ = [
    # Connection
    'QueryResult',
    'QueryPool',
    'PostgresPool',
    'get_db_connection',
    'get_connection',
    'init_connection_pool',
    'check_connection',
    'close_connection_pool',
    # Models
    'VisitorInput',
    'VisitorRecord',
    'VisitorList',
    'WRITABLE_COLUMNS',
    'validate_column',
    'validate_field',
    'validate_visitor',
    # Operations
    'create_visitors_table',
    'add_new_visitor',
    'list_all_visitors',
    'view_one_visitor',
    'view_last_visitor',
    'update_visitor',
    'delete_visitor',
    'delete_all_visitors',
]
