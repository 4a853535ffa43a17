"""
Database Connection Management

Handles PostgreSQL connection pooling and connection lifecycle, and exposes
the store boundary used by the visitor operations: anything with a
``query(statement, params)`` method returning a ``QueryResult``.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

import psycopg2
from psycopg2.extras import RealDictCursor
from psycopg2.pool import PoolError, SimpleConnectionPool

from ..core.config import settings
from ..core.exceptions import DatabaseConnectionError
from ..core.logger import get_logger

logger = get_logger(__name__)

_connection_pool: Optional[SimpleConnectionPool] = None


@dataclass
class QueryResult:
    """Rows returned by a statement and the number of rows it affected."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    row_count: int = 0


class QueryPool(Protocol):
    """Store boundary: execute one statement, return its rows and row count."""

    def query(
        self, statement: str, params: Optional[Sequence[Any]] = None
    ) -> QueryResult:
        ...


def get_db_connection():
    """
    Get a database connection.
    Uses DATABASE_URL if provided, otherwise uses individual parameters.

    Returns:
        psycopg2.connection: Database connection
    """
    return psycopg2.connect(**settings.database.connect_kwargs)


@contextmanager
def get_connection():
    """
    Context manager for database connections.
    Uses connection pool if available, otherwise creates a new connection.

    Yields:
        psycopg2.connection: Database connection

    Raises:
        DatabaseConnectionError: if the pool is exhausted or closed
    """
    conn = None
    pool = _connection_pool
    try:
        if pool:
            try:
                conn = pool.getconn()
            except PoolError as e:
                raise DatabaseConnectionError(details=str(e)) from e
        else:
            conn = get_db_connection()
        yield conn
    finally:
        if conn:
            if pool:
                pool.putconn(conn)
            else:
                conn.close()


def init_connection_pool(
    min_conn: Optional[int] = None,
    max_conn: Optional[int] = None,
) -> None:
    """
    Initialize the shared connection pool.

    Args:
        min_conn: Minimum number of connections (default: DB_POOL_MIN_CONN)
        max_conn: Maximum number of connections (default: DB_POOL_MAX_CONN)
    """
    global _connection_pool

    db_config = settings.database
    min_conn = min_conn or db_config.pool_min_conn
    max_conn = max_conn or db_config.pool_max_conn

    _connection_pool = SimpleConnectionPool(min_conn, max_conn, **db_config.connect_kwargs)
    logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections)")


def check_connection() -> bool:
    """
    Test database connection.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        with get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()
        logger.info("Database connection test successful")
        return True
    except Exception as e:
        logger.error(f"Database connection test failed: {e}")
        return False


def close_connection_pool() -> None:
    """Close all connections in the pool."""
    global _connection_pool
    if _connection_pool:
        _connection_pool.closeall()
        _connection_pool = None
        logger.info("Database connection pool closed")


def _rollback_quietly(conn) -> None:
    """Roll back after a failed statement without masking the original error."""
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed: {e}")


class PostgresPool:
    """
    QueryPool backed by PostgreSQL.

    Each call borrows one connection, runs the statement on a RealDictCursor
    and commits. Errors roll back and propagate unchanged.
    """

    def query(
        self, statement: str, params: Optional[Sequence[Any]] = None
    ) -> QueryResult:
        with get_connection() as conn:
            try:
                with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                    cursor.execute(statement, params)
                    # Only statements that return rows have a description
                    rows = [dict(row) for row in cursor.fetchall()] if cursor.description else []
                    row_count = cursor.rowcount
                conn.commit()
            except psycopg2.Error as e:
                logger.error(f"Database error: {e}")
                _rollback_quietly(conn)
                raise
        return QueryResult(rows=rows, row_count=row_count)


__all__ = [
    "QueryResult",
    "QueryPool",
    "PostgresPool",
    "get_db_connection",
    "get_connection",
    "init_connection_pool",
    "check_connection",
    "close_connection_pool",
]
