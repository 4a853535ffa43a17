from unittest.mock import MagicMock

import pytest

from visitor_log.db.connection import PostgresPool, QueryResult


@pytest.fixture()
def pool():
    """Stand-in store: every query returns no rows and affects none."""
    mock_pool = MagicMock(spec=PostgresPool)
    mock_pool.query.return_value = QueryResult()
    return mock_pool


@pytest.fixture()
def new_visitor():
    return {
        "name": "Bend Over",
        "age": 25,
        "date": "2024-05-13",
        "time": "09:00",
        "assistant": "Jane Smith",
        "comments": "Interested in programming and designing courses",
    }


@pytest.fixture()
def mocked_visitor():
    return {
        "id": 1,
        "name": "John Doe",
        "age": 30,
        "date": "2024-06-08",
        "time": "12:00",
        "assistant": "Assistant",
        "comments": "No comments",
    }
