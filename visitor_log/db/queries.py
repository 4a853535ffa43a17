"""
Visitor Query Catalog

Fixed SQL text for every visitor operation. Values are always bound
parameters (%s); the only interpolated piece is the column name in
UPDATE_VISITOR, which callers must check with models.validate_column first.
"""

TABLE_NAME = "visitors"

CREATE_VISITORS_TABLE = f"""
    CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
        id SERIAL PRIMARY KEY,
        name VARCHAR(100) NOT NULL,
        age INTEGER NOT NULL CHECK (age >= 0),
        date DATE NOT NULL,
        time TIME NOT NULL,
        assistant VARCHAR(100) NOT NULL,
        comments TEXT
    )
"""

ADD_NEW_VISITOR = (
    f"INSERT INTO {TABLE_NAME} (name, age, date, time, assistant, comments) "
    "VALUES (%s, %s, %s, %s, %s, %s)"
)

LIST_ALL_VISITORS = f"SELECT * FROM {TABLE_NAME}"

VIEW_ONE_VISITOR = f"SELECT * FROM {TABLE_NAME} WHERE id = %s"

VIEW_LAST_VISITOR = f"SELECT * FROM {TABLE_NAME} ORDER BY id DESC LIMIT 1"

# {column} is filled from models.WRITABLE_COLUMNS only
UPDATE_VISITOR = f"UPDATE {TABLE_NAME} SET {{column}} = %s WHERE id = %s"

DELETE_VISITOR = f"DELETE FROM {TABLE_NAME} WHERE id = %s"

DELETE_ALL_VISITORS = f"DELETE FROM {TABLE_NAME}"


__all__ = [
    "TABLE_NAME",
    "CREATE_VISITORS_TABLE",
    "ADD_NEW_VISITOR",
    "LIST_ALL_VISITORS",
    "VIEW_ONE_VISITOR",
    "VIEW_LAST_VISITOR",
    "UPDATE_VISITOR",
    "DELETE_VISITOR",
    "DELETE_ALL_VISITORS",
]
