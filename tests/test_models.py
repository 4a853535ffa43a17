"""Field validation."""

import pytest

from visitor_log.core.exceptions import InputFormatError, InputTypeError, InvalidColumnError
from visitor_log.core.messages import format_error_messages
from visitor_log.db.models import (
    WRITABLE_COLUMNS,
    validate_column,
    validate_field,
    validate_visitor,
    visitor_params,
)


def test_valid_visitor_passes(new_visitor):
    before = dict(new_visitor)
    assert validate_visitor(new_visitor) is None
    assert new_visitor == before


@pytest.mark.parametrize("age", [0, 25, 150])
def test_age_in_range(age):
    validate_field("age", age)


@pytest.mark.parametrize("age", [-1, 151, 25.5, "25", True, None])
def test_age_out_of_range_or_wrong_type(age):
    with pytest.raises(InputFormatError) as exc_info:
        validate_field("age", age)
    assert exc_info.value.message == format_error_messages.AGE_FORMAT_ERROR


@pytest.mark.parametrize("value", ["2024-06-08", "1999-12-31"])
def test_date_format_accepted(value):
    validate_field("date", value)


@pytest.mark.parametrize("value", ["04-12-2022", "2024/06/08", "2024-6-8", "2024-06-08T00:00"])
def test_date_format_rejected(value):
    with pytest.raises(InputFormatError):
        validate_field("date", value)


@pytest.mark.parametrize("value", ["09:00", "23:59"])
def test_time_format_accepted(value):
    validate_field("time", value)


@pytest.mark.parametrize("value", ["10:1", "9:00", "0900", "09:00:00"])
def test_time_format_rejected(value):
    with pytest.raises(InputFormatError):
        validate_field("time", value)


def test_first_failure_wins(new_visitor):
    # name is checked before age
    new_visitor["name"] = None
    new_visitor["age"] = -5
    with pytest.raises(InputTypeError) as exc_info:
        validate_visitor(new_visitor)
    assert exc_info.value.field == "name"


def test_age_checked_before_date(new_visitor):
    new_visitor["age"] = -5
    new_visitor["date"] = 20240101
    with pytest.raises(InputFormatError) as exc_info:
        validate_visitor(new_visitor)
    assert exc_info.value.field == "age"


def test_missing_field_fails(new_visitor):
    del new_visitor["comments"]
    with pytest.raises(InputTypeError) as exc_info:
        validate_visitor(new_visitor)
    assert exc_info.value.field == "comments"
    assert exc_info.value.value is None


def test_type_error_message_embeds_value():
    with pytest.raises(InputTypeError) as exc_info:
        validate_field("assistant", 123)
    assert "123" in exc_info.value.message


@pytest.mark.parametrize("column", WRITABLE_COLUMNS)
def test_writable_columns_accepted(column):
    assert validate_column(column) == column


@pytest.mark.parametrize("column", ["id", "NAME", "", None, "name; --"])
def test_other_columns_rejected(column):
    with pytest.raises(InvalidColumnError):
        validate_column(column)


def test_visitor_params_follow_column_order(new_visitor):
    assert visitor_params(new_visitor) == [new_visitor[c] for c in WRITABLE_COLUMNS]
    assert visitor_params(new_visitor)[0] == "Bend Over"
