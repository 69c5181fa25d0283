"""
Tests for date rules.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from fieldcheck.core.exceptions import InvalidParameterError
from fieldcheck.rules.dates import (
    parse_date,
    parse_relative,
    validate_date,
    validate_date_after,
    validate_date_before,
    validate_date_format,
)


@pytest.mark.parametrize(
    "value",
    [
        "2024-02-29",
        "March 5, 2021",
        "2021-03-05T10:15:00Z",
        "5 Mar 2021 10:15",
        datetime(2020, 1, 1),
        date(2020, 1, 1),
    ],
)
def test_date_passes(context, value):
    """Test values a general date parser accepts."""
    assert validate_date("f", value, [], context) is True


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2023-02-30", None, 20240101.5])
def test_date_fails(context, value):
    """Test values that are not dates."""
    assert validate_date("f", value, [], context) is False


def test_date_format(context):
    """Test strict format matching."""
    assert validate_date_format("f", "2024-01-31", ["%Y-%m-%d"], context) is True
    assert validate_date_format("f", "31/01/2024", ["%d/%m/%Y"], context) is True
    assert validate_date_format("f", "2024-01-31 10:00", ["%Y-%m-%d"], context) is False
    assert validate_date_format("f", "2024-02-30", ["%Y-%m-%d"], context) is False
    assert validate_date_format("f", "Jan 31 2024", ["%Y-%m-%d"], context) is False
    assert validate_date_format("f", None, ["%Y-%m-%d"], context) is False


def test_date_format_malformed_params(context):
    """Test dateFormat requires a format string."""
    with pytest.raises(InvalidParameterError):
        validate_date_format("f", "2024-01-31", [], context)
    with pytest.raises(InvalidParameterError):
        validate_date_format("f", "2024-01-31", [20240131], context)


def test_date_before(context):
    """Test strictly-earlier comparisons with strings and objects."""
    assert validate_date_before("f", "2020-01-01", ["2021-01-01"], context) is True
    assert validate_date_before("f", "2021-01-01", ["2021-01-01"], context) is False
    assert validate_date_before("f", datetime(2019, 5, 1), [date(2019, 5, 2)], context) is True
    assert validate_date_before("f", "garbage", ["2021-01-01"], context) is False


def test_date_after(context):
    """Test strictly-later comparisons with strings and objects."""
    assert validate_date_after("f", "2022-01-01", ["2021-01-01"], context) is True
    assert validate_date_after("f", "2021-01-01", [datetime(2021, 1, 1)], context) is False
    assert validate_date_after("f", date(2030, 1, 1), ["2021-01-01"], context) is True


def test_date_comparison_with_timezones(context):
    """Test aware datetimes are compared on their instants."""
    utc_noon = datetime(2021, 6, 1, 12, tzinfo=timezone.utc)
    earlier_elsewhere = datetime(2021, 6, 1, 13, tzinfo=timezone(timedelta(hours=2)))
    assert validate_date_after("f", utc_noon, [earlier_elsewhere], context) is True
    assert validate_date_before("f", "2021-06-01T11:00:00+00:00", [utc_noon], context) is True


@pytest.mark.parametrize("params", [[], ["not a date"], [None]])
def test_date_before_malformed_params(context, params):
    """Test an unusable comparison date raises rather than fails."""
    with pytest.raises(InvalidParameterError):
        validate_date_before("f", "2020-01-01", params, context)


def test_parse_date_returns_datetime():
    """Test dates are widened to datetimes."""
    assert parse_date(date(2020, 1, 2)) == datetime(2020, 1, 2)
    assert parse_date("2020-01-02") == datetime(2020, 1, 2)
    assert parse_date("nonsense") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("now", datetime(2024, 3, 10, 15, 30)),
        ("NOW", datetime(2024, 3, 10, 15, 30)),
        ("today", datetime(2024, 3, 10)),
        ("midnight", datetime(2024, 3, 10)),
        ("tomorrow", datetime(2024, 3, 11)),
        ("yesterday", datetime(2024, 3, 9)),
        ("+1 week", datetime(2024, 3, 17, 15, 30)),
        ("-2 days", datetime(2024, 3, 8, 15, 30)),
        ("today +1 month", datetime(2024, 4, 10)),
        ("tomorrow -3 hours", datetime(2024, 3, 10, 21)),
        ("1 year 2 months", datetime(2025, 5, 10, 15, 30)),
    ],
)
def test_parse_relative(text, expected):
    """Test relative expressions resolve against the reference time."""
    assert parse_relative(text, datetime(2024, 3, 10, 15, 30)) == expected


@pytest.mark.parametrize("text", ["2024-03-10", "nowhere", "5 Mar 2021", "week", "later"])
def test_parse_relative_ignores_other_text(text):
    """Test text that is not a relative expression is left to the date parser."""
    assert parse_relative(text, datetime(2024, 3, 10)) is None


def test_relative_dates_in_rules(context):
    """Test relative expressions work as values and comparison bounds."""
    assert validate_date("f", "tomorrow", [], context) is True
    assert validate_date("f", "+1 week", [], context) is True
    assert validate_date_before("f", "2000-01-01", ["now"], context) is True
    assert validate_date_after("f", "tomorrow", ["now"], context) is True
    assert validate_date_after("f", "yesterday", ["today"], context) is False
    assert validate_date_before("f", "today", ["+2 weeks"], context) is True


def test_relative_date_overflow_is_not_a_date(context):
    """Test offsets beyond the supported range fail instead of raising."""
    assert validate_date("f", "+999999 years", [], context) is False
