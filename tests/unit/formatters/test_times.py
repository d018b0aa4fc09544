"""Unit tests for rzl_utils.formatters.times."""

import re
from datetime import date, datetime

import pytest

from rzl_utils.formatters.times import format_date_time, get_gmt_offset

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "value, fmt, expected",
    [
        ("2024-03-05T07:08:09", "DD/MM/YYYY hh.mm", "05/03/2024 07.08"),
        (datetime(2024, 12, 31, 23, 59, 1), None, "2024-12-31 23:59:01"),
        (date(2024, 1, 2), "YYYY-MM-DD hh:mm:ss", "2024-01-02 00:00:00"),
        ("2024-01-02", "YYYY", "2024"),
        ("not a date", None, None),
        ("", None, None),
        (None, None, None),
        ("2024-01-02", 5, None),
    ],
)
def test_format_date_time(value, fmt, expected):
    """Tokens are replaced by zero-padded date parts."""
    assert format_date_time(value, fmt) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-01T00:00:00+05:30", "+0530"),
        ("2024-06-01T12:00:00-03:00", "-0300"),
        ("2024-06-01T12:00:00+00:00", "+0000"),
        ("garbage", "0"),
        (42, "0"),
    ],
)
def test_get_gmt_offset(value, expected):
    """Aware values report their own offset."""
    assert get_gmt_offset(value) == expected


@pytest.mark.parametrize("value", [None, "", "2024-06-01T12:00:00", date(2024, 6, 1)])
def test_get_gmt_offset_local(value):
    """Naive values and "now" use the local offset."""
    assert re.fullmatch(r"[+-]\d{4}", get_gmt_offset(value))
