"""
Unit tests for value coercion rules.

Author: Daniel Edge
"""

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from quality_framework.profiler.coercion import (
    is_date_like,
    is_missing,
    normalize_missing,
    parse_number,
)


@pytest.mark.unit
class TestIsMissing:
    """Test the missing-value definition."""

    @pytest.mark.parametrize("value", [None, "", float("nan"), np.nan, pd.NA, pd.NaT])
    def test_missing_values(self, value):
        assert is_missing(value)

    @pytest.mark.parametrize("value", [" ", "0", 0, 0.0, False, "nan", "NULL", [None]])
    def test_present_values(self, value):
        assert not is_missing(value)

    def test_normalize_missing(self):
        assert normalize_missing("") is None
        assert normalize_missing(np.nan) is None
        assert normalize_missing("x") == "x"

    def test_normalize_unwraps_numpy(self):
        value = normalize_missing(np.float64(2.5))
        assert value == 2.5
        assert type(value) is float


@pytest.mark.unit
class TestParseNumber:
    """Test explicit numeric parsing."""

    @pytest.mark.parametrize("value, expected", [
        (10, 10.0),
        (-2.5, -2.5),
        ("42", 42.0),
        (" 3.5 ", 3.5),
        ("-7", -7.0),
        ("+1e3", 1000.0),
        (".5", 0.5),
        ("5.", 5.0),
        (np.int32(4), 4.0),
    ])
    def test_numbers(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", [
        "", None, "abc", "1,000", "1_000", "nan", "inf", "-Infinity",
        "0x1F", "12abc", True, False, float("inf"), float("nan"), " ", [1],
    ])
    def test_non_numbers(self, value):
        assert parse_number(value) is None

    def test_integer_beyond_float_range(self):
        assert parse_number(10 ** 400) is None
        assert parse_number(-(10 ** 400)) is None

    def test_long_digit_string_overflows_to_none(self):
        assert parse_number("1" + "0" * 400) is None

    def test_empty_string_is_never_zero(self):
        assert parse_number("") is None


@pytest.mark.unit
class TestIsDateLike:
    """Test date recognition."""

    @pytest.mark.parametrize("value", [
        "2024-01-15",
        "2024-01-15 10:30:00",
        "2024/01/15",
        "01/15/2024",
        "Jan 15, 2024",
        datetime(2024, 1, 15, 8, 0),
        date(2024, 1, 15),
        np.datetime64("2024-01-15"),
    ])
    def test_dates(self, value):
        assert is_date_like(value)

    @pytest.mark.parametrize("value", [
        "2024-13-45",
        "hello",
        "20240115",
        "",
        None,
        42,
        "12",
        pd.NaT,
    ])
    def test_non_dates(self, value):
        assert not is_date_like(value)
