"""
Unit tests for TypeInferrer majority-vote classification.

Author: Daniel Edge
"""

from datetime import datetime

import pytest

from quality_framework.profiler.type_inferrer import TypeInferrer


@pytest.fixture
def inferrer():
    return TypeInferrer()


@pytest.mark.unit
class TestSingleValueColumns:
    """Test classification of one-cell columns."""

    @pytest.mark.parametrize("value, expected", [
        (None, "unknown"),
        ("", "unknown"),
        (5, "numeric"),
        ("5.5", "numeric"),
        ("2024-01-15", "datetime"),
        (datetime(2024, 1, 15), "datetime"),
        ("hello", "categorical"),
        (True, "categorical"),
    ])
    def test_single_value(self, inferrer, value, expected):
        assert inferrer.infer_column_type([value]) == expected


@pytest.mark.unit
class TestInferColumnType:
    """Test column-level inference."""

    def test_all_numeric(self, inferrer):
        assert inferrer.infer_column_type([1, 2, 3]) == "numeric"

    def test_numeric_strings(self, inferrer):
        assert inferrer.infer_column_type(["1", "2.5", "-3"]) == "numeric"

    def test_missing_cells_ignored(self, inferrer):
        assert inferrer.infer_column_type([1, None, "", 2]) == "numeric"

    def test_all_missing_is_unknown(self, inferrer):
        assert inferrer.infer_column_type([None, "", None]) == "unknown"

    def test_empty_column_is_unknown(self, inferrer):
        assert inferrer.infer_column_type([]) == "unknown"

    def test_one_stray_value_in_six_tolerated(self, inferrer):
        # 5/6 = 83% numeric
        assert inferrer.infer_column_type(["1", "2", "x", "4", "5", "6"]) == "numeric"

    def test_exactly_eighty_percent_is_not_enough(self, inferrer):
        # 4/5 = 80%, threshold is strict
        assert inferrer.infer_column_type(["1", "2", "3", "4", "x"]) == "categorical"

    def test_dates(self, inferrer):
        values = ["2024-01-15", "2024-02-01", "2024-03-10", None]
        assert inferrer.infer_column_type(values) == "datetime"

    def test_mixed_numbers_and_dates(self, inferrer):
        values = ["1", "2", "2024-01-01", "2024-01-02"]
        assert inferrer.infer_column_type(values) == "categorical"

    def test_text(self, inferrer):
        assert inferrer.infer_column_type(["red", "green", "blue"]) == "categorical"

    def test_repeated_values_weighted_by_count(self, inferrer):
        values = ["x"] + ["7"] * 9
        assert inferrer.infer_column_type(values) == "numeric"

    def test_custom_threshold(self):
        inferrer = TypeInferrer(threshold=0.5)
        assert inferrer.infer_column_type(["1", "2", "x"]) == "numeric"

    def test_booleans_are_not_numeric(self, inferrer):
        assert inferrer.infer_column_type([True, False, True]) == "categorical"

    def test_boolean_does_not_vote_with_equal_number(self, inferrer):
        # 3 of 4 values numeric is below the majority threshold
        assert inferrer.infer_column_type([1, 2, 3, True]) == "categorical"
