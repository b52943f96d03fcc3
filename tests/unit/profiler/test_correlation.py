"""
Unit tests for Pearson correlation across numeric columns.

Author: Daniel Edge
"""

import numpy as np
import pytest

from quality_framework.profiler.correlation import (
    CorrelationEngine,
    pearson,
    to_numeric_array,
)


@pytest.mark.unit
class TestPearson:
    """Test the coefficient function."""

    def test_identical_columns(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        assert pearson(x, x.copy()) == pytest.approx(1.0)

    def test_perfect_negative(self):
        x = np.array([1.0, 2.0, 3.0])
        y = np.array([30.0, 20.0, 10.0])
        assert pearson(x, y) == pytest.approx(-1.0)

    def test_constant_column_is_zero(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        y = np.array([5.0, 5.0, 5.0, 5.0])
        assert pearson(x, y) == 0.0

    def test_constant_non_integral_column_is_zero(self):
        x = np.array([0.1, 0.1, 0.1])
        y = np.array([1.0, 2.0, 3.0])
        assert pearson(x, y) == 0.0

    def test_nan_makes_pair_undefined(self):
        x = np.array([1.0, np.nan, 3.0])
        y = np.array([1.0, 2.0, 3.0])
        assert pearson(x, y) is None

    def test_empty_arrays(self):
        assert pearson(np.array([]), np.array([])) == 0.0

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="differ in length"):
            pearson(np.array([1.0]), np.array([1.0, 2.0]))

    def test_result_bounded(self):
        rng = np.random.default_rng(7)
        x = rng.normal(size=50)
        y = 3 * x + 1e-12
        coefficient = pearson(x, y)
        assert -1.0 <= coefficient <= 1.0

    def test_huge_magnitudes(self):
        x = np.array([1e200, 2e200, 3e200])
        assert pearson(x, x.copy()) == pytest.approx(1.0)
        assert pearson(x, -x) == pytest.approx(-1.0)

    def test_tiny_magnitudes(self):
        x = np.array([1e-200, 2e-200, 4e-200])
        y = np.array([1.0, 2.0, 4.0])
        assert pearson(x, y) == pytest.approx(1.0)

    def test_unaffected_by_power_of_two_scaling(self):
        x = np.array([1.0, 5.0, 2.0, 8.0, 3.0])
        y = np.array([2.0, 3.0, 9.0, 1.0, 4.0])
        assert pearson(x * 2.0 ** 600, y) == pearson(x, y)

    def test_to_numeric_array(self):
        array = to_numeric_array(["1", None, "x", 4])
        assert array[0] == 1.0
        assert np.isnan(array[1])
        assert np.isnan(array[2])
        assert array[3] == 4.0


@pytest.mark.unit
class TestCorrelationEngine:
    """Test matrix assembly."""

    def test_matrix_values(self):
        matrix = CorrelationEngine().calculate({
            "a": [1, 2, 3, 4],
            "b": [1, 2, 3, 4],
            "c": [5, 5, 5, 5],
        })

        assert matrix.columns == ("a", "b", "c")
        assert matrix.coefficient("a", "b") == pytest.approx(1.0)
        assert matrix.coefficient("a", "c") == 0.0
        assert matrix.coefficient("c", "c") == 0.0
        assert matrix.coefficient("a", "a") == pytest.approx(1.0)

    def test_matrix_is_symmetric(self):
        matrix = CorrelationEngine().calculate({
            "x": [1, 5, 2, 8, 3],
            "y": [2, 3, 9, 1, 4],
            "z": ["7", "1", "4", "4", "2"],
        })

        for a in matrix.columns:
            for b in matrix.columns:
                assert matrix.coefficient(a, b) == matrix.coefficient(b, a)

    def test_unparseable_cell_gives_none(self):
        matrix = CorrelationEngine().calculate({
            "a": [1, 2, 3, 4, 5, 6],
            "b": ["1", "2", "x", "4", "5", "6"],
        })

        assert matrix.coefficient("a", "b") is None
        assert matrix.coefficient("b", "b") is None
        assert matrix.coefficient("a", "a") == pytest.approx(1.0)

    def test_no_numeric_columns(self):
        matrix = CorrelationEngine().calculate({})
        assert matrix.is_empty
        assert len(matrix) == 0
        assert matrix.to_dict() == {}

    def test_unknown_column_lookup(self):
        matrix = CorrelationEngine().calculate({"a": [1, 2]})
        with pytest.raises(KeyError):
            matrix.coefficient("a", "zzz")

    def test_pairs_upper_triangle(self):
        matrix = CorrelationEngine().calculate({"a": [1, 2], "b": [2, 4], "c": [3, 1]})
        assert [(a, b) for a, b, _ in matrix.pairs()] == [("a", "b"), ("a", "c"), ("b", "c")]
