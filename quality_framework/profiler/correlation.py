"""
Correlation Engine - Pearson coefficients across numeric columns.

Coefficients are computed row-pairwise over each column's full value
sequence. A cell that does not parse as a number becomes NaN and is NOT
dropped: any pair touching such a cell is undefined and reported as None.
A zero denominator (a constant column) yields 0.0 rather than NaN.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np

from quality_framework.profiler.coercion import parse_number
from quality_framework.profiler.profile_result import CorrelationMatrix

logger = logging.getLogger(__name__)


def to_numeric_array(values: Sequence[Any]) -> np.ndarray:
    """Parse every value; failed parses and missing cells become NaN."""
    parsed = [parse_number(value) for value in values]
    return np.array([np.nan if number is None else number for number in parsed], dtype=np.float64)


def _deviations(array: np.ndarray) -> np.ndarray:
    # A constant column has exactly zero spread; x - mean can leave rounding residue
    if np.all(array == array[0]):
        return np.zeros_like(array)
    # Rescale by a power of two (exact) so sums of squares neither overflow
    # near 1e200 nor underflow near 1e-200
    _, exponent = np.frexp(np.max(np.abs(array)))
    scaled = np.ldexp(array, -int(exponent))
    return scaled - scaled.mean()


def pearson(x: np.ndarray, y: np.ndarray) -> Optional[float]:
    """
    Pearson correlation coefficient of two aligned arrays.

    Args:
        x: First column as floats (NaN for unparseable cells)
        y: Second column, same length as x

    Returns:
        Coefficient in [-1, 1]; 0.0 when either column has zero variance;
        None when either array contains NaN
    """
    if len(x) != len(y):
        raise ValueError(f"Columns differ in length: {len(x)} != {len(y)}")
    if len(x) == 0:
        return 0.0
    if np.isnan(x).any() or np.isnan(y).any():
        return None

    dx = _deviations(x)
    dy = _deviations(y)
    numerator = float(np.dot(dx, dy))
    denominator = math.sqrt(float(np.dot(dx, dx)) * float(np.dot(dy, dy)))

    if denominator == 0:
        return 0.0

    coefficient = numerator / denominator
    if not math.isfinite(coefficient):
        return None
    return max(-1.0, min(1.0, coefficient))


class CorrelationEngine:
    """
    Build the correlation matrix for a table's numeric columns.

    Example:
        >>> engine = CorrelationEngine()
        >>> matrix = engine.calculate({"a": [1, 2, 3, 4], "b": [5, 5, 5, 5]})
        >>> matrix.coefficient("a", "a"), matrix.coefficient("a", "b")
        (1.0, 0.0)
    """

    def calculate(self, numeric_columns: Mapping[str, Sequence[Any]]) -> CorrelationMatrix:
        """
        Calculate pairwise coefficients.

        Args:
            numeric_columns: Column name to raw values, for columns typed numeric,
                in the order they should appear in the matrix

        Returns:
            Symmetric CorrelationMatrix (empty when no columns are given)
        """
        names = list(numeric_columns.keys())
        arrays: Dict[str, np.ndarray] = {
            name: to_numeric_array(values) for name, values in numeric_columns.items()
        }

        size = len(names)
        grid: List[List[Optional[float]]] = [[None] * size for _ in range(size)]
        for i in range(size):
            for j in range(i, size):
                coefficient = pearson(arrays[names[i]], arrays[names[j]])
                grid[i][j] = coefficient
                grid[j][i] = coefficient

        undefined = sum(1 for i in range(size) for j in range(i, size) if grid[i][j] is None)
        if undefined:
            logger.debug(f"{undefined} correlation pair(s) undefined due to non-numeric cells")

        return CorrelationMatrix(
            columns=tuple(names),
            coefficients=tuple(tuple(row) for row in grid),
        )
