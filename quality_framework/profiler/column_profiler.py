"""
Column Profiler - per-column statistics for the quality report.

Builds an immutable ColumnProfile from a column's values and its inferred
type in a single call.

Design Decisions:
    - Unique count treats all missing cells as one extra distinct value
    - Mode is computed over every cell, missing ones included, so a sparse
      column can report the missing marker (None) as its mode
    - Median is the lower-middle element (index floor(n/2)); even-length
      populations are not averaged
    - Outlier fences use Tukey's 1.5×IQR rule with quartiles taken as
      actual sample values (numpy's "lower" percentile method), never
      interpolated between them
    - Values that fail numeric parsing are left out of the mean, median
      and outlier population instead of raising
"""

import logging
import math
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from quality_framework.core.constants import (
    LOWER_QUARTILE,
    OUTLIER_IQR_MULTIPLIER,
    TOP_VALUES_LIMIT,
    TYPE_NUMERIC,
    UPPER_QUARTILE,
)
from quality_framework.profiler.coercion import normalize_missing, parse_number
from quality_framework.profiler.frequency import FrequencyTable
from quality_framework.profiler.profile_result import ColumnProfile, TopValue

logger = logging.getLogger(__name__)


def numeric_population(values: Sequence[Any]) -> List[float]:
    """Values that parse as numbers; missing cells and failed parses are dropped."""
    numbers = []
    for value in values:
        number = parse_number(value)
        if number is not None:
            numbers.append(number)
    return numbers


def count_outliers(numbers: Sequence[float]) -> int:
    """
    Count values strictly outside [Q1 - 1.5·IQR, Q3 + 1.5·IQR].

    Args:
        numbers: Parsed numeric values

    Returns:
        Number of outliers (0 for an empty population)
    """
    if len(numbers) == 0:
        return 0

    array = np.asarray(numbers, dtype=np.float64)
    # Quartiles are sorted[floor((n-1)*p)], not sorted[floor(n*p)]: with
    # floor(n*p), Q3 of {10, 20, 30, 1000} would be 1000 itself and no
    # outlier would be flagged. "lower" keeps quartiles as real sample values.
    q1, q3 = np.percentile(array, [LOWER_QUARTILE, UPPER_QUARTILE], method="lower")
    iqr = q3 - q1
    lower_bound = q1 - OUTLIER_IQR_MULTIPLIER * iqr
    upper_bound = q3 + OUTLIER_IQR_MULTIPLIER * iqr

    return int(np.count_nonzero((array < lower_bound) | (array > upper_bound)))


def lower_median(numbers: Sequence[float]) -> Optional[float]:
    """Element at index floor(n/2) of the sorted values, or None when empty."""
    if len(numbers) == 0:
        return None
    ordered = sorted(numbers)
    return float(ordered[len(ordered) // 2])


class ColumnProfiler:
    """
    Build ColumnProfile objects.

    Example:
        >>> profiler = ColumnProfiler()
        >>> profile = profiler.profile("score", [10, 20, 30, 1000], "numeric")
        >>> profile.outlier_count, profile.median
        (1, 30.0)
    """

    def __init__(self, top_values_limit: int = TOP_VALUES_LIMIT):
        self.top_values_limit = top_values_limit

    def profile(self, name: str, values: Sequence[Any], inferred_type: str) -> ColumnProfile:
        """
        Profile one column.

        Args:
            name: Column name
            values: Raw column values; missing cells are normalized to None
            inferred_type: Result of TypeInferrer.infer_column_type

        Returns:
            Fully populated ColumnProfile
        """
        values = [normalize_missing(value) for value in values]
        total = len(values)
        frequencies = FrequencyTable(values)

        missing_count = frequencies.count(None)
        missing_percentage = 100 * missing_count / total if total > 0 else 0.0
        unique_count = len(frequencies)

        mode, mode_count = frequencies.mode() or (None, 0)
        top_values = self._top_values(frequencies)

        mean = median = None
        outlier_count = 0
        if inferred_type == TYPE_NUMERIC:
            numbers = numeric_population(values)
            if numbers:
                # fsum is exactly rounded, so row order cannot change the mean
                mean = math.fsum(numbers) / len(numbers)
                median = lower_median(numbers)
            outlier_count = count_outliers(numbers)

        logger.debug(
            f"Profiled '{name}': type={inferred_type}, missing={missing_count}, "
            f"unique={unique_count}, outliers={outlier_count}"
        )

        return ColumnProfile(
            name=name,
            inferred_type=inferred_type,
            missing_count=missing_count,
            missing_percentage=missing_percentage,
            unique_count=unique_count,
            duplicate_count=total - unique_count,
            outlier_count=outlier_count,
            mean=mean,
            median=median,
            mode=mode,
            mode_count=mode_count,
            top_values=self._as_top_values(top_values),
        )

    def _top_values(self, frequencies: FrequencyTable) -> List[Tuple[Any, int]]:
        ranked = [(value, count) for value, count in frequencies.most_common() if value is not None]
        return ranked[:self.top_values_limit]

    @staticmethod
    def _as_top_values(ranked: List[Tuple[Any, int]]) -> Tuple[TopValue, ...]:
        return tuple(TopValue(value=value, count=count) for value, count in ranked)
