"""
Type Inferrer - Semantic type detection for table columns.

Classifies a column into exactly one of ``numeric``, ``datetime``,
``categorical`` or ``unknown`` by majority vote over its non-missing values.

Design Decisions:
    - Missing cells are ignored; a column with no values left is ``unknown``
    - A type wins only when MORE than 80% of the remaining values parse as
      that type, so up to 20% stray markers or typos are tolerated
    - The numeric check runs before the date check; a column clearing both
      thresholds is ``numeric``
    - Each distinct value is parsed once and weighted by its frequency

Usage:
    inferrer = TypeInferrer()
    inferrer.infer_column_type(["1", "2", "x", "4", "5", "6"])  # 'numeric'
"""

import logging
from typing import Any, Iterable

from quality_framework.core.constants import (
    TYPE_CATEGORICAL,
    TYPE_DATETIME,
    TYPE_MAJORITY_THRESHOLD,
    TYPE_NUMERIC,
    TYPE_UNKNOWN,
)
from quality_framework.profiler.coercion import is_date_like, is_missing, parse_number
from quality_framework.profiler.frequency import FrequencyTable

logger = logging.getLogger(__name__)


class TypeInferrer:
    """
    Majority-vote type inference for data columns.

    Attributes:
        threshold: Share of non-missing values that must match a type

    Example:
        >>> inferrer = TypeInferrer()
        >>> inferrer.infer_column_type(["2024-01-15", "2024-02-01", ""])
        'datetime'
        >>> inferrer.infer_column_type(["", None])
        'unknown'
    """

    def __init__(self, threshold: float = TYPE_MAJORITY_THRESHOLD):
        self.threshold = threshold

    def infer_column_type(self, values: Iterable[Any], column_name: str = "") -> str:
        """
        Infer the semantic type of a column.

        Args:
            values: Raw column values, missing cells included
            column_name: Used for debug logging only

        Returns:
            One of 'numeric', 'datetime', 'categorical', 'unknown'
        """
        present = FrequencyTable(value for value in values if not is_missing(value))
        if present.total == 0:
            logger.debug(f"Column '{column_name}' has no values: {TYPE_UNKNOWN}")
            return TYPE_UNKNOWN

        numeric_count = 0
        date_count = 0
        for value, count in present.items():
            if parse_number(value) is not None:
                numeric_count += count
            if is_date_like(value):
                date_count += count

        numeric_share = numeric_count / present.total
        date_share = date_count / present.total

        if numeric_share > self.threshold:
            inferred = TYPE_NUMERIC
        elif date_share > self.threshold:
            inferred = TYPE_DATETIME
        else:
            inferred = TYPE_CATEGORICAL

        logger.debug(
            f"Type inference for '{column_name}': {inferred} "
            f"(numeric={numeric_share:.1%}, date={date_share:.1%}, values={present.total:,})"
        )
        return inferred
