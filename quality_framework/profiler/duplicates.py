"""
Row-Duplication Detector.

Counts rows that repeat an earlier row value-for-value across every column.
This is independent of the per-column duplicate counts in ColumnProfile,
which count repeated values inside one column.
"""

import logging

import pandas as pd

from quality_framework.core.table import Table
from quality_framework.profiler.frequency import value_key

logger = logging.getLogger(__name__)


class DuplicateRowDetector:
    """
    Detect structurally duplicated rows.

    Rows are compared positionally against the table header, so the result
    does not depend on how the source ordered keys within a row. Missing
    cells compare equal to each other, and booleans never match the
    numbers 1 and 0.
    """

    def count_duplicates(self, table: Table) -> int:
        """
        Count duplicate rows.

        Args:
            table: Table to scan

        Returns:
            Total rows minus the number of distinct rows
        """
        if table.row_count == 0:
            return 0

        keyed = pd.DataFrame({
            name: pd.Series([value_key(value) for value in values], dtype=object)
            for name, values in table.columns()
        })
        duplicated = keyed.duplicated(keep="first")
        count = int(duplicated.sum())

        if count:
            logger.debug(f"Found {count:,} duplicate row(s) out of {table.row_count:,}")
        return count
