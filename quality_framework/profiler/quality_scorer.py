"""
Quality Scorer - composite 0-100 data quality score.

Combines four sub-scores with fixed weights (no renormalization):

    missing    0.3   100 - mean(column missing %)
    duplicate  0.3   100 - duplicate rows / rows × 100
    outlier    0.2   100 - mean(column outliers / rows × 100)
    type       0.2   100 - unknown-typed columns / columns × 100

The weighted sum is rounded half up. A table with zero data rows has no
defined percentages; every sub-score and the composite are pinned to
EMPTY_TABLE_SCORE instead of letting NaN reach the report.
"""

import logging
import math
from typing import Sequence

from quality_framework.core.constants import (
    DUPLICATE_SCORE_WEIGHT,
    EMPTY_TABLE_SCORE,
    MAX_QUALITY_SCORE,
    MISSING_SCORE_WEIGHT,
    OUTLIER_SCORE_WEIGHT,
    TYPE_SCORE_WEIGHT,
    TYPE_UNKNOWN,
)
from quality_framework.profiler.profile_result import ColumnProfile, QualityScoreBreakdown

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class QualityScorer:
    """
    Aggregate column profiles and duplicate rows into a quality score.

    Example:
        Two complete numeric columns over 4 rows, no duplicate rows, one
        outlier in one column: outlier score 87.5, composite
        round(30 + 30 + 17.5 + 20) = 98.

        >>> scorer = QualityScorer()
        >>> scorer.score(profiles, duplicate_rows=0, total_rows=4).composite
        98
    """

    def score(
        self,
        profiles: Sequence[ColumnProfile],
        duplicate_rows: int,
        total_rows: int
    ) -> QualityScoreBreakdown:
        """
        Calculate the composite score and its sub-scores.

        Args:
            profiles: One profile per column (at least one)
            duplicate_rows: Result of DuplicateRowDetector
            total_rows: Number of data rows

        Returns:
            QualityScoreBreakdown with composite in [0, 100]
        """
        if total_rows == 0 or not profiles:
            logger.info(f"No data rows to score; using sentinel score {EMPTY_TABLE_SCORE}")
            return QualityScoreBreakdown(
                missing_score=EMPTY_TABLE_SCORE,
                duplicate_score=EMPTY_TABLE_SCORE,
                outlier_score=EMPTY_TABLE_SCORE,
                type_score=EMPTY_TABLE_SCORE,
                composite=EMPTY_TABLE_SCORE,
            )

        column_count = len(profiles)

        missing_score = 100 - sum(p.missing_percentage for p in profiles) / column_count
        duplicate_score = 100 - (duplicate_rows / total_rows * 100)
        outlier_score = 100 - sum(p.outlier_count / total_rows * 100 for p in profiles) / column_count
        unknown_columns = sum(1 for p in profiles if p.inferred_type == TYPE_UNKNOWN)
        type_score = 100 - (unknown_columns / column_count * 100)

        weighted = (
            missing_score * MISSING_SCORE_WEIGHT +
            duplicate_score * DUPLICATE_SCORE_WEIGHT +
            outlier_score * OUTLIER_SCORE_WEIGHT +
            type_score * TYPE_SCORE_WEIGHT
        )
        composite = min(MAX_QUALITY_SCORE, max(0, round_half_up(weighted)))

        logger.debug(
            f"Quality sub-scores: missing={missing_score:.2f}, duplicate={duplicate_score:.2f}, "
            f"outlier={outlier_score:.2f}, type={type_score:.2f} -> {composite}"
        )

        return QualityScoreBreakdown(
            missing_score=missing_score,
            duplicate_score=duplicate_score,
            outlier_score=outlier_score,
            type_score=type_score,
            composite=composite,
        )
