"""
Unit tests for the composite quality score.

Author: Daniel Edge
"""

import pytest

from quality_framework.profiler.profile_result import ColumnProfile
from quality_framework.profiler.quality_scorer import QualityScorer, round_half_up


def make_profile(name="col", inferred_type="numeric", missing_percentage=0.0, outlier_count=0):
    return ColumnProfile(
        name=name,
        inferred_type=inferred_type,
        missing_count=0,
        missing_percentage=missing_percentage,
        unique_count=1,
        duplicate_count=0,
        outlier_count=outlier_count,
    )


@pytest.fixture
def scorer():
    return QualityScorer()


@pytest.mark.unit
class TestRoundHalfUp:
    """Test rounding of the weighted sum."""

    @pytest.mark.parametrize("value, expected", [
        (97.5, 98),
        (96.5, 97),
        (97.49, 97),
        (0.5, 1),
        (100.0, 100),
        (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


@pytest.mark.unit
class TestQualityScorer:
    """Test sub-scores and the composite."""

    def test_perfect_table(self, scorer):
        breakdown = scorer.score([make_profile("a"), make_profile("b")], duplicate_rows=0, total_rows=10)
        assert breakdown.missing_score == 100
        assert breakdown.duplicate_score == 100
        assert breakdown.outlier_score == 100
        assert breakdown.type_score == 100
        assert breakdown.composite == 100

    def test_one_outlier_in_four_rows(self, scorer):
        profiles = [make_profile("id"), make_profile("score", outlier_count=1)]
        breakdown = scorer.score(profiles, duplicate_rows=0, total_rows=4)

        assert breakdown.outlier_score == pytest.approx(87.5)
        assert breakdown.composite == 98

    def test_missing_and_unknown_column(self, scorer):
        profiles = [
            make_profile("id"),
            make_profile("empty", inferred_type="unknown", missing_percentage=100.0),
        ]
        breakdown = scorer.score(profiles, duplicate_rows=0, total_rows=4)

        assert breakdown.missing_score == pytest.approx(50.0)
        assert breakdown.type_score == pytest.approx(50.0)
        # 15 + 30 + 20 + 10
        assert breakdown.composite == 75

    def test_duplicate_rows(self, scorer):
        breakdown = scorer.score([make_profile()], duplicate_rows=1, total_rows=4)
        assert breakdown.duplicate_score == pytest.approx(75.0)
        # 30 + 22.5 + 20 + 20 = 92.5
        assert breakdown.composite == 93

    def test_worst_case_is_zero(self, scorer):
        profiles = [make_profile(inferred_type="unknown", missing_percentage=100.0)]
        breakdown = scorer.score(profiles, duplicate_rows=3, total_rows=4)
        # duplicate 25, outlier 100: 0 + 7.5 + 20 + 0
        assert breakdown.composite == 28
        assert 0 <= breakdown.composite <= 100

    def test_zero_rows_uses_sentinel(self, scorer):
        breakdown = scorer.score([make_profile()], duplicate_rows=0, total_rows=0)
        assert breakdown.composite == 0
        assert breakdown.missing_score == 0
        assert breakdown.duplicate_score == 0
        assert breakdown.outlier_score == 0
        assert breakdown.type_score == 0

    def test_no_profiles_uses_sentinel(self, scorer):
        assert scorer.score([], duplicate_rows=0, total_rows=5).composite == 0

    def test_composite_is_int(self, scorer):
        breakdown = scorer.score([make_profile()], duplicate_rows=0, total_rows=3)
        assert isinstance(breakdown.composite, int)

    def test_breakdown_to_dict(self, scorer):
        breakdown = scorer.score([make_profile("a"), make_profile("b", outlier_count=1)], 0, 4)
        assert breakdown.to_dict() == {
            "missing_score": 100.0,
            "duplicate_score": 100.0,
            "outlier_score": 87.5,
            "type_score": 100.0,
            "composite": 98,
        }
