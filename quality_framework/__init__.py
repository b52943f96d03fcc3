"""
Data quality analysis for tabular datasets.

Profiles every column (type, missingness, cardinality, outliers, central
tendency), correlates numeric columns, counts duplicate rows and combines
the results into a 0-100 quality score.

Example:
    >>> from quality_framework import DataQualityAnalyzer, Table
    >>> report = DataQualityAnalyzer().analyze(Table(["id"], [(1,), (2,)]))
    >>> report.total_rows, report.column("id").inferred_type
    (2, 'numeric')
"""

__version__ = "0.1.0"

from quality_framework.core.table import Table
from quality_framework.profiler.engine import DataQualityAnalyzer
from quality_framework.profiler.profile_result import (
    ColumnProfile,
    CorrelationMatrix,
    FileAnalysisResult,
    QualityReport,
    QualityScoreBreakdown,
    TopValue,
)

__all__ = [
    '__version__',
    'Table',
    'DataQualityAnalyzer',
    'ColumnProfile',
    'CorrelationMatrix',
    'FileAnalysisResult',
    'QualityReport',
    'QualityScoreBreakdown',
    'TopValue',
]
