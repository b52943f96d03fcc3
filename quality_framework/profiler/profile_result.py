"""
Data structures for storing analysis results.

Every result type is a frozen dataclass built in one step by its producer,
so no partially populated profile or report is ever observable. Consumers
(renderers, exporters) read them and use to_dict() for serialization.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Any, Optional, Tuple

import numpy as np


def convert_numpy_types(obj):
    """
    Recursively convert numpy and datetime values to JSON-friendly Python types.

    Args:
        obj: Any object that might contain numpy or datetime values

    Returns:
        Object with numpy scalars unwrapped and dates as ISO strings
    """
    if isinstance(obj, np.bool_):
        return bool(obj)
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: convert_numpy_types(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_numpy_types(item) for item in obj]
    elif obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    else:
        return str(obj)


@dataclass(frozen=True)
class TopValue:
    """
    One of the most frequent non-missing values of a column.

    Attributes:
        value: The raw value
        count: Number of occurrences
    """
    value: Any
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"value": convert_numpy_types(self.value), "count": int(self.count)}


@dataclass(frozen=True)
class ColumnProfile:
    """
    Complete profile for a single column.

    Attributes:
        name: Column name
        inferred_type: One of numeric, datetime, categorical, unknown
        missing_count: Number of missing cells
        missing_percentage: Missing cells as a percentage of total rows
        unique_count: Distinct values; all missing cells count as one value
        duplicate_count: Total values minus unique_count
        outlier_count: Values outside the IQR fences (numeric columns only)
        mean: Mean of parsed numbers (numeric columns only)
        median: Lower-middle element of the sorted numbers (numeric columns only)
        mode: Most frequent raw value; None when the missing marker wins
        mode_count: Occurrences of the mode (0 for a column with no rows)
        top_values: Up to three most frequent non-missing values
    """
    name: str
    inferred_type: str
    missing_count: int
    missing_percentage: float
    unique_count: int
    duplicate_count: int
    outlier_count: int = 0
    mean: Optional[float] = None
    median: Optional[float] = None
    mode: Any = None
    mode_count: int = 0
    top_values: Tuple[TopValue, ...] = ()

    @property
    def mode_is_missing(self) -> bool:
        """True when the missing marker is the most frequent value."""
        return self.mode is None and self.mode_count > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result = {
            "name": self.name,
            "type": self.inferred_type,
            "missing_count": int(self.missing_count),
            "missing_percentage": round(float(self.missing_percentage), 2),
            "unique_values": int(self.unique_count),
            "duplicate_count": int(self.duplicate_count),
            "outliers": int(self.outlier_count),
            "mode": convert_numpy_types(self.mode),
            "mode_count": int(self.mode_count),
            "top_values": [top.to_dict() for top in self.top_values],
        }

        if self.mean is not None:
            result["mean"] = round(float(self.mean), 3)
        if self.median is not None:
            result["median"] = round(float(self.median), 3)

        return result


@dataclass(frozen=True)
class CorrelationMatrix:
    """
    Symmetric matrix of Pearson coefficients across numeric columns.

    Attributes:
        columns: Numeric column names, in table order
        coefficients: Row-major coefficients aligned with ``columns``;
            None marks a pair left undefined by unparseable or missing cells
    """
    columns: Tuple[str, ...] = ()
    coefficients: Tuple[Tuple[Optional[float], ...], ...] = ()

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.columns

    def coefficient(self, column1: str, column2: str) -> Optional[float]:
        """
        Look up the coefficient for a pair of numeric columns.

        Raises:
            KeyError: If either column is not part of the matrix
        """
        try:
            i = self.columns.index(column1)
            j = self.columns.index(column2)
        except ValueError:
            raise KeyError(f"No correlation for ({column1!r}, {column2!r})")
        return self.coefficients[i][j]

    def as_dict(self) -> Dict[str, Dict[str, Optional[float]]]:
        """Nested mapping ``{column1: {column2: coefficient}}``."""
        return {
            column1: {
                column2: self.coefficients[i][j]
                for j, column2 in enumerate(self.columns)
            }
            for i, column1 in enumerate(self.columns)
        }

    def pairs(self) -> List[Tuple[str, str, Optional[float]]]:
        """Distinct off-diagonal pairs (upper triangle)."""
        return [
            (self.columns[i], self.columns[j], self.coefficients[i][j])
            for i in range(len(self.columns))
            for j in range(i + 1, len(self.columns))
        ]

    def to_dict(self) -> Dict[str, Dict[str, Optional[float]]]:
        return {
            column1: {
                column2: None if value is None else round(float(value), 6)
                for column2, value in row.items()
            }
            for column1, row in self.as_dict().items()
        }


@dataclass(frozen=True)
class QualityScoreBreakdown:
    """
    The four sub-scores behind the composite quality score.

    Attributes:
        missing_score: 100 minus the mean column missing percentage
        duplicate_score: 100 minus the duplicate row percentage
        outlier_score: 100 minus the mean column outlier percentage
        type_score: 100 minus the percentage of unknown-typed columns
        composite: Weighted sum rounded half up to an integer in [0, 100]
    """
    missing_score: float
    duplicate_score: float
    outlier_score: float
    type_score: float
    composite: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "missing_score": round(float(self.missing_score), 2),
            "duplicate_score": round(float(self.duplicate_score), 2),
            "outlier_score": round(float(self.outlier_score), 2),
            "type_score": round(float(self.type_score), 2),
            "composite": int(self.composite),
        }


@dataclass(frozen=True)
class QualityReport:
    """
    Complete data quality report for one table.

    Attributes:
        total_rows: Number of data rows
        total_columns: Number of columns
        columns: Profile for each column, in header order
        duplicate_rows: Rows identical to an earlier row
        quality_score: Composite quality score (0-100)
        score_breakdown: Sub-scores that produced quality_score
        correlation_matrix: Pearson coefficients across numeric columns
        preview: Header followed by up to three data rows, stringified
    """
    total_rows: int
    total_columns: int
    columns: Tuple[ColumnProfile, ...]
    duplicate_rows: int
    quality_score: int
    score_breakdown: QualityScoreBreakdown
    correlation_matrix: CorrelationMatrix = field(default_factory=CorrelationMatrix)
    preview: Tuple[Tuple[str, ...], ...] = ()

    def column(self, name: str) -> ColumnProfile:
        """
        Get the profile of a column by name.

        Raises:
            KeyError: If no column has that name
        """
        for profile in self.columns:
            if profile.name == name:
                return profile
        raise KeyError(name)

    @property
    def numeric_columns(self) -> List[str]:
        return list(self.correlation_matrix.columns)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "total_rows": int(self.total_rows),
            "total_columns": int(self.total_columns),
            "duplicate_rows": int(self.duplicate_rows),
            "quality_score": int(self.quality_score),
            "score_breakdown": self.score_breakdown.to_dict(),
            "columns": [profile.to_dict() for profile in self.columns],
            "correlation_matrix": self.correlation_matrix.to_dict(),
            "preview": [list(row) for row in self.preview],
        }


@dataclass(frozen=True)
class FileAnalysisResult:
    """
    Outcome of analysing one file in a multi-file session.

    Exactly one of ``report`` and ``error`` is set. Results of different
    files are never merged.

    Attributes:
        file_path: Path of the analysed file
        report: Quality report when analysis succeeded
        error: Serialized exception when loading or analysis failed
        processing_time_seconds: Wall-clock time spent on this file
    """
    file_path: str
    report: Optional[QualityReport] = None
    error: Optional[Dict[str, Any]] = None
    processing_time_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.report is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "succeeded": self.succeeded,
            "processing_time_seconds": round(self.processing_time_seconds, 3),
            "report": self.report.to_dict() if self.report else None,
            "error": self.error,
        }
