"""
Data Quality Framework Constants.

This module defines the thresholds, weights and limits used throughout the
analysis engine and its surrounding adapters. Centralizing these values keeps
the scoring rules in one auditable place.

Author: Daniel Edge
"""

# ============================================================================
# Type Inference Constants
# ============================================================================

# Semantic column types produced by the type inferrer
TYPE_NUMERIC: str = "numeric"
TYPE_DATETIME: str = "datetime"
TYPE_CATEGORICAL: str = "categorical"
TYPE_UNKNOWN: str = "unknown"

COLUMN_TYPES: tuple = (TYPE_NUMERIC, TYPE_DATETIME, TYPE_CATEGORICAL, TYPE_UNKNOWN)

# Share of non-missing values that must parse as a number / date before the
# column is classified as numeric / datetime. Comparison is strict (>).
# Rationale: tolerates up to 20% stray markers and typos in a column
TYPE_MAJORITY_THRESHOLD: float = 0.8


# ============================================================================
# Profiler Constants
# ============================================================================

# IQR multiplier for outlier detection (Tukey's fence)
# Outliers are values < Q1 - 1.5×IQR or > Q3 + 1.5×IQR
OUTLIER_IQR_MULTIPLIER: float = 1.5

# Percentile ranks for the outlier fences
LOWER_QUARTILE: float = 25.0
UPPER_QUARTILE: float = 75.0

# Number of most frequent values reported per column
TOP_VALUES_LIMIT: int = 3

# Number of data rows included in the report preview (header excluded)
PREVIEW_ROW_COUNT: int = 3


# ============================================================================
# Quality Score Weights
# ============================================================================

# Weights sum to 1.0 and are applied without renormalization
MISSING_SCORE_WEIGHT: float = 0.3
DUPLICATE_SCORE_WEIGHT: float = 0.3
OUTLIER_SCORE_WEIGHT: float = 0.2
TYPE_SCORE_WEIGHT: float = 0.2

# Score reported for a table with a header but no data rows.
# Every percentage is undefined there, so the score is pinned instead.
EMPTY_TABLE_SCORE: int = 0

MAX_QUALITY_SCORE: int = 100


# ============================================================================
# Configuration Security Limits
# ============================================================================

# Maximum YAML configuration file size (10MB)
MAX_YAML_FILE_SIZE: int = 10 * 1024 * 1024

# Maximum YAML nesting depth
MAX_YAML_NESTING_DEPTH: int = 20

# Maximum number of keys in YAML mapping
MAX_YAML_KEY_COUNT: int = 10_000

# Maximum string length accepted inside a configuration file
MAX_STRING_LENGTH: int = 10 * 1024 * 1024


# ============================================================================
# File Loading Constants
# ============================================================================

# Maximum accepted input file size (100MB), matching the upload limit of the
# interactive front end
DEFAULT_MAX_FILE_SIZE_MB: int = 100

# Supported file formats
SUPPORTED_FILE_FORMATS: list = ["csv", "excel"]

# File extension to format mapping
FILE_EXTENSION_MAP: dict = {
    ".csv": "csv",
    ".tsv": "csv",
    ".txt": "csv",
    ".xlsx": "excel",
    ".xls": "excel",
}

# Candidate delimiters for CSV sniffing
CSV_DELIMITER_CANDIDATES: str = ',\t|;:'

# Encodings tried, in order, when none is given
CSV_ENCODING_CANDIDATES: list = ['utf-8', 'utf-8-sig', 'cp1252', 'latin-1']


# ============================================================================
# Concurrency Constants
# ============================================================================

# Default worker count when several files are analysed in one session
DEFAULT_MAX_WORKERS: int = 4


# ============================================================================
# Logging Constants
# ============================================================================

# Default log message format
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log date format
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
