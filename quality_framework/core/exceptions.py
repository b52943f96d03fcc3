"""
Data Quality Exception Hierarchy.

This module defines the exception hierarchy for the data quality framework,
giving every failure a severity so callers can decide whether to stop the
whole session, skip one file, or carry on.

Exception Severity Levels:
    - FATAL: Stop all processing immediately (bad configuration)
    - CRITICAL: Stop processing the current file, continue with other files
    - RECOVERABLE: Log error and continue (report export failures)
    - WARNING: Log warning, processing continues

Values that fail numeric or date parsing are never errors: the profiler
excludes them from the relevant population instead.

Author: Daniel Edge
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorSeverity(Enum):
    """
    Classify error severity for handling decisions.

    Attributes:
        FATAL: Unrecoverable error, stop all processing
        CRITICAL: File-level error, stop processing this file
        RECOVERABLE: Non-analysis error, continue processing
        WARNING: Non-critical issue, log and continue
    """
    FATAL = "fatal"
    CRITICAL = "critical"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class DataQualityException(Exception):
    """
    Base exception for all data quality framework errors.

    Provides:
    - Severity classification for handling decisions
    - Structured details dictionary for logging/reporting
    - Original exception preservation for debugging
    - Serialization support for JSON/dict output

    Attributes:
        message (str): Human-readable error message
        severity (ErrorSeverity): Error severity level
        details (Dict[str, Any]): Additional context (file path, column, etc.)
        original_exception (Optional[Exception]): Original exception if wrapping

    Example:
        >>> try:
        ...     table = loader.load()
        ... except Exception as e:
        ...     raise DataQualityException(
        ...         "Loading failed",
        ...         severity=ErrorSeverity.CRITICAL,
        ...         details={'file': 'customers.csv'},
        ...         original_exception=e
        ...     )
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.RECOVERABLE,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            severity: Error severity level (default: RECOVERABLE)
            details: Additional context dictionary
            original_exception: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for logging/reporting.

        Returns:
            Dictionary containing exception details suitable for JSON serialization
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'severity': self.severity.value,
            'details': self.details,
            'original_error': str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Configuration Errors (Fatal)
# ============================================================================

class ConfigError(DataQualityException):
    """
    Configuration file errors (fatal - stop all processing).

    Raised when:
    - Configuration file not found
    - Invalid YAML syntax
    - Required configuration fields missing

    Attributes:
        field (Optional[str]): Specific config field that caused error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'field': field} if field else {}
        )
        self.field = field


class YAMLSizeError(ConfigError):
    """
    YAML file too large.

    Raised when a configuration file exceeds the maximum allowed size.
    """

    def __init__(self, message: str, file_size: Optional[int] = None, max_size: Optional[int] = None):
        super().__init__(message)
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


class ConfigValidationError(ConfigError):
    """
    Configuration is valid YAML but has the wrong structure or values.

    Example:
        >>> raise ConfigValidationError(
        ...     "max_workers must be a positive integer",
        ...     field="analysis.processing.max_workers",
        ...     expected="positive integer",
        ...     actual="-1"
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None
    ):
        super().__init__(message, field)
        self.details.update({
            'expected': expected,
            'actual': actual
        })


# ============================================================================
# Data Loading Errors (Critical)
# ============================================================================

class DataLoadError(DataQualityException):
    """
    Data file loading errors (critical - stop processing this file).

    Raised when:
    - Data file not found
    - File format invalid or corrupted
    - File cannot be read (permissions, encoding issues)
    - Parsing errors (malformed CSV, unreadable workbook)

    Attributes:
        file_path (str): Path to file that failed to load
        line_number (Optional[int]): Line number where error occurred
    """

    def __init__(
        self,
        message: str,
        file_path: str,
        line_number: Optional[int] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            details={'file_path': file_path, 'line_number': line_number},
            original_exception=original_exception
        )
        self.file_path = file_path
        self.line_number = line_number


class FileNotFoundError(DataLoadError):
    """Data file not found at specified path."""

    def __init__(self, file_path: str):
        super().__init__(f"File not found: {file_path}", file_path)


class UnsupportedFormatError(DataLoadError):
    """
    File format not supported by the loaders.

    Example:
        >>> raise UnsupportedFormatError(
        ...     "customers.xml",
        ...     format="xml",
        ...     supported_formats=["csv", "excel"]
        ... )
    """

    def __init__(self, file_path: str, format: str, supported_formats: list):
        super().__init__(
            f"Unsupported file format '{format}'. Supported: {', '.join(supported_formats)}",
            file_path
        )
        self.details.update({
            'format': format,
            'supported_formats': supported_formats
        })


class FileTooLargeError(DataLoadError):
    """
    File exceeds the configured size limit.

    Admission control happens before any bytes are parsed; the engine
    itself never sees an oversized file.
    """

    def __init__(self, file_path: str, file_size: int, max_size: int):
        super().__init__(
            f"File too large: {file_size:,} bytes. "
            f"Maximum allowed: {max_size:,} bytes ({max_size // (1024 * 1024)} MB)",
            file_path
        )
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


# ============================================================================
# Analysis Errors
# ============================================================================

class MalformedInputError(DataQualityException):
    """
    The table handed to the analyzer is structurally invalid.

    Raised before any profiling begins when:
    - The table has no columns
    - Header names are duplicated
    - A row's arity (or key set) disagrees with the header

    Attributes:
        row_index (Optional[int]): Zero-based data row that failed, if any
    """

    def __init__(
        self,
        message: str,
        row_index: Optional[int] = None,
        expected_columns: Optional[List[str]] = None
    ):
        details: Dict[str, Any] = {}
        if row_index is not None:
            details['row_index'] = row_index
        if expected_columns is not None:
            details['expected_columns'] = expected_columns
        super().__init__(message, severity=ErrorSeverity.CRITICAL, details=details)
        self.row_index = row_index


class AnalysisError(DataQualityException):
    """
    Unexpected failure while analysing one file.

    Wraps the underlying exception so a multi-file session can report
    "analysis failed for file X" and move on.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            details={'file_path': file_path},
            original_exception=original_exception
        )
        self.file_path = file_path


# ============================================================================
# Reporter Errors
# ============================================================================

class ReporterError(DataQualityException):
    """
    Report export errors.

    Example:
        >>> raise ReporterError(
        ...     "Failed to write JSON report",
        ...     report_type="json",
        ...     output_path="/tmp/report.json"
        ... )
    """

    def __init__(
        self,
        message: str,
        report_type: Optional[str] = None,
        output_path: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message,
            severity=ErrorSeverity.RECOVERABLE,
            details={
                'report_type': report_type,
                'output_path': output_path
            },
            original_exception=original_exception
        )
