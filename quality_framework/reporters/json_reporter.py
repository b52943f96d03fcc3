"""
JSON export for quality reports.

Writes a single QualityReport, or the per-file results of a multi-file
session, to disk. Export is read-only with respect to the report.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Sequence, Union

import numpy as np

from quality_framework.core.exceptions import ReporterError
from quality_framework.profiler.profile_result import FileAnalysisResult, QualityReport

logger = logging.getLogger(__name__)


class NumpyJSONEncoder(json.JSONEncoder):
    """
    JSON encoder for numpy scalars and dates.

    Converts:
    - numpy int/float/bool → Python int/float/bool (NaN/inf → null)
    - datetime/date → ISO format string
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            if np.isnan(obj) or np.isinf(obj):
                return None
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


class JSONReporter:
    """Serialize quality reports to JSON files."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_json(self, result: Union[QualityReport, Sequence[FileAnalysisResult]]) -> str:
        """Render a report (or session results) as a JSON string."""
        if isinstance(result, QualityReport):
            payload = result.to_dict()
        else:
            payload = {"files": [file_result.to_dict() for file_result in result]}
        return json.dumps(payload, cls=NumpyJSONEncoder, indent=self.indent)

    def generate(
        self,
        result: Union[QualityReport, Sequence[FileAnalysisResult]],
        output_path: str
    ) -> None:
        """
        Write a JSON report.

        Args:
            result: QualityReport or list of FileAnalysisResult
            output_path: Destination file (parent dirs are created)

        Raises:
            ReporterError: If the report cannot be serialized or written
        """
        try:
            content = self.to_json(result)
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise ReporterError(
                f"Failed to write JSON report: {e}",
                report_type="json",
                output_path=str(output_path),
                original_exception=e
            )

        logger.info(f"JSON report written to {output_path}")
