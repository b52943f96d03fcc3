"""
Data quality analysis engine.

Sequences type inference, column profiling, correlation, duplicate-row
detection and scoring over one in-memory Table and assembles the
QualityReport. Each analysis is synchronous and side-effect free: the
report is produced whole or the call raises.

For multi-file sessions, analyze_files() loads and analyses every file
independently (optionally in parallel) and returns one FileAnalysisResult
per file. Reports are never merged across files.
"""

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Union

from quality_framework.core.config import AnalysisConfig
from quality_framework.core.constants import PREVIEW_ROW_COUNT, TYPE_NUMERIC
from quality_framework.core.exceptions import AnalysisError, DataQualityException
from quality_framework.core.table import Table
from quality_framework.loaders.factory import LoaderFactory
from quality_framework.profiler.column_profiler import ColumnProfiler
from quality_framework.profiler.correlation import CorrelationEngine
from quality_framework.profiler.duplicates import DuplicateRowDetector
from quality_framework.profiler.profile_result import FileAnalysisResult, QualityReport
from quality_framework.profiler.quality_scorer import QualityScorer
from quality_framework.profiler.type_inferrer import TypeInferrer

logger = logging.getLogger(__name__)


class DataQualityAnalyzer:
    """
    Produce data quality reports for tables and files.

    Attributes:
        config: Session configuration (worker count, size limit)
        preview_rows: Number of data rows copied into the report preview

    Example:
        >>> analyzer = DataQualityAnalyzer()
        >>> table = Table(["id", "score"], [(1, 10), (2, 20), (3, 30), (2, 1000)])
        >>> report = analyzer.analyze(table)
        >>> report.column("score").outlier_count
        1
        >>> results = analyzer.analyze_files(["a.csv", "b.xlsx"])
        >>> [r.succeeded for r in results]
        [True, False]
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        preview_rows: int = PREVIEW_ROW_COUNT
    ):
        self.config = config or AnalysisConfig()
        self.preview_rows = preview_rows

        self.type_inferrer = TypeInferrer()
        self.column_profiler = ColumnProfiler()
        self.correlation_engine = CorrelationEngine()
        self.duplicate_detector = DuplicateRowDetector()
        self.quality_scorer = QualityScorer()

    def analyze(self, table: Table) -> QualityReport:
        """
        Analyse one table.

        Args:
            table: Validated table (header may be followed by zero rows)

        Returns:
            Immutable QualityReport
        """
        logger.info(f"Analysing table with {table.row_count:,} rows x {table.column_count} columns")

        profiles = []
        numeric_columns: Dict[str, Sequence[Any]] = {}
        for name, values in table.columns():
            inferred_type = self.type_inferrer.infer_column_type(values, column_name=name)
            profiles.append(self.column_profiler.profile(name, values, inferred_type))
            if inferred_type == TYPE_NUMERIC:
                numeric_columns[name] = values

        correlation_matrix = self.correlation_engine.calculate(numeric_columns)
        duplicate_rows = self.duplicate_detector.count_duplicates(table)
        breakdown = self.quality_scorer.score(profiles, duplicate_rows, table.row_count)

        report = QualityReport(
            total_rows=table.row_count,
            total_columns=table.column_count,
            columns=tuple(profiles),
            duplicate_rows=duplicate_rows,
            quality_score=breakdown.composite,
            score_breakdown=breakdown,
            correlation_matrix=correlation_matrix,
            preview=tuple(tuple(row) for row in table.preview(self.preview_rows)),
        )

        logger.info(
            f"Analysis complete: quality score {report.quality_score}, "
            f"{duplicate_rows:,} duplicate rows, {len(numeric_columns)} numeric columns"
        )
        return report

    def analyze_file(
        self,
        file_path: str,
        file_format: Optional[str] = None,
        **loader_options
    ) -> QualityReport:
        """
        Load a CSV/Excel file and analyse it.

        Args:
            file_path: Path to the data file
            file_format: 'csv' or 'excel' (inferred from the extension when None)
            **loader_options: delimiter, encoding or sheet

        Raises:
            DataLoadError: The file cannot be admitted or read
            MalformedInputError: The file does not form a valid table
        """
        loader = LoaderFactory.create_loader(
            file_path,
            file_format=file_format,
            max_file_size_mb=self.config.max_file_size_mb,
            **loader_options
        )
        table = loader.load()
        return self.analyze(table)

    def analyze_files(
        self,
        files: Optional[Sequence[Union[str, Dict[str, Any]]]] = None,
        parallel: Optional[bool] = None
    ) -> List[FileAnalysisResult]:
        """
        Analyse several files independently.

        Args:
            files: Paths or file dicts (path, format, delimiter, encoding, sheet);
                defaults to the files listed in the configuration
            parallel: Run files concurrently; defaults to config.parallel_files

        Returns:
            One FileAnalysisResult per file, in input order
        """
        entries = [self._file_entry(entry) for entry in (files if files is not None else self.config.files)]
        if parallel is None:
            parallel = self.config.parallel_files

        if parallel and len(entries) > 1:
            workers = min(self.config.max_workers, len(entries))
            logger.info(f"Analysing {len(entries)} files with {workers} workers")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                return list(executor.map(self._analyze_one, entries))

        return [self._analyze_one(entry) for entry in entries]

    def _analyze_one(self, entry: Dict[str, Any]) -> FileAnalysisResult:
        file_path = entry["path"]
        start_time = time.time()
        try:
            report = self.analyze_file(
                file_path,
                file_format=entry.get("format"),
                delimiter=entry.get("delimiter"),
                encoding=entry.get("encoding"),
                sheet=entry.get("sheet"),
            )
        except DataQualityException as e:
            logger.error(f"Analysis failed for file {file_path}: {e.message}")
            return FileAnalysisResult(
                file_path=file_path,
                error=e.to_dict(),
                processing_time_seconds=time.time() - start_time
            )
        except Exception as e:
            logger.exception(f"Unexpected error analysing {file_path}")
            wrapped = AnalysisError(
                f"Analysis failed for file {file_path}: {e}",
                file_path=file_path,
                original_exception=e
            )
            return FileAnalysisResult(
                file_path=file_path,
                error=wrapped.to_dict(),
                processing_time_seconds=time.time() - start_time
            )

        return FileAnalysisResult(
            file_path=file_path,
            report=report,
            processing_time_seconds=time.time() - start_time
        )

    @staticmethod
    def _file_entry(entry: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(entry, dict):
            return dict(entry)
        return {"path": str(entry)}
