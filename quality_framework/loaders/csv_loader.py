"""CSV data loader with delimiter/encoding detection and strict row checks."""

import csv
import logging
from typing import Any, Dict, Optional

import pandas as pd

from quality_framework.core.constants import CSV_DELIMITER_CANDIDATES, CSV_ENCODING_CANDIDATES
from quality_framework.core.exceptions import DataLoadError, MalformedInputError
from quality_framework.core.table import Table
from quality_framework.loaders.base import DataLoader

logger = logging.getLogger(__name__)


def detect_delimiter(file_path: str, sample_size: int = 8192) -> str:
    """
    Auto-detect the delimiter used in a CSV file.

    Args:
        file_path: Path to the CSV file
        sample_size: Number of bytes to sample for detection

    Returns:
        Detected delimiter character, defaults to ',' if detection fails
    """
    for encoding in CSV_ENCODING_CANDIDATES:
        try:
            with open(file_path, 'r', newline='', encoding=encoding) as f:
                sample = f.read(sample_size)

            sniffer = csv.Sniffer()
            dialect = sniffer.sniff(sample, delimiters=CSV_DELIMITER_CANDIDATES)
            return dialect.delimiter
        except UnicodeDecodeError:
            continue
        except csv.Error:
            break

    return ','


def detect_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file by trying common encodings.

    Returns:
        Detected encoding name, defaults to 'utf-8'
    """
    for encoding in CSV_ENCODING_CANDIDATES:
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                f.read()
            return encoding
        except UnicodeDecodeError:
            continue

    return 'utf-8'


def check_csv_structure(file_path: str, delimiter: str, encoding: str) -> Dict[str, Any]:
    """
    Verify every record has as many fields as the header.

    pandas silently pads short records with NaN; this pass catches them
    first so a ragged file is rejected instead of analysed.

    Returns:
        Dict with 'column_count', 'rows_checked' and 'inconsistent_rows'
        (each entry: zero-based data row, expected and actual field counts)
    """
    result = {
        'column_count': 0,
        'rows_checked': 0,
        'inconsistent_rows': [],
    }

    with open(file_path, 'r', newline='', encoding=encoding) as f:
        reader = csv.reader(f, delimiter=delimiter)
        expected_columns = None
        data_row = 0
        for record in reader:
            if not record:
                continue  # blank lines are skipped by pandas as well
            if expected_columns is None:
                expected_columns = len(record)
                result['column_count'] = expected_columns
                continue

            if len(record) != expected_columns:
                result['inconsistent_rows'].append({
                    'row': data_row,
                    'expected': expected_columns,
                    'actual': len(record),
                })
            data_row += 1

        result['rows_checked'] = data_row

    return result


class CSVLoader(DataLoader):
    """
    Loader for CSV and delimited text files.

    Every cell is read as text (no pandas type guessing and no default NA
    strings), so type inference sees the source values unchanged. Empty
    fields become missing cells in the Table.
    """

    format_name = "csv"

    def __init__(
        self,
        file_path: str,
        delimiter: Optional[str] = None,
        encoding: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize CSVLoader with auto-detection capabilities.

        Args:
            file_path: Path to CSV file
            delimiter: Field delimiter (sniffed when None)
            encoding: Text encoding (detected when None)
        """
        super().__init__(file_path, **kwargs)

        if encoding is None:
            encoding = detect_encoding(str(self.file_path))
            if encoding != 'utf-8':
                logger.info(f"Auto-detected encoding: {encoding}")
        self.encoding = encoding

        if delimiter is None:
            delimiter = detect_delimiter(str(self.file_path))
            if delimiter != ',':
                logger.info(f"Auto-detected delimiter: {repr(delimiter)}")
        self.delimiter = delimiter

    def load(self) -> Table:
        """
        Load the whole CSV file.

        Raises:
            MalformedInputError: Header-less file or rows with the wrong field count
            DataLoadError: File cannot be decoded or parsed
        """
        path = str(self.file_path)

        try:
            structure = check_csv_structure(path, self.delimiter, self.encoding)
        except UnicodeDecodeError as e:
            raise DataLoadError(
                f"Encoding error in {path}: cannot decode file with {self.encoding} encoding",
                file_path=path,
                original_exception=e
            )

        if structure['column_count'] == 0:
            raise MalformedInputError(f"CSV file has no header row: {path}")

        if structure['inconsistent_rows']:
            first = structure['inconsistent_rows'][0]
            raise MalformedInputError(
                f"{len(structure['inconsistent_rows'])} row(s) in {path} have inconsistent column counts "
                f"(first: data row {first['row']} has {first['actual']} fields, expected {first['expected']}, "
                f"delimiter={repr(self.delimiter)})",
                row_index=first['row']
            )

        try:
            df = pd.read_csv(
                path,
                sep=self.delimiter,
                encoding=self.encoding,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError as e:
            raise MalformedInputError(f"CSV file has no header row: {path}") from e
        except pd.errors.ParserError as e:
            raise DataLoadError(
                f"CSV parsing error in {path}: {e}",
                file_path=path,
                original_exception=e
            )

        logger.debug(f"Loaded {len(df):,} rows x {len(df.columns)} columns from {path}")
        return Table.from_dataframe(df)

    def get_metadata(self) -> Dict[str, Any]:
        metadata = super().get_metadata()
        metadata.update({
            "delimiter": self.delimiter,
            "encoding": self.encoding,
        })
        return metadata
