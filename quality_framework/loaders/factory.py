"""
Loader factory with format detection and size admission control.

Author: Daniel Edge
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Type

from quality_framework.core.constants import (
    DEFAULT_MAX_FILE_SIZE_MB,
    FILE_EXTENSION_MAP,
    SUPPORTED_FILE_FORMATS,
)
from quality_framework.core.exceptions import (
    FileNotFoundError,
    FileTooLargeError,
    UnsupportedFormatError,
)
from quality_framework.loaders.base import DataLoader
from quality_framework.loaders.csv_loader import CSVLoader
from quality_framework.loaders.excel_loader import ExcelLoader

logger = logging.getLogger(__name__)


class LoaderFactory:
    """
    Create the right DataLoader for a file.

    Example:
        >>> loader = LoaderFactory.create_loader("sales.xlsx", sheet="2024")
        >>> table = loader.load()
    """

    _loaders: Dict[str, Type[DataLoader]] = {
        "csv": CSVLoader,
        "excel": ExcelLoader,
    }

    @staticmethod
    def infer_format(file_path: str) -> str:
        """
        Infer the file format from its extension.

        Raises:
            UnsupportedFormatError: Unknown extension
        """
        suffix = Path(file_path).suffix.lower()
        file_format = FILE_EXTENSION_MAP.get(suffix)
        if file_format is None:
            raise UnsupportedFormatError(
                file_path,
                format=suffix.lstrip(".") or "unknown",
                supported_formats=SUPPORTED_FILE_FORMATS
            )
        return file_format

    @classmethod
    def create_loader(
        cls,
        file_path: str,
        file_format: Optional[str] = None,
        max_file_size_mb: Optional[float] = DEFAULT_MAX_FILE_SIZE_MB,
        **kwargs
    ) -> DataLoader:
        """
        Build a loader after checking the file exists and is within limits.

        Args:
            file_path: Path to the data file
            file_format: 'csv' or 'excel'; inferred from the extension when None
            max_file_size_mb: Size limit in MB, or None to disable the check
            **kwargs: Passed to the loader (delimiter, encoding, sheet)

        Raises:
            FileNotFoundError: Path does not exist
            FileTooLargeError: File exceeds max_file_size_mb
            UnsupportedFormatError: Format is not csv or excel
        """
        path = str(file_path)
        if not os.path.isfile(path):
            raise FileNotFoundError(path)

        if max_file_size_mb is not None:
            max_size = int(max_file_size_mb * 1024 * 1024)
            file_size = os.path.getsize(path)
            if file_size > max_size:
                raise FileTooLargeError(path, file_size=file_size, max_size=max_size)

        file_format = (file_format or cls.infer_format(path)).lower()
        loader_class = cls._loaders.get(file_format)
        if loader_class is None:
            raise UnsupportedFormatError(path, format=file_format, supported_formats=SUPPORTED_FILE_FORMATS)

        # Options meant for the other format are dropped rather than rejected
        options = {key: value for key, value in kwargs.items() if value is not None}
        if loader_class is CSVLoader:
            options.pop("sheet", None)
        else:
            options.pop("delimiter", None)
            options.pop("encoding", None)

        logger.debug(f"Creating {file_format} loader for {path}")
        return loader_class(path, **options)
