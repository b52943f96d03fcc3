"""Base class for file loaders that produce a Table."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from quality_framework.core.table import Table

logger = logging.getLogger(__name__)


class DataLoader(ABC):
    """
    Load one file fully into memory as a Table.

    Subclasses implement load(); the engine only ever sees the resulting
    Table and never touches the file itself.
    """

    format_name = "unknown"

    def __init__(self, file_path: str, **kwargs):
        """
        Args:
            file_path: Path to the data file
            **kwargs: Format-specific options (delimiter, encoding, sheet)
        """
        self.file_path = Path(file_path)
        self.kwargs = kwargs

    @abstractmethod
    def load(self) -> Table:
        """Read the file and return a validated Table."""

    def get_file_size(self) -> int:
        return os.path.getsize(self.file_path)

    def is_empty(self) -> bool:
        return self.get_file_size() == 0

    def get_metadata(self) -> Dict[str, Any]:
        """Basic file metadata."""
        size = self.get_file_size()
        return {
            "file_path": str(self.file_path),
            "format": self.format_name,
            "file_size_bytes": size,
            "file_size_mb": round(size / (1024 * 1024), 2),
            "is_empty": size == 0,
        }
