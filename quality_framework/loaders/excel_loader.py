"""Excel workbook loader (one sheet per analysis)."""

import logging
from typing import Any, Dict, Union

import pandas as pd

from quality_framework.core.exceptions import DataLoadError, MalformedInputError
from quality_framework.core.table import Table
from quality_framework.loaders.base import DataLoader

logger = logging.getLogger(__name__)


class ExcelLoader(DataLoader):
    """
    Loader for .xlsx/.xls workbooks.

    The first row of the sheet is the header. Cells keep the Python types
    the workbook engine returns (numbers, datetimes, text); empty cells
    become missing cells in the Table.
    """

    format_name = "excel"

    def __init__(self, file_path: str, sheet: Union[int, str] = 0, **kwargs):
        """
        Args:
            file_path: Path to the workbook
            sheet: Sheet index or name (default: first sheet)
        """
        super().__init__(file_path, **kwargs)
        self.sheet = sheet

    def load(self) -> Table:
        """
        Load one sheet.

        Raises:
            MalformedInputError: Sheet has no header row
            DataLoadError: Workbook or sheet cannot be read
        """
        path = str(self.file_path)
        try:
            df = pd.read_excel(path, sheet_name=self.sheet, header=0, dtype=object)
        except (ValueError, KeyError, OSError, ImportError) as e:
            raise DataLoadError(
                f"Error loading Excel file {path} (sheet {self.sheet!r}): {e}",
                file_path=path,
                original_exception=e
            )

        if len(df.columns) == 0:
            raise MalformedInputError(f"Sheet {self.sheet!r} in {path} has no header row")

        logger.debug(f"Loaded {len(df):,} rows x {len(df.columns)} columns from {path}")
        return Table.from_dataframe(df)

    def get_metadata(self) -> Dict[str, Any]:
        metadata = super().get_metadata()
        metadata["sheet"] = self.sheet
        return metadata
