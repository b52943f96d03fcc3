"""
In-memory table handed to the analysis engine.

A Table is a header plus fixed-arity row tuples, validated once at
construction. Rows that disagree with the header are rejected rather than
padded or truncated, and every missing representation is normalized to
None so the profiler sees a single missing marker.

Author: Daniel Edge
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from quality_framework.core.exceptions import MalformedInputError
from quality_framework.profiler.coercion import normalize_missing


class Table:
    """
    Immutable, schema-checked row/column dataset.

    Attributes:
        header: Column names in source order
        rows: Data rows as tuples aligned with ``header``

    Example:
        >>> table = Table(["id", "score"], [(1, 10), (2, None)])
        >>> table.column("score")
        (10, None)
        >>> Table.from_records([{"id": 1, "score": 10}]).header
        ('id', 'score')
    """

    def __init__(self, header: Sequence[Any], rows: Iterable[Any]):
        """
        Build and validate a table.

        Args:
            header: Column names
            rows: Row sequences (same arity as header) or mappings keyed by
                exactly the header names

        Raises:
            MalformedInputError: No columns, duplicate names, or a row whose
                shape disagrees with the header
        """
        header = tuple(str(name) for name in header)
        if not header:
            raise MalformedInputError("Table has no columns")

        seen = set()
        duplicates = []
        for name in header:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise MalformedInputError(
                f"Duplicate column names: {', '.join(duplicates)}",
                expected_columns=list(header)
            )

        self._header = header
        self._index = {name: i for i, name in enumerate(header)}
        self._rows = tuple(self._validate_row(row, i) for i, row in enumerate(rows))

    def _validate_row(self, row: Any, row_index: int) -> Tuple[Any, ...]:
        if isinstance(row, Mapping):
            keys = {str(key) for key in row.keys()}
            if len(row) != len(self._header) or keys != set(self._header):
                missing = [name for name in self._header if name not in keys]
                extra = sorted(keys - set(self._header))
                raise MalformedInputError(
                    f"Row {row_index} keys do not match header "
                    f"(missing: {missing}, unexpected: {extra})",
                    row_index=row_index,
                    expected_columns=list(self._header)
                )
            by_name = {str(key): value for key, value in row.items()}
            values = [by_name[name] for name in self._header]
        elif isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise MalformedInputError(
                f"Row {row_index} is not a sequence or mapping: {type(row).__name__}",
                row_index=row_index
            )
        else:
            values = list(row)
            if len(values) != len(self._header):
                raise MalformedInputError(
                    f"Row {row_index} has {len(values)} values, expected {len(self._header)}",
                    row_index=row_index,
                    expected_columns=list(self._header)
                )

        return tuple(normalize_missing(value) for value in values)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping],
        header: Optional[Sequence[str]] = None
    ) -> "Table":
        """
        Build a table from row mappings.

        Args:
            records: Row dictionaries
            header: Column order; defaults to the first record's key order

        Raises:
            MalformedInputError: If no header can be derived or rows disagree
        """
        records = list(records)
        if header is None:
            if not records:
                raise MalformedInputError("Cannot derive columns from an empty record list")
            if not isinstance(records[0], Mapping):
                raise MalformedInputError("Row 0 is not a mapping", row_index=0)
            header = list(records[0].keys())
        return cls(header, records)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Table":
        """Build a table from a pandas DataFrame, keeping column order."""
        return cls(list(df.columns), df.itertuples(index=False, name=None))

    @property
    def header(self) -> Tuple[str, ...]:
        return self._header

    @property
    def rows(self) -> Tuple[Tuple[Any, ...], ...]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._header)

    def __len__(self) -> int:
        return len(self._rows)

    def column(self, name: str) -> Tuple[Any, ...]:
        """
        Values of one column across all rows.

        Raises:
            KeyError: If the column does not exist
        """
        index = self._index[name]
        return tuple(row[index] for row in self._rows)

    def columns(self) -> Iterator[Tuple[str, Tuple[Any, ...]]]:
        """Yield (name, values) for every column in header order."""
        for name in self._header:
            yield name, self.column(name)

    def preview(self, row_count: int) -> List[List[str]]:
        """
        Header plus the first ``row_count`` rows, stringified for display.

        Missing cells render as empty strings.
        """
        body = [
            ["" if value is None else str(value) for value in row]
            for row in self._rows[:row_count]
        ]
        return [list(self._header)] + body

    def to_dataframe(self) -> pd.DataFrame:
        """Object-dtype DataFrame view of the table (values are not coerced)."""
        return pd.DataFrame(list(self._rows), columns=list(self._header), dtype=object)

    def __repr__(self) -> str:
        return f"Table(columns={len(self._header)}, rows={len(self._rows)})"
