"""
Unit tests for the in-memory Table.

Author: Daniel Edge
"""

import math

import numpy as np
import pandas as pd
import pytest

from quality_framework.core.exceptions import MalformedInputError
from quality_framework.core.table import Table


@pytest.mark.unit
class TestTableConstruction:
    """Test validation at construction time."""

    def test_basic_table(self):
        table = Table(["id", "score"], [(1, 10), (2, 20)])
        assert table.header == ("id", "score")
        assert table.rows == ((1, 10), (2, 20))
        assert table.row_count == 2
        assert table.column_count == 2
        assert len(table) == 2

    def test_header_only(self):
        table = Table(["id"], [])
        assert table.row_count == 0
        assert table.column("id") == ()

    def test_no_columns_rejected(self):
        with pytest.raises(MalformedInputError, match="no columns"):
            Table([], [])

    def test_duplicate_column_names_rejected(self):
        with pytest.raises(MalformedInputError, match="Duplicate column names: a"):
            Table(["a", "b", "a"], [(1, 2, 3)])

    def test_short_row_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            Table(["a", "b"], [(1, 2), (3,)])
        assert exc_info.value.row_index == 1
        assert "Row 1 has 1 values, expected 2" in exc_info.value.message

    def test_long_row_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            Table(["a"], [(1, 2)])
        assert exc_info.value.row_index == 0

    def test_scalar_row_rejected(self):
        with pytest.raises(MalformedInputError, match="not a sequence or mapping"):
            Table(["a"], ["x"])

    def test_mapping_rows_follow_header_order(self):
        table = Table(["a", "b"], [{"b": 2, "a": 1}])
        assert table.rows == ((1, 2),)

    def test_mapping_with_extra_key_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            Table(["a"], [{"a": 1, "z": 2}])
        assert "unexpected: ['z']" in exc_info.value.message

    def test_mapping_with_missing_key_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            Table(["a", "b"], [{"a": 1}])
        assert "missing: ['b']" in exc_info.value.message

    def test_missing_representations_normalized(self):
        table = Table(["a", "b", "c", "d"], [(None, "", float("nan"), pd.NA)])
        assert table.rows == ((None, None, None, None),)

    def test_whitespace_is_not_missing(self):
        table = Table(["a"], [(" ",)])
        assert table.column("a") == (" ",)

    def test_numpy_scalars_unwrapped(self):
        table = Table(["a"], [(np.int64(3),)])
        value = table.column("a")[0]
        assert value == 3
        assert type(value) is int

    def test_header_names_stringified(self):
        table = Table([1, 2], [(10, 20)])
        assert table.header == ("1", "2")


@pytest.mark.unit
class TestTableConstructors:
    """Test alternate constructors."""

    def test_from_records_uses_first_record_order(self):
        table = Table.from_records([{"id": 1, "score": 10}, {"score": 20, "id": 2}])
        assert table.header == ("id", "score")
        assert table.column("id") == (1, 2)

    def test_from_records_with_header(self):
        table = Table.from_records([], header=["id"])
        assert table.header == ("id",)
        assert table.row_count == 0

    def test_from_records_empty_without_header(self):
        with pytest.raises(MalformedInputError):
            Table.from_records([])

    def test_from_dataframe(self):
        df = pd.DataFrame({"id": [1, 2], "name": ["a", None]})
        table = Table.from_dataframe(df)
        assert table.header == ("id", "name")
        assert table.column("name") == ("a", None)
        assert table.column("id") == (1, 2)


@pytest.mark.unit
class TestTableAccess:
    """Test column access and views."""

    @pytest.fixture
    def table(self):
        return Table(["id", "name"], [(1, "a"), (2, None), (3, "c"), (4, "d")])

    def test_unknown_column(self, table):
        with pytest.raises(KeyError):
            table.column("missing")

    def test_columns_in_header_order(self, table):
        names = [name for name, _ in table.columns()]
        assert names == ["id", "name"]

    def test_preview(self, table):
        preview = table.preview(3)
        assert preview == [["id", "name"], ["1", "a"], ["2", ""], ["3", "c"]]

    def test_preview_shorter_than_limit(self):
        table = Table(["x"], [(1.5,)])
        assert table.preview(3) == [["x"], ["1.5"]]

    def test_to_dataframe_is_object_dtype(self, table):
        df = table.to_dataframe()
        assert list(df.columns) == ["id", "name"]
        assert all(dtype == object for dtype in df.dtypes)
        assert df.shape == (4, 2)

    def test_repr(self, table):
        assert repr(table) == "Table(columns=2, rows=4)"

    def test_rows_are_immutable(self, table):
        assert isinstance(table.rows, tuple)
        assert all(isinstance(row, tuple) for row in table.rows)

    def test_nan_never_survives(self):
        table = Table(["a"], [(math.nan,), (1.0,)])
        assert table.column("a") == (None, 1.0)
