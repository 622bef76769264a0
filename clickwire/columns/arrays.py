"""Column of arrays: a flat column of items plus cumulative row offsets."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from ..types import create_array
from .column import Column
from .numeric import ColumnUInt64

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream


class ColumnArray(Column):
    """An Array(T) column; each row is a run of items in the nested column."""

    def __init__(self, data: Column):
        super().__init__(create_array(data.type))
        self._data = data
        self._offsets = ColumnUInt64()

    @property
    def data(self) -> Column:
        """The flat column holding the items of every row."""
        return self._data

    def _offset(self, n: int) -> int:
        return 0 if n == 0 else self._offsets[n - 1]

    def _size(self, n: int) -> int:
        return self._offsets[n] - self._offset(n)

    def append_as_column(self, array: Column) -> None:
        """Append the whole of ``array`` as one row."""
        if array.type != self._data.type:
            raise TypeError(
                f"can't append column of type {array.type.name} "
                f"to column type {self._data.type.name}"
            )
        last = self._offsets[len(self._offsets) - 1] if len(self._offsets) else 0
        self._offsets.append(last + len(array))
        self._data.append_column(array)

    def get_as_column(self, n: int) -> Column:
        """The items of row ``n`` as a column of the item type."""
        n = operator.index(n)
        rows = len(self)
        if not 0 <= n < rows:
            raise IndexError(f"row {n} out of range for {rows} rows")
        return self._data.slice(self._offset(n), self._size(n))

    def append_column(self, column: Column) -> None:
        """Append the rows of an array column with the same item type; others are ignored."""
        if not isinstance(column, ColumnArray):
            return
        if column._data.type != self._data.type:
            return
        for n in range(len(column)):
            self.append_as_column(column.get_as_column(n))

    def load(self, input: CodedInputStream, rows: int) -> None:
        """Read ``rows`` offsets, then the items they cover."""
        self._offsets.load(input, rows)
        items = self._offsets[rows - 1] if rows else 0
        self._data.load(input, items)

    def save(self, output: CodedOutputStream) -> None:
        self._offsets.save(output)
        self._data.save(output)

    def clear(self) -> None:
        self._offsets.clear()
        self._data.clear()

    def __len__(self) -> int:
        return len(self._offsets)

    def slice(self, begin: int, length: int) -> ColumnArray:
        if begin < 0 or length < 0:
            raise ValueError(f"invalid slice: begin={begin}, length={length}")
        result = ColumnArray(self._data.slice(0, 0))
        for n in range(begin, min(begin + length, len(self))):
            result.append_as_column(self.get_as_column(n))
        return result