"""Column of Tuple(T1, T2, ...): one column per element."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..types import create_tuple
from .column import Column

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream


class ColumnTuple(Column):
    """A Tuple column made of one column for each tuple element."""

    def __init__(self, columns: Iterable[Column]):
        columns = list(columns)
        super().__init__(create_tuple(column.type for column in columns))
        self._columns = columns

    @property
    def element_count(self) -> int:
        """Number of elements in the tuple."""
        return len(self._columns)

    def __getitem__(self, n: int) -> Column:
        """The column of tuple element ``n``."""
        return self._columns[n]

    def append_column(self, column: Column) -> None:
        """Append a tuple column of the same type element by element; others are ignored."""
        if isinstance(column, ColumnTuple) and column.type == self.type:
            for mine, theirs in zip(self._columns, column._columns):
                mine.append_column(theirs)

    def load(self, input: CodedInputStream, rows: int) -> None:
        for column in self._columns:
            column.load(input, rows)

    def save(self, output: CodedOutputStream) -> None:
        for column in self._columns:
            column.save(output)

    def clear(self) -> None:
        for column in self._columns:
            column.clear()

    def __len__(self) -> int:
        return len(self._columns[0]) if self._columns else 0

    def slice(self, begin: int, length: int) -> ColumnTuple:
        return ColumnTuple(column.slice(begin, length) for column in self._columns)