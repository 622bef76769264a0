"""Column of Nullable(T): a nested column plus a column of null flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import create_nullable
from .column import Column
from .numeric import ColumnUInt8

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream


class ColumnNullable(Column):
    """A Nullable(T) column; a non-zero flag marks a row as null."""

    def __init__(self, nested: Column, nulls: ColumnUInt8):
        if not isinstance(nulls, ColumnUInt8):
            raise TypeError(f"null flags must be a UInt8 column, got {type(nulls).__name__}")
        if len(nested) != len(nulls):
            raise ValueError("count of elements in nested and nulls should be the same")
        super().__init__(create_nullable(nested.type))
        self._nested = nested
        self._nulls = nulls

    @property
    def nested(self) -> Column:
        """The column holding the values."""
        return self._nested

    @property
    def nulls(self) -> ColumnUInt8:
        """The column of null flags."""
        return self._nulls

    def append(self, isnull: bool) -> None:
        """Append one null flag."""
        self._nulls.append(1 if isnull else 0)

    def is_null(self, n: int) -> bool:
        return self._nulls[n] != 0

    def append_column(self, column: Column) -> None:
        """Append a nullable column with the same nested type; others are ignored."""
        if not isinstance(column, ColumnNullable):
            return
        if column._nested.type != self._nested.type:
            return
        self._nested.append_column(column._nested)
        self._nulls.append_column(column._nulls)

    def load(self, input: CodedInputStream, rows: int) -> None:
        self._nulls.load(input, rows)
        self._nested.load(input, rows)

    def save(self, output: CodedOutputStream) -> None:
        self._nulls.save(output)
        self._nested.save(output)

    def clear(self) -> None:
        self._nested.clear()
        self._nulls.clear()

    def __len__(self) -> int:
        return len(self._nulls)

    def slice(self, begin: int, length: int) -> ColumnNullable:
        return ColumnNullable(
            self._nested.slice(begin, length), self._nulls.slice(begin, length)
        )