"""Columns of fixed-length and variable-length strings."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Iterable, Optional, Union

from ..types import create_fixed_string, create_string
from ..wire import read_string, write_string
from .column import Column, slice_list

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream

StrOrBytes = Union[str, bytes, bytearray, memoryview]


def _to_bytes(value: StrOrBytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


class ColumnFixedString(Column):
    """A column of byte strings that all have the same length.

    Shorter values are padded with zero bytes, longer ones are cut.
    """

    def __init__(self, size: int):
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"fixed string size must not be negative: {size}")
        super().__init__(create_fixed_string(size))
        self._size = size
        self._data: list[bytes] = []

    @property
    def fixed_size(self) -> int:
        """Length of every value in bytes."""
        return self._size

    def append(self, value: StrOrBytes) -> None:
        """Append one value; text is encoded as UTF-8."""
        raw = _to_bytes(value)[:self._size]
        self._data.append(raw.ljust(self._size, b"\0"))

    def __getitem__(self, n: int) -> bytes:
        return self._data[n]

    def append_column(self, column: Column) -> None:
        """Append the rows of a fixed string column of the same size; others are ignored."""
        if isinstance(column, ColumnFixedString) and column._size == self._size:
            self._data.extend(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        """Read ``rows`` values and append them."""
        size = self._size
        raw = input.read_raw(rows * size)
        self._data.extend(raw[i * size:(i + 1) * size] for i in range(rows))

    def save(self, output: CodedOutputStream) -> None:
        output.write_raw(b"".join(self._data))

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnFixedString:
        result = ColumnFixedString(self._size)
        result._data = slice_list(self._data, begin, length)
        return result


class ColumnString(Column):
    """A column of variable-length text values."""

    def __init__(self, data: Optional[Iterable[StrOrBytes]] = None):
        super().__init__(create_string())
        self._data: list[str] = [self._coerce(value) for value in (data or ())]

    @staticmethod
    def _coerce(value: StrOrBytes) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).decode("utf-8", "surrogateescape")
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")

    def append(self, value: StrOrBytes) -> None:
        """Append one value."""
        self._data.append(self._coerce(value))

    def __getitem__(self, n: int) -> str:
        return self._data[n]

    def append_column(self, column: Column) -> None:
        """Append the rows of another string column; others are ignored."""
        if isinstance(column, ColumnString):
            self._data.extend(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        """Read ``rows`` length-prefixed strings and append them."""
        self._data.extend(read_string(input) for _ in range(rows))

    def save(self, output: CodedOutputStream) -> None:
        for value in self._data:
            write_string(output, value)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnString:
        return ColumnString(slice_list(self._data, begin, length))