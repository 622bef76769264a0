"""Columns of fixed-width numbers."""

from __future__ import annotations

import operator
import struct
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Iterator, Optional

from ..types import TypeCode, create_simple
from .column import Column, slice_list

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream


class ColumnVector(Column):
    """A column of numbers of one fixed width, stored little-endian on the wire."""

    _code: ClassVar[TypeCode]
    _format: ClassVar[str] = ""
    _item_size: ClassVar[int] = 0

    def __init__(self, data: Optional[Iterable[Any]] = None):
        if not hasattr(type(self), "_code"):
            raise TypeError("ColumnVector must be used through a concrete numeric column")
        super().__init__(create_simple(self._code))
        self._data: list[Any] = [self._coerce(value) for value in (data or ())]

    def _coerce(self, value: Any) -> Any:
        raise NotImplementedError

    def _encode(self, values: list[Any]) -> bytes:
        return struct.pack(f"<{len(values)}{self._format}", *values)

    def _decode(self, raw: bytes, rows: int) -> list[Any]:
        return list(struct.unpack(f"<{rows}{self._format}", raw))

    def append(self, value: Any) -> None:
        """Append one value."""
        self._data.append(self._coerce(value))

    def __getitem__(self, n: int) -> Any:
        return self._data[n]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def append_column(self, column: Column) -> None:
        """Append the values of a column of the same numeric type; others are ignored."""
        if isinstance(column, ColumnVector) and column.type == self.type:
            self._data.extend(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        """Replace the contents with ``rows`` values read from the stream."""
        raw = input.read_raw(rows * self._item_size)
        self._data = self._decode(raw, rows)

    def save(self, output: CodedOutputStream) -> None:
        output.write_raw(self._encode(self._data))

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnVector:
        return type(self)(slice_list(self._data, begin, length))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class _IntegerColumn(ColumnVector):
    _bits: ClassVar[int]
    _signed: ClassVar[bool]

    def _coerce(self, value: Any) -> int:
        value = operator.index(value)
        if self._signed:
            low, high = -(1 << (self._bits - 1)), (1 << (self._bits - 1)) - 1
        else:
            low, high = 0, (1 << self._bits) - 1
        if not low <= value <= high:
            raise OverflowError(f"{value} does not fit into {self.type.name}")
        return value


class ColumnUInt8(_IntegerColumn):
    _code = TypeCode.UINT8
    _format, _item_size, _bits, _signed = "B", 1, 8, False


class ColumnUInt16(_IntegerColumn):
    _code = TypeCode.UINT16
    _format, _item_size, _bits, _signed = "H", 2, 16, False


class ColumnUInt32(_IntegerColumn):
    _code = TypeCode.UINT32
    _format, _item_size, _bits, _signed = "I", 4, 32, False


class ColumnUInt64(_IntegerColumn):
    _code = TypeCode.UINT64
    _format, _item_size, _bits, _signed = "Q", 8, 64, False


class ColumnInt8(_IntegerColumn):
    _code = TypeCode.INT8
    _format, _item_size, _bits, _signed = "b", 1, 8, True


class ColumnInt16(_IntegerColumn):
    _code = TypeCode.INT16
    _format, _item_size, _bits, _signed = "h", 2, 16, True


class ColumnInt32(_IntegerColumn):
    _code = TypeCode.INT32
    _format, _item_size, _bits, _signed = "i", 4, 32, True


class ColumnInt64(_IntegerColumn):
    _code = TypeCode.INT64
    _format, _item_size, _bits, _signed = "q", 8, 64, True


class ColumnInt128(_IntegerColumn):
    _code = TypeCode.INT128
    _item_size, _bits, _signed = 16, 128, True

    def _encode(self, values: list[Any]) -> bytes:
        return b"".join(value.to_bytes(16, "little", signed=True) for value in values)

    def _decode(self, raw: bytes, rows: int) -> list[Any]:
        return [
            int.from_bytes(raw[offset:offset + 16], "little", signed=True)
            for offset in range(0, rows * 16, 16)
        ]


class ColumnFloat32(ColumnVector):
    """Single-precision floats; values are rounded to 32 bits on append."""

    _code = TypeCode.FLOAT32
    _format, _item_size = "f", 4

    def _coerce(self, value: Any) -> float:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]


class ColumnFloat64(ColumnVector):
    _code = TypeCode.FLOAT64
    _format, _item_size = "d", 8

    def _coerce(self, value: Any) -> float:
        return float(value)