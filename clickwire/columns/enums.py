"""Columns of Enum8 and Enum16 values."""

from __future__ import annotations

import operator
import struct
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Union

from ..types import EnumType, TypeCode
from .column import Column, slice_list

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream

_LAYOUTS = {
    TypeCode.ENUM8: ("b", 1),
    TypeCode.ENUM16: ("h", 2),
}


class ColumnEnum(Column):
    """A column of enum values stored as signed integers of the enum's width."""

    _code: ClassVar[Optional[TypeCode]] = None

    def __init__(self, type: EnumType, data: Optional[Iterable[int]] = None):
        if not isinstance(type, EnumType):
            raise TypeError(f"an enum type is required, got {type!r}")
        if self._code is not None and type.code != self._code:
            raise TypeError(f"{self.__class__.__name__} cannot hold {type.name}")
        super().__init__(type)
        self._format, self._item_size = _LAYOUTS[type.code]
        bits = self._item_size * 8
        self._low, self._high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        self._data: list[int] = [self._check(value) for value in (data or ())]

    @property
    def _enum_type(self) -> EnumType:
        return self.type  # type: ignore[return-value]

    def _check(self, value: int) -> int:
        value = operator.index(value)
        if not self._low <= value <= self._high:
            raise OverflowError(f"{value} does not fit into {self.type.name}")
        return value

    def append(self, value: Union[int, str]) -> None:
        """Append a value, given by number or by name."""
        if isinstance(value, str):
            self._data.append(self._enum_type.enum_value(value))
        else:
            self._data.append(self._check(value))

    def __getitem__(self, n: int) -> int:
        return self._data[n]

    def name_at(self, n: int) -> str:
        """Name of the value at row ``n``."""
        return self._enum_type.enum_name(self._data[n])

    def set_at(self, n: int, value: int) -> None:
        self._data[n] = self._check(value)

    def set_name_at(self, n: int, name: str) -> None:
        self._data[n] = self._enum_type.enum_value(name)

    def append_column(self, column: Column) -> None:
        """Append the rows of an enum column of the same width; others are ignored."""
        if isinstance(column, ColumnEnum) and column.type.code == self.type.code:
            self._data.extend(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        """Replace the contents with ``rows`` values read from the stream."""
        raw = input.read_raw(rows * self._item_size)
        self._data = list(struct.unpack(f"<{rows}{self._format}", raw))

    def save(self, output: CodedOutputStream) -> None:
        output.write_raw(struct.pack(f"<{len(self._data)}{self._format}", *self._data))

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnEnum:
        return type(self)(self._enum_type, slice_list(self._data, begin, length))


class ColumnEnum8(ColumnEnum):
    _code = TypeCode.ENUM8


class ColumnEnum16(ColumnEnum):
    _code = TypeCode.ENUM16