"""Columns of fixed-point decimals stored as scaled integers."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Union

from ..types import DecimalType, create_decimal
from .column import Column
from .numeric import ColumnInt32, ColumnInt64, ColumnInt128, ColumnVector

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream


def _parse_digits(text: str) -> int:
    """Digits of ``text`` as an integer; a leading '-' makes it negative.

    The decimal point and other characters are skipped; a '-' after the
    first character ends the number and makes it negative.
    """
    value = 0
    negative = False
    for position, ch in enumerate(text):
        if ch == "-":
            negative = True
            if position:
                break
        elif "0" <= ch <= "9":
            value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


class ColumnDecimal(Column):
    """A decimal column; values are integers scaled by 10**scale."""

    def __init__(self, precision: int, scale: int):
        super().__init__(create_decimal(precision, scale))
        self._data: ColumnVector
        if precision <= 9:
            self._data = ColumnInt32()
        elif precision <= 18:
            self._data = ColumnInt64()
        else:
            self._data = ColumnInt128()

    @property
    def precision(self) -> int:
        decimal_type: DecimalType = self.type  # type: ignore[assignment]
        return decimal_type.precision

    @property
    def scale(self) -> int:
        decimal_type: DecimalType = self.type  # type: ignore[assignment]
        return decimal_type.scale

    def append(self, value: Union[int, str]) -> None:
        """Append a scaled integer, or a string whose digits give one."""
        if isinstance(value, str):
            number = _parse_digits(value)
        else:
            number = operator.index(value)
        self._data.append(number)

    def __getitem__(self, n: int) -> int:
        return self._data[n]

    def append_column(self, column: Column) -> None:
        """Append a decimal column of the same type or a matching integer column."""
        if isinstance(column, ColumnDecimal):
            if column.type == self.type:
                self._data.append_column(column._data)
        else:
            self._data.append_column(column)

    def load(self, input: CodedInputStream, rows: int) -> None:
        self._data.load(input, rows)

    def save(self, output: CodedOutputStream) -> None:
        self._data.save(output)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnDecimal:
        result = ColumnDecimal(self.precision, self.scale)
        result._data = self._data.slice(begin, length)
        return result