"""Columns of dates and date-times given as seconds since the epoch."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from ..types import create_date, create_datetime
from .column import Column
from .numeric import ColumnUInt16, ColumnUInt32

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream

_SECONDS_PER_DAY = 86400


class ColumnDate(Column):
    """A column of dates stored as days since the epoch.

    Values are appended and returned as timestamps; the time of day is dropped.
    """

    def __init__(self):
        super().__init__(create_date())
        self._data = ColumnUInt16()

    def append(self, value: int) -> None:
        """Append the date containing the timestamp ``value``."""
        self._data.append(operator.index(value) // _SECONDS_PER_DAY)

    def __getitem__(self, n: int) -> int:
        """Timestamp of the start of the date at row ``n``."""
        return self._data[n] * _SECONDS_PER_DAY

    def append_column(self, column: Column) -> None:
        if isinstance(column, ColumnDate):
            self._data.append_column(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        self._data.load(input, rows)

    def save(self, output: CodedOutputStream) -> None:
        self._data.save(output)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnDate:
        result = ColumnDate()
        result._data.append_column(self._data.slice(begin, length))
        return result


class ColumnDateTime(Column):
    """A column of timestamps with one-second resolution."""

    def __init__(self):
        super().__init__(create_datetime())
        self._data = ColumnUInt32()

    def append(self, value: int) -> None:
        """Append a timestamp in seconds since the epoch."""
        self._data.append(operator.index(value))

    def __getitem__(self, n: int) -> int:
        return self._data[n]

    def append_column(self, column: Column) -> None:
        if isinstance(column, ColumnDateTime):
            self._data.append_column(column._data)

    def load(self, input: CodedInputStream, rows: int) -> None:
        self._data.load(input, rows)

    def save(self, output: CodedOutputStream) -> None:
        self._data.save(output)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, begin: int, length: int) -> ColumnDateTime:
        result = ColumnDateTime()
        result._data.append_column(self._data.slice(begin, length))
        return result