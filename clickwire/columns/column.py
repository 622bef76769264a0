"""Base class of all columns."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Sequence, TypeVar

from ..types import Type

if TYPE_CHECKING:
    from ..wire import CodedInputStream, CodedOutputStream

T = TypeVar("T")


def slice_list(items: Sequence[T], begin: int, length: int) -> list[T]:
    """Up to ``length`` items starting at ``begin``; empty if ``begin`` is past the end."""
    if begin < 0 or length < 0:
        raise ValueError(f"invalid slice: begin={begin}, length={length}")
    return list(items[begin:begin + length])


class Column(abc.ABC):
    """A column of values of one data type."""

    def __init__(self, type: Type):
        self._type = type

    @property
    def type(self) -> Type:
        """Data type of the column."""
        return self._type

    @abc.abstractmethod
    def append_column(self, column: Column) -> None:
        """Append the contents of a column of the same kind to the end of this one."""

    @abc.abstractmethod
    def load(self, input: CodedInputStream, rows: int) -> None:
        """Read ``rows`` rows of column data from the stream."""

    @abc.abstractmethod
    def save(self, output: CodedOutputStream) -> None:
        """Write the column data to the stream."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove all rows."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of rows."""

    @abc.abstractmethod
    def slice(self, begin: int, length: int) -> Column:
        """A new column holding up to ``length`` rows starting at ``begin``."""