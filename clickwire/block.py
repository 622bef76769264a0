"""A block: named columns with the same number of rows."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator

from .columns.column import Column
from .types import Type


@dataclass
class BlockInfo:
    """Additional information sent with a block."""

    is_overflows: int = 0
    bucket_num: int = -1


@dataclass(frozen=True)
class BlockColumn:
    """A named column of a block."""

    name: str
    column: Column

    @property
    def type(self) -> Type:
        return self.column.type


@dataclass
class Block:
    """Named columns that all hold the same number of rows.

    ``len(block)`` is the number of columns; ``row_count`` the number of rows.
    """

    info: BlockInfo = field(default_factory=BlockInfo)
    _columns: list[BlockColumn] = field(default_factory=list, init=False, repr=False)
    _rows: int = field(default=0, init=False)

    def __init__(self):
        self.info = BlockInfo()
        self._columns = []
        self._rows = 0

    @property
    def row_count(self) -> int:
        return self._rows

    def append_column(self, name: str, column: Column) -> None:
        """Append a named column; its row count must match the block's."""
        if not self._columns:
            self._rows = len(column)
        elif len(column) != self._rows:
            raise ValueError(
                f"all columns in block must have same count of rows. "
                f"Name: [{name}], rows: [{self._rows}], columns: [{len(column)}]"
            )
        self._columns.append(BlockColumn(name, column))

    def refresh_row_count(self) -> int:
        """Recount rows after the columns have changed and return the count."""
        rows = 0
        for idx, item in enumerate(self._columns):
            if idx == 0:
                rows = len(item.column)
            elif len(item.column) != rows:
                raise ValueError(
                    f"all columns in block must have same count of rows. "
                    f"Name: [{item.name}], rows: [{rows}], columns: [{len(item.column)}]"
                )
        self._rows = rows
        return rows

    def _check_index(self, idx: int) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < len(self._columns):
            raise IndexError(
                f"column index is out of range. Index: [{idx}], "
                f"columns: [{len(self._columns)}]"
            )
        return idx

    def column_name(self, idx: int) -> str:
        return self._columns[self._check_index(idx)].name

    @property
    def column_names(self) -> list[str]:
        return [item.name for item in self._columns]

    def __getitem__(self, idx: int) -> Column:
        return self._columns[self._check_index(idx)].column

    def __iter__(self) -> Iterator[BlockColumn]:
        return iter(list(self._columns))

    def __len__(self) -> int:
        return len(self._columns)