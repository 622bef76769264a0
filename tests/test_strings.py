import pytest

from clickwire.columns.strings import ColumnFixedString, ColumnString
from clickwire.types import create_fixed_string, create_string
from clickwire.wire import (
    ArrayInput,
    BufferOutput,
    CodedInputStream,
    CodedOutputStream,
    EndOfStreamError,
)


def _save(column):
    out = BufferOutput()
    column.save(CodedOutputStream(out))
    return out.getvalue()


def _load(column, raw, rows):
    column.load(CodedInputStream(ArrayInput(raw)), rows)
    return column


def test_fixed_string_init():
    col = ColumnFixedString(3)
    for value in ["aaa", "bbb", "ccc", "ddd"]:
        col.append(value)
    assert len(col) == 4
    assert col[1] == b"bbb"
    assert col[3] == b"ddd"


def test_fixed_string_pads_and_truncates():
    col = ColumnFixedString(3)
    col.append("ab")
    col.append(b"abcd")
    assert col[0] == b"ab\x00"
    assert col[1] == b"abc"
    assert all(len(col[i]) == col.fixed_size for i in range(len(col)))


def test_fixed_string_type():
    assert ColumnFixedString(16).type == create_fixed_string(16)


def test_fixed_string_save_concatenates_values():
    col = ColumnFixedString(3)
    col.append("aaa")
    col.append("bbb")
    assert _save(col) == b"aaabbb"


def test_fixed_string_round_trip():
    col = ColumnFixedString(4)
    for value in [b"\x00\x01\x02\x03", "xy", "abcd"]:
        col.append(value)
    loaded = _load(ColumnFixedString(4), _save(col), 3)
    assert [loaded[i] for i in range(3)] == [col[i] for i in range(3)]


def test_fixed_string_load_appends():
    col = ColumnFixedString(2)
    col.append("zz")
    _load(col, b"abcd", 2)
    assert [col[i] for i in range(len(col))] == [b"zz", b"ab", b"cd"]


def test_fixed_string_load_truncated_stream():
    with pytest.raises(EndOfStreamError):
        _load(ColumnFixedString(4), b"abc", 1)


def test_fixed_string_append_column_checks_size():
    a = ColumnFixedString(3)
    a.append("aaa")
    b = ColumnFixedString(3)
    b.append("bbb")
    other = ColumnFixedString(2)
    other.append("cc")
    a.append_column(b)
    a.append_column(other)
    assert len(a) == 2
    assert a[1] == b"bbb"


def test_fixed_string_slice():
    col = ColumnFixedString(3)
    for value in ["aaa", "bbb", "ccc", "ddd"]:
        col.append(value)
    sub = col.slice(1, 2)
    assert [sub[0], sub[1]] == [b"bbb", b"ccc"]
    empty = col.slice(10, 2)
    assert len(empty) == 0
    assert empty.fixed_size == 3


def test_fixed_string_negative_size():
    with pytest.raises(ValueError):
        ColumnFixedString(-1)


def test_string_init():
    col = ColumnString(["a", "ab", "abc", "abcd"])
    assert len(col) == 4
    assert col[1] == "ab"
    assert col[3] == "abcd"
    assert col.type == create_string()


def test_string_wire_format():
    assert _save(ColumnString(["a"])) == b"\x01a"


def test_string_round_trip():
    col = ColumnString(["", "ascii", "привет", "x" * 300])
    loaded = _load(ColumnString(), _save(col), 4)
    assert [loaded[i] for i in range(4)] == [col[i] for i in range(4)]


def test_string_append_and_clear():
    col = ColumnString()
    col.append("one")
    col.append(b"two")
    assert col[1] == "two"
    col.clear()
    assert len(col) == 0


def test_string_append_rejects_other_types():
    with pytest.raises(TypeError):
        ColumnString().append(5)


def test_string_append_column_and_slice():
    col = ColumnString(["a", "b"])
    col.append_column(ColumnString(["c"]))
    col.append_column(ColumnFixedString(1))
    assert len(col) == 3
    sub = col.slice(1, 5)
    assert [sub[0], sub[1]] == ["b", "c"]