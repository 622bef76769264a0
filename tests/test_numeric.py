import pytest

from clickwire.columns.numeric import (
    ColumnFloat32,
    ColumnFloat64,
    ColumnInt8,
    ColumnInt16,
    ColumnInt32,
    ColumnInt64,
    ColumnInt128,
    ColumnUInt8,
    ColumnUInt16,
    ColumnUInt32,
    ColumnUInt64,
    ColumnVector,
)
from clickwire.wire import (
    ArrayInput,
    BufferOutput,
    CodedInputStream,
    CodedOutputStream,
    EndOfStreamError,
)

NUMBERS = [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def _save(column):
    sink = BufferOutput()
    column.save(CodedOutputStream(sink))
    return sink.getvalue()


def _load(column_class, data, rows):
    column = column_class()
    column.load(CodedInputStream(ArrayInput(data)), rows)
    return column


def test_numeric_init():
    col = ColumnUInt32(NUMBERS)
    assert len(col) == 11
    assert col[3] == 7
    assert col[10] == 31


def test_numeric_slice():
    col = ColumnUInt32(NUMBERS)
    sub = col.slice(3, 3)
    assert isinstance(sub, ColumnUInt32)
    assert len(sub) == 3
    assert sub[0] == 7
    assert sub[2] == 13


def test_slice_past_end():
    col = ColumnUInt32(NUMBERS)
    assert list(col.slice(9, 5)) == [29, 31]
    assert len(col.slice(20, 2)) == 0


@pytest.mark.parametrize(
    "column_class, name",
    [
        (ColumnUInt8, "UInt8"),
        (ColumnUInt16, "UInt16"),
        (ColumnUInt32, "UInt32"),
        (ColumnUInt64, "UInt64"),
        (ColumnInt8, "Int8"),
        (ColumnInt16, "Int16"),
        (ColumnInt32, "Int32"),
        (ColumnInt64, "Int64"),
        (ColumnInt128, "Int128"),
        (ColumnFloat32, "Float32"),
        (ColumnFloat64, "Float64"),
    ],
)
def test_type_names(column_class, name):
    assert column_class().type.name == name


@pytest.mark.parametrize(
    "column_class, values, width",
    [
        (ColumnUInt8, [0, 1, 255], 1),
        (ColumnUInt16, [0, 65535], 2),
        (ColumnUInt32, NUMBERS, 4),
        (ColumnUInt64, [0, 2**64 - 1], 8),
        (ColumnInt8, [-128, 127], 1),
        (ColumnInt16, [-32768, 32767], 2),
        (ColumnInt32, [-(2**31), 2**31 - 1], 4),
        (ColumnInt64, [-(2**63), 2**63 - 1], 8),
        (ColumnInt128, [-(2**127), -1, 0, 2**127 - 1], 16),
        (ColumnFloat64, [0.1, -2.5, 1e300], 8),
        (ColumnFloat32, [0.5, -1.25, 3.0], 4),
    ],
)
def test_save_load_round_trip(column_class, values, width):
    col = column_class(values)
    data = _save(col)
    assert len(data) == width * len(values)
    loaded = _load(column_class, data, len(values))
    assert list(loaded) == list(col)


def test_float32_rounding_survives_round_trip():
    col = ColumnFloat32([0.1])
    loaded = _load(ColumnFloat32, _save(col), 1)
    assert loaded[0] == col[0]


def test_uint32_little_endian_on_wire():
    data = _save(ColumnUInt32([1]))
    assert int.from_bytes(data, "little") == 1


def test_load_replaces_content():
    data = _save(ColumnUInt64([5, 6]))
    col = ColumnUInt64([1, 2, 3])
    col.load(CodedInputStream(ArrayInput(data)), 2)
    assert list(col) == [5, 6]


def test_load_short_input():
    data = _save(ColumnUInt32([1, 2]))
    with pytest.raises(EndOfStreamError):
        _load(ColumnUInt32, data, 3)


@pytest.mark.parametrize(
    "column_class, value",
    [(ColumnUInt8, 256), (ColumnUInt8, -1), (ColumnInt8, 128), (ColumnInt128, 2**127)],
)
def test_append_out_of_range(column_class, value):
    with pytest.raises(OverflowError):
        column_class().append(value)


def test_append_float_to_integer_column():
    with pytest.raises(TypeError):
        ColumnUInt32().append(1.5)


def test_append_and_iterate():
    col = ColumnInt16()
    col.append(-3)
    col.append(4)
    assert list(col) == [-3, 4]
    assert col[-1] == 4


def test_index_out_of_range():
    with pytest.raises(IndexError):
        ColumnUInt32(NUMBERS)[11]


def test_append_column_same_type():
    col = ColumnUInt64([1, 2])
    col.append_column(ColumnUInt64([3]))
    assert list(col) == [1, 2, 3]


def test_append_column_other_type_is_ignored():
    col = ColumnUInt64([1, 2])
    col.append_column(ColumnUInt32([3]))
    assert list(col) == [1, 2]


def test_clear():
    col = ColumnUInt32(NUMBERS)
    col.clear()
    assert len(col) == 0
    assert _save(col) == b""


def test_bools_as_uint8():
    bools = [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]
    col = ColumnUInt8(bools)
    assert list(col.slice(3, 4)) == [0, 1, 1, 0]


def test_base_vector_not_instantiable():
    with pytest.raises(TypeError):
        ColumnVector([1])