# clickwire

A pure-Python library for the data side of the ClickHouse native protocol.
It covers the following parts:

- data types and their canonical names (`clickwire.types`);
- a parser for type names such as `Array(Nullable(UInt8))` (`clickwire.type_parser`);
- byte streams and the binary wire encoding: varints, fixed-width values and
  length-prefixed strings (`clickwire.wire`);
- typed columns that read and write their rows in that encoding (`clickwire.columns`);
- blocks, which are named columns with equal row counts (`clickwire.block`);
- the packet codes of the protocol (`clickwire.protocol`).

The package has no dependencies outside the standard library.

## Installing

```
pip install clickwire
```

## Types

```python
from clickwire.types import TypeCode, create_array, create_enum8, create_simple

create_array(create_simple(TypeCode.INT32)).name      # 'Array(Int32)'

colours = create_enum8([("One", 1), ("Two", 2)])
colours.name                   # "Enum8('One' = 1, 'Two' = 2)"
colours.enum_value("Two")      # 2
colours.has_enum_value(10)     # False
```

Two types are equal when their names are equal.

## Parsing type names

```python
from clickwire.type_parser import Meta, parse_type_name

ast = parse_type_name("Array(Int32)")
ast.meta                 # Meta.ARRAY
ast.elements[0].name     # 'Int32'
```

`parse_type_name` caches its results, so the tree it returns is shared
between callers. Input that cannot be parsed raises `TypeParseError`.

## Columns

| Type | Class | Module |
|---|---|---|
| `UInt8` … `UInt64`, `Int8` … `Int128`, `Float32`, `Float64` | `ColumnUInt8` … `ColumnFloat64` | `clickwire.columns.numeric` |
| `String`, `FixedString(N)` | `ColumnString`, `ColumnFixedString` | `clickwire.columns.strings` |
| `Date`, `DateTime` | `ColumnDate`, `ColumnDateTime` | `clickwire.columns.date` |
| `Decimal32/64/128` | `ColumnDecimal` | `clickwire.columns.decimals` |
| `Enum8`, `Enum16` | `ColumnEnum8`, `ColumnEnum16` | `clickwire.columns.enums` |
| `Array(T)` | `ColumnArray` | `clickwire.columns.arrays` |
| `Nullable(T)` | `ColumnNullable` | `clickwire.columns.nullable` |
| `Tuple(...)` | `ColumnTuple` | `clickwire.columns.tuples` |

Every column has `append_column`, `load`, `save`, `clear`, `slice` and
`len()`. Its data type is in `column.type`.

```python
from clickwire.columns.arrays import ColumnArray
from clickwire.columns.decimals import ColumnDecimal
from clickwire.columns.numeric import ColumnUInt8, ColumnUInt64
from clickwire.columns.nullable import ColumnNullable

arr = ColumnArray(ColumnUInt64())
arr.append_as_column(ColumnUInt64([1]))
arr.append_as_column(ColumnUInt64([3, 7]))
list(arr.get_as_column(1))          # [3, 7]

price = ColumnDecimal(9, 4)
price.append("12345.6789")
price[0]                            # 123456789, scaled by 10**4

ids = ColumnNullable(ColumnUInt64([1, 2]), ColumnUInt8([0, 1]))
ids.is_null(1)                      # True
```

A `ColumnDate` stores whole days. It accepts and returns seconds since the
epoch, and it drops the time of day. The numeric and enum columns check that
every value fits their width and raise `OverflowError` when it does not.

## Blocks and the wire encoding

```python
from clickwire.block import Block
from clickwire.columns.numeric import ColumnUInt64
from clickwire.columns.strings import ColumnString
from clickwire.wire import (
    ArrayInput, BufferOutput, CodedInputStream, CodedOutputStream,
    read_string, write_string,
)

block = Block()
block.append_column("id", ColumnUInt64([1, 7]))
block.append_column("name", ColumnString(["one", "seven"]))
block.row_count            # 2
len(block)                 # 2 columns
[c.name for c in block]    # ['id', 'name']

sink = BufferOutput()
out = CodedOutputStream(sink)
write_string(out, "id")
block[0].save(out)

inp = CodedInputStream(ArrayInput(sink.getvalue()))
read_string(inp)           # 'id'
loaded = ColumnUInt64()
loaded.load(inp, 2)
list(loaded)               # [1, 7]
```

Every column in a block must have the same number of rows. If a column does
not, `append_column` raises `ValueError`. A read that runs past the end of
the input raises `EndOfStreamError`.

`BufferedInput` and `BufferedOutput` add buffering to any `InputStream` or
`OutputStream`.

## What the package does not do

The package does not open connections and does not talk to a server. It has
no client for sending queries, no way to insert blocks over the network and
no handling of progress or server error packets. It also does not compress
blocks. It provides no UUID column. It also cannot build an empty column
from a type name: `parse_type_name` only gives you the parsed tree, and you
must choose the column class yourself. `clickwire.protocol` defines the packet
codes, but no part of the package exchanges packets.