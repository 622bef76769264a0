"""Column data types and their canonical names."""

from __future__ import annotations

import enum
from typing import Iterable, Tuple


class TypeCode(enum.IntEnum):
    """Identifier of a column data type."""

    VOID = 0
    INT8 = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    INT128 = 5
    UINT8 = 6
    UINT16 = 7
    UINT32 = 8
    UINT64 = 9
    FLOAT32 = 10
    FLOAT64 = 11
    STRING = 12
    FIXED_STRING = 13
    DATETIME = 14
    DATE = 15
    ARRAY = 16
    NULLABLE = 17
    TUPLE = 18
    ENUM8 = 19
    ENUM16 = 20
    UUID = 21
    DECIMAL32 = 22
    DECIMAL64 = 23
    DECIMAL128 = 24
    IPV4 = 25
    IPV6 = 26


_SIMPLE_NAMES = {
    TypeCode.VOID: "Void",
    TypeCode.INT8: "Int8",
    TypeCode.INT16: "Int16",
    TypeCode.INT32: "Int32",
    TypeCode.INT64: "Int64",
    TypeCode.INT128: "Int128",
    TypeCode.UINT8: "UInt8",
    TypeCode.UINT16: "UInt16",
    TypeCode.UINT32: "UInt32",
    TypeCode.IPV4: "UInt32",
    TypeCode.UINT64: "UInt64",
    TypeCode.UUID: "UUID",
    TypeCode.FLOAT32: "Float32",
    TypeCode.FLOAT64: "Float64",
    TypeCode.STRING: "String",
    TypeCode.IPV6: "FixedString(16)",
    TypeCode.DATETIME: "DateTime",
    TypeCode.DATE: "Date",
}

_NUMERIC_CODES = frozenset(
    {
        TypeCode.INT8,
        TypeCode.INT16,
        TypeCode.INT32,
        TypeCode.INT64,
        TypeCode.INT128,
        TypeCode.UINT8,
        TypeCode.UINT16,
        TypeCode.UINT32,
        TypeCode.UINT64,
        TypeCode.FLOAT32,
        TypeCode.FLOAT64,
    }
)


class Type:
    """A data type; two types are equal when their names are equal."""

    __slots__ = ("_code",)

    def __init__(self, code):
        self._code = TypeCode(code)

    @property
    def code(self) -> TypeCode:
        return self._code

    @property
    def name(self) -> str:
        """Canonical string representation of the type."""
        try:
            return _SIMPLE_NAMES[self._code]
        except KeyError:
            raise ValueError(
                f"type code {self._code.name} requires a parametrised type"
            ) from None

    def __eq__(self, other):
        if not isinstance(other, Type):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class ArrayType(Type):
    """Array(T)."""

    __slots__ = ("_item_type",)

    def __init__(self, item_type: Type):
        super().__init__(TypeCode.ARRAY)
        self._item_type = item_type

    @property
    def item_type(self) -> Type:
        return self._item_type

    @property
    def name(self) -> str:
        return f"Array({self._item_type.name})"


class DecimalType(Type):
    """Decimal with a precision and a scale."""

    __slots__ = ("_precision", "_scale")

    def __init__(self, precision: int, scale: int):
        if precision <= 9:
            code = TypeCode.DECIMAL32
        elif precision <= 18:
            code = TypeCode.DECIMAL64
        else:
            code = TypeCode.DECIMAL128
        super().__init__(code)
        self._precision = precision
        self._scale = scale

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def name(self) -> str:
        bits = {
            TypeCode.DECIMAL32: "32",
            TypeCode.DECIMAL64: "64",
            TypeCode.DECIMAL128: "128",
        }[self.code]
        return f"Decimal{bits}({self._scale})"


class EnumType(Type):
    """Enum8 or Enum16 with a fixed set of named values."""

    __slots__ = ("_value_to_name", "_name_to_value")

    def __init__(self, code, items: Iterable[Tuple[str, int]]):
        code = TypeCode(code)
        if code not in (TypeCode.ENUM8, TypeCode.ENUM16):
            raise ValueError(f"not an enum type code: {code.name}")
        super().__init__(code)
        self._value_to_name: dict[int, str] = {}
        self._name_to_value: dict[str, int] = {}
        for item_name, value in items:
            self._value_to_name[value] = item_name
            self._name_to_value[item_name] = value

    @property
    def name(self) -> str:
        prefix = "Enum8" if self.code == TypeCode.ENUM8 else "Enum16"
        body = ", ".join(f"'{item_name}' = {value}" for value, item_name in self.items())
        return f"{prefix}({body})"

    def enum_name(self, value: int) -> str:
        """Name bound to ``value``; raises KeyError if there is none."""
        return self._value_to_name[value]

    def enum_value(self, name: str) -> int:
        """Value bound to ``name``; raises KeyError if there is none."""
        return self._name_to_value[name]

    def has_enum_name(self, name: str) -> bool:
        return name in self._name_to_value

    def has_enum_value(self, value: int) -> bool:
        return value in self._value_to_name

    def items(self) -> list[tuple[int, str]]:
        """(value, name) pairs ordered by value."""
        return sorted(self._value_to_name.items())


class FixedStringType(Type):
    """FixedString(N)."""

    __slots__ = ("_size",)

    def __init__(self, size: int):
        super().__init__(TypeCode.FIXED_STRING)
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def name(self) -> str:
        return f"FixedString({self._size})"


class NullableType(Type):
    """Nullable(T)."""

    __slots__ = ("_nested_type",)

    def __init__(self, nested_type: Type):
        super().__init__(TypeCode.NULLABLE)
        self._nested_type = nested_type

    @property
    def nested_type(self) -> Type:
        return self._nested_type

    @property
    def name(self) -> str:
        return f"Nullable({self._nested_type.name})"


class TupleType(Type):
    """Tuple(T1, T2, ...)."""

    __slots__ = ("_item_types",)

    def __init__(self, item_types: Iterable[Type]):
        super().__init__(TypeCode.TUPLE)
        self._item_types = tuple(item_types)

    @property
    def item_types(self) -> tuple[Type, ...]:
        return self._item_types

    @property
    def name(self) -> str:
        return "Tuple(" + ", ".join(t.name for t in self._item_types) + ")"


def create_array(item_type: Type) -> ArrayType:
    return ArrayType(item_type)


def create_date() -> Type:
    return Type(TypeCode.DATE)


def create_datetime() -> Type:
    return Type(TypeCode.DATETIME)


def create_nullable(nested_type: Type) -> NullableType:
    return NullableType(nested_type)


def create_simple(code) -> Type:
    """Type for a numeric code (integers and floats)."""
    code = TypeCode(code)
    if code not in _NUMERIC_CODES:
        raise ValueError(f"not a numeric type code: {code.name}")
    return Type(code)


def create_string() -> Type:
    return Type(TypeCode.STRING)


def create_fixed_string(size: int) -> FixedStringType:
    return FixedStringType(size)


def create_tuple(item_types: Iterable[Type]) -> TupleType:
    return TupleType(item_types)


def create_enum8(items: Iterable[Tuple[str, int]]) -> EnumType:
    return EnumType(TypeCode.ENUM8, items)


def create_enum16(items: Iterable[Tuple[str, int]]) -> EnumType:
    return EnumType(TypeCode.ENUM16, items)


def create_uuid() -> Type:
    return Type(TypeCode.UUID)


def create_decimal(precision: int, scale: int) -> DecimalType:
    return DecimalType(precision, scale)