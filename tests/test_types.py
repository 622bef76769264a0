import pytest

from clickwire.types import (
    ArrayType,
    EnumType,
    Type,
    TypeCode,
    create_array,
    create_date,
    create_decimal,
    create_enum8,
    create_enum16,
    create_fixed_string,
    create_nullable,
    create_simple,
    create_string,
    create_tuple,
)


def test_type_names():
    assert create_date().name == "Date"
    assert create_array(create_simple(TypeCode.INT32)).name == "Array(Int32)"
    assert create_nullable(create_simple(TypeCode.INT32)).name == "Nullable(Int32)"
    assert create_array(create_simple(TypeCode.INT32)).item_type.code == TypeCode.INT32
    assert (
        create_tuple([create_simple(TypeCode.INT32), create_string()]).name
        == "Tuple(Int32, String)"
    )


def test_nullable_type_keeps_nested():
    nested = create_simple(TypeCode.INT32)
    assert create_nullable(nested).nested_type is nested


def test_enum8_type():
    enum8 = create_enum8([("One", 1), ("Two", 2)])
    assert enum8.name == "Enum8('One' = 1, 'Two' = 2)"
    assert enum8.has_enum_value(1)
    assert enum8.has_enum_name("Two")
    assert not enum8.has_enum_value(10)
    assert not enum8.has_enum_name("Ten")
    assert enum8.enum_name(2) == "Two"
    assert enum8.enum_value("Two") == 2


def test_enum16_type():
    enum16 = create_enum16([("Green", 1), ("Red", 2), ("Yellow", 3)])
    assert enum16.name == "Enum16('Green' = 1, 'Red' = 2, 'Yellow' = 3)"
    assert enum16.has_enum_value(3)
    assert enum16.has_enum_name("Green")
    assert not enum16.has_enum_value(10)
    assert not enum16.has_enum_name("Black")
    assert enum16.enum_name(2) == "Red"
    assert enum16.enum_value("Green") == 1

    items = enum16.items()
    assert len(items) == 3
    assert items[0] == (1, "Green")
    assert items[1] == (2, "Red")


def test_enum_items_are_ordered_by_value():
    enum8 = create_enum8([("B", 5), ("A", -3)])
    assert [value for value, _ in enum8.items()] == sorted(
        value for value, _ in enum8.items()
    )
    assert enum8.items()[0] == (-3, "A")


def test_enum_missing_lookups_raise():
    enum8 = create_enum8([("One", 1)])
    with pytest.raises(KeyError):
        enum8.enum_name(7)
    with pytest.raises(KeyError):
        enum8.enum_value("Seven")


def test_enum_equality_with_itself():
    items = [("Hi", 1), ("Hello", 2)]
    assert create_enum8(items) == create_enum8(items)
    assert create_enum16(items) == create_enum16(items)
    assert create_enum8(items) != create_enum16(items)


def test_enum_rejects_non_enum_code():
    with pytest.raises(ValueError):
        EnumType(TypeCode.INT8, [("One", 1)])


def test_equality_by_name():
    assert create_array(create_simple(TypeCode.UINT64)) == create_array(
        create_simple(TypeCode.UINT64)
    )
    assert create_simple(TypeCode.UINT64) != create_simple(TypeCode.INT64)
    assert hash(create_string()) == hash(create_string())


def test_ipv4_and_ipv6_names():
    assert Type(TypeCode.IPV4).name == "UInt32"
    assert Type(TypeCode.IPV6).name == "FixedString(16)"
    assert Type(TypeCode.IPV6) == create_fixed_string(16)


def test_fixed_string_name_uses_size():
    assert create_fixed_string(24).name == "FixedString(24)"
    assert create_fixed_string(24).size == 24


@pytest.mark.parametrize(
    "precision, code",
    [
        (9, TypeCode.DECIMAL32),
        (18, TypeCode.DECIMAL64),
        (38, TypeCode.DECIMAL128),
    ],
)
def test_decimal_code_by_precision(precision, code):
    decimal = create_decimal(precision, 4)
    assert decimal.code == code
    assert decimal.scale == 4
    assert decimal.precision == precision


def test_decimal_name():
    assert create_decimal(9, 4).name == "Decimal32(4)"


def test_create_simple_rejects_non_numeric():
    with pytest.raises(ValueError):
        create_simple(TypeCode.STRING)


def test_parametrised_code_without_parameters_has_no_name():
    with pytest.raises(ValueError):
        Type(TypeCode.ARRAY).name


def test_array_type_is_array_code():
    arr = ArrayType(create_string())
    assert arr.code == TypeCode.ARRAY
    assert str(arr) == "Array(String)"