"""Parser for type names such as ``Array(Nullable(UInt8))``."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass, field
from typing import Iterator

from .types import TypeCode


class Meta(enum.Enum):
    """Category of a node in a parsed type name."""

    ARRAY = "array"
    NULL = "null"
    NULLABLE = "nullable"
    NUMBER = "number"
    TERMINAL = "terminal"
    TUPLE = "tuple"
    ENUM = "enum"


@dataclass
class TypeAst:
    """A node of a parsed type name."""

    meta: Meta = Meta.TERMINAL
    code: TypeCode = TypeCode.VOID
    name: str = ""
    value: int = 0
    elements: list[TypeAst] = field(default_factory=list)


class TypeParseError(ValueError):
    """Raised when a type name cannot be parsed."""


_TYPE_CODES = {
    "Int8": TypeCode.INT8,
    "Int16": TypeCode.INT16,
    "Int32": TypeCode.INT32,
    "Int64": TypeCode.INT64,
    "UInt8": TypeCode.UINT8,
    "UInt16": TypeCode.UINT16,
    "UInt32": TypeCode.UINT32,
    "UInt64": TypeCode.UINT64,
    "Float32": TypeCode.FLOAT32,
    "Float64": TypeCode.FLOAT64,
    "String": TypeCode.STRING,
    "FixedString": TypeCode.FIXED_STRING,
    "DateTime": TypeCode.DATETIME,
    "Date": TypeCode.DATE,
    "Array": TypeCode.ARRAY,
    "Nullable": TypeCode.NULLABLE,
    "Tuple": TypeCode.TUPLE,
    "Enum8": TypeCode.ENUM8,
    "Enum16": TypeCode.ENUM16,
    "UUID": TypeCode.UUID,
    "Decimal32": TypeCode.DECIMAL32,
    "Decimal64": TypeCode.DECIMAL64,
    "Decimal128": TypeCode.DECIMAL128,
    "Decimal": TypeCode.DECIMAL128,
    "IPv4": TypeCode.IPV4,
    "IPv6": TypeCode.IPV6,
}

_TYPE_METAS = {
    "Array": Meta.ARRAY,
    "Null": Meta.NULL,
    "Nullable": Meta.NULLABLE,
    "Tuple": Meta.TUPLE,
    "Enum8": Meta.ENUM,
    "Enum16": Meta.ENUM,
}

# Quotes and '=' only separate enum names from values, so they are skipped.
_SKIPPED = frozenset(" \n\t\0='")


class _Token(enum.Enum):
    NAME = "name"
    NUMBER = "number"
    LPAR = "("
    RPAR = ")"
    COMMA = ","
    INVALID = "invalid"


_PUNCTUATION = {"(": _Token.LPAR, ")": _Token.RPAR, ",": _Token.COMMA}


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _tokenize(text: str) -> Iterator[tuple[_Token, str, int]]:
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch in _SKIPPED:
            pos += 1
        elif ch in _PUNCTUATION:
            yield _PUNCTUATION[ch], ch, pos
            pos += 1
        elif _is_alpha(ch) or ch == "_":
            start = pos
            pos += 1
            while pos < end and (
                _is_alpha(text[pos]) or _is_digit(text[pos]) or text[pos] == "_"
            ):
                pos += 1
            yield _Token.NAME, text[start:pos], start
        elif _is_digit(ch) or ch == "-":
            start = pos
            pos += 1
            while pos < end and _is_digit(text[pos]):
                pos += 1
            yield _Token.NUMBER, text[start:pos], start
        else:
            yield _Token.INVALID, ch, pos
            return


class TypeParser:
    """Builds a TypeAst from a type name."""

    def __init__(self, name: str):
        self._text = name

    def parse(self) -> TypeAst:
        """Parse the whole name; raises TypeParseError on bad input."""
        root = TypeAst()
        current = root
        open_elements: list[TypeAst] = [root]

        for kind, value, pos in _tokenize(self._text):
            if kind is _Token.NAME:
                current.meta = _TYPE_METAS.get(value, Meta.TERMINAL)
                current.name = value
                current.code = _TYPE_CODES.get(value, TypeCode.VOID)
            elif kind is _Token.NUMBER:
                try:
                    number = int(value)
                except ValueError:
                    raise TypeParseError(
                        f"bad number {value!r} at position {pos} in {self._text!r}"
                    ) from None
                current.meta = Meta.NUMBER
                current.value = number
            elif kind is _Token.LPAR:
                child = TypeAst()
                current.elements.append(child)
                open_elements.append(current)
                current = child
            elif kind is _Token.RPAR:
                if not open_elements:
                    raise TypeParseError(
                        f"unbalanced ')' at position {pos} in {self._text!r}"
                    )
                current = open_elements.pop()
            elif kind is _Token.COMMA:
                if not open_elements:
                    raise TypeParseError(
                        f"unexpected ',' at position {pos} in {self._text!r}"
                    )
                current = open_elements.pop()
                child = TypeAst()
                current.elements.append(child)
                open_elements.append(current)
                current = child
            else:
                raise TypeParseError(
                    f"unexpected character {value!r} at position {pos} in {self._text!r}"
                )

        return root


@functools.lru_cache(maxsize=None)
def parse_type_name(type_name: str) -> TypeAst:
    """Parse a type name, caching the result; the returned tree is shared."""
    return TypeParser(type_name).parse()