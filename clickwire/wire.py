"""Byte streams and the binary wire encoding: varints, fixed-width values, strings."""

from __future__ import annotations

import abc
import functools
import struct
from typing import Any, Union

BytesLike = Union[bytes, bytearray, memoryview]

_MAX_VARINT_BYTES = 9
_VARINT_LIMIT = 1 << (7 * _MAX_VARINT_BYTES)
_MAX_STRING_LENGTH = 0x00FFFFFF


class EndOfStreamError(EOFError):
    """Raised when a stream ends before the requested data could be read."""


class InputStream(abc.ABC):
    """A source of bytes."""

    @abc.abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means there is no more data."""

    def read_byte(self) -> int:
        """Read a single byte; raises EndOfStreamError at the end of the stream."""
        data = self.read(1)
        if not data:
            raise EndOfStreamError("unexpected end of stream")
        return data[0]


class ArrayInput(InputStream):
    """An input stream over an in-memory block of bytes."""

    def __init__(self, data: BytesLike = b""):
        self.reset(data)

    def reset(self, data: BytesLike = b"") -> None:
        """Start reading from a new block of bytes."""
        self._data = bytes(data)
        self._pos = 0

    @property
    def available(self) -> int:
        """Number of bytes not read yet."""
        return len(self._data) - self._pos

    @property
    def exhausted(self) -> bool:
        return self.available == 0

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"negative read size: {size}")
        chunk = self._data[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk


class BufferedInput(InputStream):
    """Reads from another stream in chunks of ``buflen`` bytes.

    Requests larger than half the buffer that arrive while the buffer is
    empty go straight to the underlying stream.
    """

    def __init__(self, source: InputStream, buflen: int = 8192):
        if buflen <= 0:
            raise ValueError(f"buffer length must be positive: {buflen}")
        self._source = source
        self._buflen = buflen
        self._buffer = ArrayInput()

    def reset(self) -> None:
        """Discard any buffered data."""
        self._buffer.reset()

    def read(self, size: int) -> bytes:
        if self._buffer.exhausted:
            if size > self._buflen // 2:
                return self._source.read(size)
            self._buffer.reset(self._source.read(self._buflen))
        return self._buffer.read(size)


class OutputStream(abc.ABC):
    """A sink for bytes."""

    @abc.abstractmethod
    def write(self, data: BytesLike) -> None:
        """Write all of ``data``."""

    def flush(self) -> None:
        """Push any buffered data onwards."""


class BufferOutput(OutputStream):
    """An output stream that collects everything written in memory."""

    def __init__(self):
        self._buffer = bytearray()

    def write(self, data: BytesLike) -> None:
        self._buffer += data

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class BufferedOutput(OutputStream):
    """Collects writes into a buffer of ``buflen`` bytes before passing them on.

    A write that does not fit is preceded by a flush; if it is also larger
    than half the buffer it goes straight to the underlying stream.
    """

    def __init__(self, sink: OutputStream, buflen: int = 8192):
        if buflen <= 0:
            raise ValueError(f"buffer length must be positive: {buflen}")
        self._sink = sink
        self._buflen = buflen
        self._buffer = bytearray()

    def write(self, data: BytesLike) -> None:
        if self._buflen - len(self._buffer) < len(data):
            self.flush()
            if len(data) > self._buflen // 2:
                self._sink.write(bytes(data))
                return
        self._buffer += data

    def flush(self) -> None:
        if self._buffer:
            self._sink.write(bytes(self._buffer))
            self._sink.flush()
            self._buffer.clear()

    def reset(self) -> None:
        """Drop buffered data without writing it."""
        self._buffer.clear()


class CodedInputStream:
    """Decodes varints and fixed-width pieces from an input stream."""

    def __init__(self, source: InputStream):
        self._source = source

    def read_varint64(self) -> int:
        """Read an unsigned integer in varint encoding (at most nine bytes)."""
        value = 0
        for shift in range(0, 7 * _MAX_VARINT_BYTES, 7):
            byte = self._source.read_byte()
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return value
        raise ValueError(f"malformed varint: longer than {_MAX_VARINT_BYTES} bytes")

    def read_raw(self, size: int) -> bytes:
        """Read exactly ``size`` bytes."""
        parts = []
        remaining = size
        while remaining > 0:
            chunk = self._source.read(remaining)
            if not chunk:
                raise EndOfStreamError(
                    f"expected {size} bytes, stream ended after {size - remaining}"
                )
            parts.append(chunk)
            remaining -= len(chunk)
        return b"".join(parts)

    def skip(self, count: int) -> None:
        """Skip exactly ``count`` bytes."""
        remaining = count
        while remaining > 0:
            chunk = self._source.read(remaining)
            if not chunk:
                raise EndOfStreamError(
                    f"cannot skip {count} bytes, stream ended after {count - remaining}"
                )
            remaining -= len(chunk)


class CodedOutputStream:
    """Encodes varints and fixed-width pieces onto an output stream."""

    def __init__(self, sink: OutputStream):
        self._sink = sink

    def write_raw(self, data: BytesLike) -> None:
        self._sink.write(bytes(data))

    def write_varint64(self, value: int) -> None:
        """Write an unsigned integer below 2**63 in varint encoding."""
        if not 0 <= value < _VARINT_LIMIT:
            raise ValueError(f"value out of varint range: {value}")
        encoded = bytearray()
        while True:
            byte = value & 0x7F
            value >>= 7
            if value:
                encoded.append(byte | 0x80)
            else:
                encoded.append(byte)
                break
        self._sink.write(bytes(encoded))

    def flush(self) -> None:
        self._sink.flush()


@functools.lru_cache(maxsize=None)
def _struct(fmt: str) -> struct.Struct:
    if fmt[:1] not in ("<", ">", "!", "=", "@"):
        fmt = "<" + fmt
    return struct.Struct(fmt)


def read_fixed(input: CodedInputStream, fmt: str) -> Any:
    """Read a fixed-width value described by a struct format (little-endian by default).

    Returns a single value for a one-field format, otherwise a tuple.
    """
    layout = _struct(fmt)
    values = layout.unpack(input.read_raw(layout.size))
    return values[0] if len(values) == 1 else values


def read_string(input: CodedInputStream) -> str:
    """Read a length-prefixed string (UTF-8, undecodable bytes kept as surrogates)."""
    length = input.read_varint64()
    if length > _MAX_STRING_LENGTH:
        raise ValueError(f"string too long: {length} bytes")
    return input.read_raw(length).decode("utf-8", "surrogateescape")


def read_uint64(input: CodedInputStream) -> int:
    return input.read_varint64()


def write_fixed(output: CodedOutputStream, fmt: str, value: Any) -> None:
    """Write a fixed-width value; a tuple supplies the fields of a multi-field format."""
    layout = _struct(fmt)
    if isinstance(value, tuple):
        output.write_raw(layout.pack(*value))
    else:
        output.write_raw(layout.pack(value))


def write_bytes(output: CodedOutputStream, data: BytesLike) -> None:
    output.write_raw(data)


def write_string(output: CodedOutputStream, value: Union[str, BytesLike]) -> None:
    """Write a length-prefixed string; text is encoded as UTF-8."""
    if isinstance(value, str):
        value = value.encode("utf-8", "surrogateescape")
    output.write_varint64(len(value))
    output.write_raw(value)


def write_uint64(output: CodedOutputStream, value: int) -> None:
    output.write_varint64(value)