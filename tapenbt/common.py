"""Tag ids, a bounds-checked byte reader and the primitive NBT encodings."""

import enum
import struct

from .errors import MAX_DEPTH, UnexpectedEofError
from .mutf8 import Mutf8Str, encode
from .raw_list import RawList

__all__ = [
    "MAX_DEPTH",
    "TagId",
    "ByteReader",
    "read_with_u16_length",
    "read_with_u32_length",
    "read_string",
    "read_byte_array",
    "read_int_array",
    "read_long_array",
    "encode_string",
    "encode_with_u32_length",
    "encode_u32",
    "pack_big_endian",
    "unpack_big_endian",
    "pack_native_endian",
]

_U8 = struct.Struct(">B")
_I8 = struct.Struct(">b")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")
_I64 = struct.Struct(">q")
_F32 = struct.Struct(">f")
_F64 = struct.Struct(">d")


class TagId(enum.IntEnum):
    """The numeric id of each NBT tag type."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


class ByteReader:
    """Reads big-endian values from a byte buffer, raising at the end of data."""

    __slots__ = ("data", "position")

    def __init__(self, data, position=0):
        self.data = data if isinstance(data, bytes) else bytes(data)
        self.position = position

    def remaining(self):
        """Return how many bytes are left to read."""
        return len(self.data) - self.position

    def _unpack(self, layout):
        if layout.size > self.remaining():
            raise UnexpectedEofError()
        (value,) = layout.unpack_from(self.data, self.position)
        self.position += layout.size
        return value

    def read_u8(self):
        return self._unpack(_U8)

    def read_i8(self):
        return self._unpack(_I8)

    def read_u16(self):
        return self._unpack(_U16)

    def read_i16(self):
        return self._unpack(_I16)

    def read_u32(self):
        return self._unpack(_U32)

    def read_i32(self):
        return self._unpack(_I32)

    def read_i64(self):
        return self._unpack(_I64)

    def read_f32(self):
        return self._unpack(_F32)

    def read_f64(self):
        return self._unpack(_F64)

    def read_slice(self, length):
        """Return the next ``length`` bytes."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > self.remaining():
            raise UnexpectedEofError()
        start = self.position
        self.position += length
        return self.data[start:self.position]

    def skip(self, length):
        """Move past the next ``length`` bytes."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > self.remaining():
            raise UnexpectedEofError()
        self.position += length


def read_with_u16_length(reader, width):
    """Read a u16 item count followed by that many items of ``width`` bytes."""
    return reader.read_slice(reader.read_u16() * width)


def read_with_u32_length(reader, width):
    """Read a u32 item count followed by that many items of ``width`` bytes."""
    return reader.read_slice(reader.read_u32() * width)


def read_string(reader):
    """Read a u16-length-prefixed MUTF-8 string."""
    return Mutf8Str(read_with_u16_length(reader, 1))


def read_byte_array(reader):
    """Read a u32-length-prefixed run of bytes."""
    return read_with_u32_length(reader, 1)


def read_int_array(reader):
    """Read a u32-length-prefixed run of big-endian 32-bit integers."""
    return RawList(read_with_u32_length(reader, 4), "i")


def read_long_array(reader):
    """Read a u32-length-prefixed run of big-endian 64-bit integers."""
    return RawList(read_with_u32_length(reader, 8), "q")


def encode_string(value):
    """Encode a string with its u16 byte-length prefix."""
    raw = encode(value) if isinstance(value, str) else bytes(value)
    if len(raw) > 0xFFFF:
        raise ValueError(f"string of {len(raw)} bytes is too long for NBT")
    return _U16.pack(len(raw)) + raw


def encode_with_u32_length(width, value):
    """Prefix ``value`` with its item count as a u32, each item being ``width`` bytes."""
    raw = bytes(value)
    return _U32.pack(len(raw) // width) + raw


def encode_u32(value):
    """Encode an unsigned 32-bit integer, big-endian."""
    return _U32.pack(value)


def pack_big_endian(values, code):
    """Pack numbers of struct format ``code`` as big-endian bytes."""
    values = list(values)
    return struct.pack(f">{len(values)}{code}", *values)


def unpack_big_endian(data, code):
    """Unpack big-endian bytes into numbers of struct format ``code``."""
    count = len(data) // struct.calcsize(">" + code)
    return list(struct.unpack_from(f">{count}{code}", data))


def pack_native_endian(values, code):
    """Pack numbers of struct format ``code`` in the machine's byte order."""
    values = list(values)
    return struct.pack(f"={len(values)}{code}", *values)