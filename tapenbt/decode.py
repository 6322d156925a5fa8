"""Reading NBT bytes into the in-memory tag types."""

from .common import (
    MAX_DEPTH,
    ByteReader,
    TagId,
    read_byte_array,
    read_int_array,
    read_long_array,
    read_string,
    read_with_u32_length,
    unpack_big_endian,
)
from .errors import InvalidRootTypeError, MaxDepthExceededError, UnknownTagIdError
from .mutf8 import Mutf8Str
from .tags import BaseNbt, NbtCompound, NbtList, NbtTag

__all__ = ["read", "read_unnamed", "read_compound", "read_tag", "read_optional_tag"]

_SCALAR_READERS = {
    TagId.BYTE: ByteReader.read_i8,
    TagId.SHORT: ByteReader.read_i16,
    TagId.INT: ByteReader.read_i32,
    TagId.LONG: ByteReader.read_i64,
    TagId.FLOAT: ByteReader.read_f32,
    TagId.DOUBLE: ByteReader.read_f64,
    TagId.BYTE_ARRAY: read_byte_array,
    TagId.STRING: read_string,
    TagId.INT_ARRAY: lambda reader: read_int_array(reader).to_list(),
    TagId.LONG_ARRAY: lambda reader: read_long_array(reader).to_list(),
}

_NUMBER_LISTS = {
    TagId.BYTE: (1, "b"),
    TagId.SHORT: (2, "h"),
    TagId.INT: (4, "i"),
    TagId.LONG: (8, "q"),
    TagId.FLOAT: (4, "f"),
    TagId.DOUBLE: (8, "d"),
}

_ARRAY_LISTS = {
    TagId.BYTE_ARRAY: read_byte_array,
    TagId.STRING: read_string,
    TagId.INT_ARRAY: lambda reader: read_int_array(reader).to_list(),
    TagId.LONG_ARRAY: lambda reader: read_long_array(reader).to_list(),
}


def _reader(data):
    return data if isinstance(data, ByteReader) else ByteReader(data)


def _read_scalar(reader, kind):
    read_value = _SCALAR_READERS.get(kind)
    if read_value is None:
        raise UnknownTagIdError(kind)
    return NbtTag(TagId(kind), read_value(reader))


def _read_compound(reader, depth):
    if depth > MAX_DEPTH:
        raise MaxDepthExceededError()
    entries = []
    while True:
        kind = reader.read_u8()
        if kind == TagId.END:
            break
        name = read_string(reader)
        if kind == TagId.COMPOUND:
            tag = NbtTag(TagId.COMPOUND, _read_compound(reader, depth + 1))
        elif kind == TagId.LIST:
            tag = NbtTag(TagId.LIST, _read_list(reader, depth + 1))
        else:
            tag = _read_scalar(reader, kind)
        entries.append((name, tag))
    return NbtCompound(entries)


def _read_list(reader, depth):
    if depth > MAX_DEPTH:
        raise MaxDepthExceededError()
    kind = reader.read_u8()
    if kind == TagId.END:
        reader.skip(4)
        return NbtList(TagId.END)
    if kind in _NUMBER_LISTS:
        width, code = _NUMBER_LISTS[kind]
        return NbtList(kind, unpack_big_endian(read_with_u32_length(reader, width), code))
    if kind in _ARRAY_LISTS:
        read_item = _ARRAY_LISTS[kind]
        length = reader.read_u32()
        return NbtList(kind, [read_item(reader) for _ in range(length)])
    if kind == TagId.LIST:
        length = reader.read_u32()
        return NbtList(kind, [_read_list(reader, depth + 1) for _ in range(length)])
    if kind == TagId.COMPOUND:
        length = reader.read_u32()
        return NbtList(kind, [_read_compound(reader, depth + 1) for _ in range(length)])
    raise UnknownTagIdError(kind)


def _read_value(reader, kind):
    if kind == TagId.COMPOUND:
        return NbtTag(TagId.COMPOUND, _read_compound(reader, 1))
    if kind == TagId.LIST:
        return NbtTag(TagId.LIST, _read_list(reader, 1))
    return _read_scalar(reader, kind)


def _read_root(reader):
    root_type = reader.read_u8()
    if root_type == TagId.END:
        return False
    if root_type != TagId.COMPOUND:
        raise InvalidRootTypeError(root_type)
    return True


def read(data):
    """Read a named root compound; return None if the data holds an end tag.

    ``data`` is bytes-like or a ``ByteReader``, whose position is advanced.
    """
    reader = _reader(data)
    if not _read_root(reader):
        return None
    name = read_string(reader)
    return BaseNbt(name, _read_compound(reader, 0))


def read_unnamed(data):
    """Read a root compound that has no name, as sent over the network."""
    reader = _reader(data)
    if not _read_root(reader):
        return None
    return BaseNbt(Mutf8Str(), _read_compound(reader, 0))


def read_compound(data):
    """Read the body of a compound tag."""
    return _read_compound(_reader(data), 0)


def read_tag(data):
    """Read a type byte and the tag payload that follows; end tags are an error."""
    reader = _reader(data)
    return _read_value(reader, reader.read_u8())


def read_optional_tag(data):
    """Like ``read_tag``, but return None for an end tag."""
    reader = _reader(data)
    kind = reader.read_u8()
    if kind == TagId.END:
        return None
    return _read_value(reader, kind)