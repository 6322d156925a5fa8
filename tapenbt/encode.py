"""Turning the in-memory tag types back into NBT bytes."""

import struct

from .common import TagId, encode_string, encode_u32, encode_with_u32_length, pack_big_endian
from .tags import BaseNbt, NbtCompound

__all__ = [
    "write",
    "write_unnamed",
    "write_tag",
    "write_tag_payload",
    "write_list",
    "write_compound",
]

_NUMBER_CODES = {
    TagId.BYTE: "b",
    TagId.SHORT: "h",
    TagId.INT: "i",
    TagId.LONG: "q",
    TagId.FLOAT: "f",
    TagId.DOUBLE: "d",
}
_ARRAY_CODES = {TagId.INT_ARRAY: "i", TagId.LONG_ARRAY: "q"}
_END = bytes([TagId.END])


def _payload(kind, value):
    code = _NUMBER_CODES.get(kind)
    if code is not None:
        return struct.pack(">" + code, value)
    if kind is TagId.BYTE_ARRAY:
        return encode_with_u32_length(1, value)
    if kind is TagId.STRING:
        return encode_string(value)
    if kind is TagId.LIST:
        return write_list(value)
    if kind is TagId.COMPOUND:
        return write_compound(value)
    code = _ARRAY_CODES.get(kind)
    if code is not None:
        values = list(value)
        return encode_u32(len(values)) + pack_big_endian(values, code)
    raise ValueError(f"cannot write a value of kind {kind!r}")


def _root_parts(nbt):
    if isinstance(nbt, BaseNbt):
        return nbt.name, nbt.tag
    if isinstance(nbt, NbtCompound):
        return "", nbt
    raise TypeError(f"expected a BaseNbt or None, got {type(nbt).__name__}")


def write_tag_payload(tag):
    """Return the bytes of a tag's value, without its type byte."""
    return _payload(tag.kind, tag.value)


def write_tag(tag):
    """Return a tag's type byte followed by its value."""
    return bytes([tag.id()]) + write_tag_payload(tag)


def write_list(nbt_list):
    """Return a list's element type, its length and its items."""
    kind = nbt_list.kind
    header = bytes([nbt_list.id()]) + encode_u32(len(nbt_list))
    code = _NUMBER_CODES.get(kind)
    if code is not None:
        return header + pack_big_endian(nbt_list.items, code)
    return header + b"".join(_payload(kind, item) for item in nbt_list.items)


def write_compound(compound):
    """Return every named tag of a compound followed by an end tag."""
    body = b"".join(
        bytes([tag.id()]) + encode_string(name) + write_tag_payload(tag)
        for name, tag in compound
    )
    return body + _END


def write(nbt):
    """Return a named root compound, or a lone end tag when ``nbt`` is None."""
    if nbt is None:
        return _END
    name, compound = _root_parts(nbt)
    return bytes([TagId.COMPOUND]) + encode_string(name) + write_compound(compound)


def write_unnamed(nbt):
    """Return a root compound without its name, or a lone end tag for None."""
    if nbt is None:
        return _END
    _, compound = _root_parts(nbt)
    return bytes([TagId.COMPOUND]) + write_compound(compound)