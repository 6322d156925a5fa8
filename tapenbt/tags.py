"""In-memory NBT values: tags, lists, compounds and the named root container."""

import operator
import struct

from .common import TagId
from .mutf8 import Mutf8Str

__all__ = ["NbtTag", "NbtList", "NbtCompound", "BaseNbt"]

_INT_RANGES = {
    TagId.BYTE: (-(1 << 7), (1 << 7) - 1),
    TagId.SHORT: (-(1 << 15), (1 << 15) - 1),
    TagId.INT: (-(1 << 31), (1 << 31) - 1),
    TagId.LONG: (-(1 << 63), (1 << 63) - 1),
}
_F32 = struct.Struct(">f")


def _to_mutf8(name):
    if isinstance(name, Mutf8Str):
        return name
    if isinstance(name, str):
        return Mutf8Str.from_str(name)
    if isinstance(name, (bytes, bytearray, memoryview)):
        return Mutf8Str(name)
    raise TypeError(f"expected a string, got {type(name).__name__}")


def _check_int(value, kind):
    if isinstance(value, bool):
        raise TypeError("booleans are not NBT integers")
    number = operator.index(value)
    low, high = _INT_RANGES[kind]
    if not low <= number <= high:
        raise ValueError(f"{number} does not fit in a {kind.name.lower()} tag")
    return number


def _coerce(kind, value):
    """Convert ``value`` into the Python form used for a tag of ``kind``."""
    if kind in _INT_RANGES:
        return _check_int(value, kind)
    if kind is TagId.FLOAT:
        return _F32.unpack(_F32.pack(float(value)))[0]
    if kind is TagId.DOUBLE:
        return float(value)
    if kind is TagId.BYTE_ARRAY:
        return bytes(value)
    if kind is TagId.STRING:
        return _to_mutf8(value)
    if kind is TagId.LIST:
        if not isinstance(value, NbtList):
            raise TypeError("a list tag needs an NbtList")
        return value
    if kind is TagId.COMPOUND:
        if not isinstance(value, NbtCompound):
            raise TypeError("a compound tag needs an NbtCompound")
        return value
    if kind is TagId.INT_ARRAY:
        return [_check_int(item, TagId.INT) for item in value]
    if kind is TagId.LONG_ARRAY:
        return [_check_int(item, TagId.LONG) for item in value]
    raise ValueError(f"tags cannot have kind {kind!r}")


class NbtTag:
    """A single NBT tag: a kind and a value of that kind."""

    __slots__ = ("kind", "value")

    def __init__(self, kind, value):
        kind = TagId(kind)
        if kind is TagId.END:
            raise ValueError("an end tag carries no value")
        self.kind = kind
        self.value = _coerce(kind, value)

    def id(self):
        """Return the numeric id of the tag type."""
        return int(self.kind)

    def _as(self, kind):
        return self.value if self.kind is kind else None

    def byte(self):
        return self._as(TagId.BYTE)

    def short(self):
        return self._as(TagId.SHORT)

    def int(self):
        return self._as(TagId.INT)

    def long(self):
        return self._as(TagId.LONG)

    def float(self):
        return self._as(TagId.FLOAT)

    def double(self):
        return self._as(TagId.DOUBLE)

    def byte_array(self):
        return self._as(TagId.BYTE_ARRAY)

    def string(self):
        return self._as(TagId.STRING)

    def list(self):
        return self._as(TagId.LIST)

    def compound(self):
        return self._as(TagId.COMPOUND)

    def int_array(self):
        return self._as(TagId.INT_ARRAY)

    def long_array(self):
        return self._as(TagId.LONG_ARRAY)

    def __eq__(self, other):
        if isinstance(other, NbtTag):
            return self.kind is other.kind and self.value == other.value
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"NbtTag({self.kind.name}, {self.value!r})"


class NbtList:
    """A list of NBT values that all share one tag type."""

    __slots__ = ("kind", "items")

    def __init__(self, kind=TagId.END, items=()):
        kind = TagId(kind)
        items = list(items)
        if kind is TagId.END:
            if items:
                raise ValueError("an empty-typed list cannot hold items")
            self.items = []
        else:
            self.items = [_coerce(kind, item) for item in items]
        self.kind = kind

    def id(self):
        """Return the numeric id of the element type."""
        return int(self.kind)

    def _as(self, kind):
        return list(self.items) if self.kind is kind else None

    def bytes(self):
        return self._as(TagId.BYTE)

    def shorts(self):
        return self._as(TagId.SHORT)

    def ints(self):
        return self._as(TagId.INT)

    def longs(self):
        return self._as(TagId.LONG)

    def floats(self):
        return self._as(TagId.FLOAT)

    def doubles(self):
        return self._as(TagId.DOUBLE)

    def byte_arrays(self):
        return self._as(TagId.BYTE_ARRAY)

    def strings(self):
        return self._as(TagId.STRING)

    def lists(self):
        return self._as(TagId.LIST)

    def compounds(self):
        return self._as(TagId.COMPOUND)

    def int_arrays(self):
        return self._as(TagId.INT_ARRAY)

    def long_arrays(self):
        return self._as(TagId.LONG_ARRAY)

    def as_nbt_tags(self):
        """Return every item wrapped as a standalone tag."""
        if self.kind is TagId.END:
            return []
        return [NbtTag(self.kind, item) for item in self.items]

    def __len__(self):
        return len(self.items)

    def __eq__(self, other):
        if isinstance(other, NbtList):
            return self.kind is other.kind and self.items == other.items
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"NbtList({self.kind.name}, {self.items!r})"


def _to_tag(tag):
    if isinstance(tag, NbtTag):
        return tag
    if isinstance(tag, NbtList):
        return NbtTag(TagId.LIST, tag)
    if isinstance(tag, NbtCompound):
        return NbtTag(TagId.COMPOUND, tag)
    if isinstance(tag, BaseNbt):
        return NbtTag(TagId.COMPOUND, tag.tag)
    if isinstance(tag, (str, Mutf8Str)):
        return NbtTag(TagId.STRING, tag)
    if isinstance(tag, (bytes, bytearray)):
        return NbtTag(TagId.BYTE_ARRAY, tag)
    raise TypeError(f"cannot make an NBT tag from {type(tag).__name__}")


class NbtCompound:
    """Named tags in the order they were added; names may repeat."""

    __slots__ = ("_entries",)

    def __init__(self, values=()):
        self._entries = [(_to_mutf8(name), _to_tag(tag)) for name, tag in values]

    def _index(self, name):
        key = _to_mutf8(name)
        return next((i for i, (k, _) in enumerate(self._entries) if k == key), None)

    def get(self, name):
        """Return the first tag with this name, or None."""
        index = self._index(name)
        return None if index is None else self._entries[index][1]

    def take(self, name):
        """Return the named tag, leaving a zero byte tag in its place."""
        index = self._index(name)
        if index is None:
            return None
        key, tag = self._entries[index]
        self._entries[index] = (key, NbtTag(TagId.BYTE, 0))
        return tag

    def contains(self, name):
        """Return whether a tag with this name is present."""
        return self._index(name) is not None

    def _typed(self, name, accessor):
        tag = self.get(name)
        return None if tag is None else accessor(tag)

    def byte(self, name):
        return self._typed(name, NbtTag.byte)

    def short(self, name):
        return self._typed(name, NbtTag.short)

    def int(self, name):
        return self._typed(name, NbtTag.int)

    def long(self, name):
        return self._typed(name, NbtTag.long)

    def float(self, name):
        return self._typed(name, NbtTag.float)

    def double(self, name):
        return self._typed(name, NbtTag.double)

    def byte_array(self, name):
        return self._typed(name, NbtTag.byte_array)

    def string(self, name):
        return self._typed(name, NbtTag.string)

    def list(self, name):
        return self._typed(name, NbtTag.list)

    def compound(self, name):
        return self._typed(name, NbtTag.compound)

    def int_array(self, name):
        return self._typed(name, NbtTag.int_array)

    def long_array(self, name):
        return self._typed(name, NbtTag.long_array)

    def __iter__(self):
        """Iterate over ``(name, tag)`` pairs in order."""
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if isinstance(other, NbtCompound):
            return self._entries == other._entries
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"NbtCompound({self._entries!r})"

    def keys(self):
        return [name for name, _ in self._entries]

    def values(self):
        return [tag for _, tag in self._entries]

    def items(self):
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def insert(self, name, tag):
        """Append a tag; an existing tag of the same name is kept."""
        self._entries.append((_to_mutf8(name), _to_tag(tag)))

    def extend(self, other):
        """Append every ``(name, tag)`` pair from ``other``."""
        self._entries.extend((_to_mutf8(name), _to_tag(tag)) for name, tag in other)

    def remove(self, name):
        """Remove and return the first tag with this name, or None."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries.pop(index)[1]


class BaseNbt:
    """A root compound together with its name; behaves like the compound."""

    __slots__ = ("name", "tag")

    def __init__(self, name="", tag=None):
        self.name = _to_mutf8(name)
        self.tag = NbtCompound() if tag is None else tag
        if not isinstance(self.tag, NbtCompound):
            raise TypeError("the root tag must be an NbtCompound")

    def into_inner(self):
        """Return the root compound."""
        return self.tag

    def __getattr__(self, attr):
        if attr in BaseNbt.__slots__:
            raise AttributeError(attr)
        return getattr(self.tag, attr)

    def __iter__(self):
        return iter(self.tag)

    def __len__(self):
        return len(self.tag)

    def __eq__(self, other):
        if isinstance(other, BaseNbt):
            return self.name == other.name and self.tag == other.tag
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"BaseNbt({self.name!r}, {self.tag!r})"