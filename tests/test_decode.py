import struct

import pytest
from hypothesis import given, strategies as st

from tapenbt.common import ByteReader, TagId
from tapenbt.decode import read, read_compound, read_optional_tag, read_tag, read_unnamed
from tapenbt.errors import (
    InvalidRootTypeError,
    MaxDepthExceededError,
    UnexpectedEofError,
    UnknownTagIdError,
)
from tapenbt.mutf8 import Mutf8Str
from tapenbt.tags import NbtList


def _name(text):
    raw = text.encode("utf-8")
    return struct.pack(">H", len(raw)) + raw


HELLO_WORLD = (
    b"\x0a" + _name("hello world")
    + b"\x08" + _name("name") + _name("Bananrama")
    + b"\x00"
)


def _list_root(element_id, values, code):
    data = b"\x0a" + _name("") + b"\x09" + _name("") + bytes([element_id])
    data += struct.pack(">i", len(values))
    data += b"".join(struct.pack(">" + code, v) for v in values)
    return data + b"\x00"


def test_hello_world():
    nbt = read(HELLO_WORLD)
    assert nbt.string("name") == Mutf8Str.from_str("Bananrama")
    assert nbt.name.to_str() == "hello world"


@pytest.mark.parametrize("count", [1021, 1023, 1024])
def test_int_lists(count):
    nbt = read(_list_root(TagId.INT, list(range(count)), "i"))
    ints = nbt.list("").ints()
    assert ints == list(range(count))
    assert len(ints) == count


def test_long_list_1023():
    nbt = read(_list_root(TagId.LONG, list(range(1023)), "q"))
    longs = nbt.list("").longs()
    assert longs == list(range(1023))
    assert len(longs) == 1023


def test_compound_eof():
    with pytest.raises(UnexpectedEofError):
        read(bytes([10, 0, 0, 10, 0, 0]))


def test_get_byte_array():
    nbt = read(bytes([10, 0, 0, 7, 0, 0, 0, 0, 0, 0, 0]))
    assert nbt.byte_array("") == b""


def test_list_of_empty_lists():
    data = bytes([10, 0, 0, 9, 0, 0, 9, 0, 0, 0, 1, 0, 9, 0, 0, 0, 0])
    nbt = read(data)
    assert nbt.list("") == NbtList(TagId.LIST, [NbtList(TagId.END)])


def test_list_of_byte_arrays():
    data = bytes([10, 0, 0, 9, 0, 0, 9, 0, 0, 0, 1, 7, 0, 0, 0, 0, 0])
    nbt = read(data)
    assert nbt.list("") == NbtList(TagId.LIST, [NbtList(TagId.BYTE_ARRAY, [])])


def test_end_root_is_none():
    assert read(b"\x00") is None
    assert read_unnamed(b"\x00") is None


def test_empty_data_is_eof():
    with pytest.raises(UnexpectedEofError):
        read(b"")


def test_invalid_root_type():
    with pytest.raises(InvalidRootTypeError) as info:
        read(b"\x03\x00\x00\x00\x00\x00\x01")
    assert info.value.tag_id == 3


def test_unknown_tag_in_compound():
    with pytest.raises(UnknownTagIdError) as info:
        read(b"\x0a" + _name("") + b"\x0d" + _name("x") + b"\x00")
    assert info.value.tag_id == 13


def test_unknown_list_element_type():
    with pytest.raises(UnknownTagIdError) as info:
        read(b"\x0a" + _name("") + b"\x09" + _name("l") + b"\x20\x00\x00\x00\x00\x00")
    assert info.value.tag_id == 0x20


def test_reader_position_advances():
    reader = ByteReader(HELLO_WORLD + b"\x99")
    read(reader)
    assert reader.position == len(HELLO_WORLD)
    assert reader.read_u8() == 0x99


def test_read_unnamed():
    nbt = read_unnamed(b"\x0a\x01" + _name("a") + b"\x05\x00")
    assert nbt.name == Mutf8Str()
    assert nbt.byte("a") == 5


def test_read_compound():
    compound = read_compound(b"\x03" + _name("n") + struct.pack(">i", -7) + b"\x00")
    assert compound.int("n") == -7
    assert len(compound) == 1


def test_read_tag_compound():
    tag = read_tag(b"\x0a\x01" + _name("a") + b"\x05\x00")
    assert tag.compound().byte("a") == 5


def test_read_tag_scalar():
    tag = read_tag(b"\x06" + struct.pack(">d", 2.25))
    assert tag.double() == 2.25


def test_read_tag_end_is_unknown():
    with pytest.raises(UnknownTagIdError) as info:
        read_tag(b"\x00")
    assert info.value.tag_id == 0


def test_read_optional_tag():
    assert read_optional_tag(b"\x00") is None
    assert read_optional_tag(b"\x02\xff\xfe").short() == -2
    with pytest.raises(UnexpectedEofError):
        read_optional_tag(b"")


def test_scalar_values():
    data = (
        b"\x0a" + _name("")
        + b"\x01" + _name("b") + b"\xff"
        + b"\x04" + _name("l") + struct.pack(">q", -(1 << 40))
        + b"\x05" + _name("f") + struct.pack(">f", 1.5)
        + b"\x0b" + _name("ia") + struct.pack(">i", 2) + struct.pack(">ii", 1, -1)
        + b"\x0c" + _name("la") + struct.pack(">i", 1) + struct.pack(">q", 9)
        + b"\x00"
    )
    nbt = read(data)
    assert nbt.byte("b") == -1
    assert nbt.long("l") == -(1 << 40)
    assert nbt.float("f") == 1.5
    assert nbt.int_array("ia") == [1, -1]
    assert nbt.long_array("la") == [9]
    assert nbt.keys() == [Mutf8Str.from_str(k) for k in ["b", "l", "f", "ia", "la"]]


def test_signed_byte_list():
    data = b"\x0a" + _name("") + b"\x09" + _name("b") + b"\x01\x00\x00\x00\x02\xff\x01\x00"
    assert read(data).list("b").bytes() == [-1, 1]


def test_string_list_and_mutf8_null():
    data = (
        b"\x0a" + _name("")
        + b"\x09" + _name("s") + b"\x08\x00\x00\x00\x02" + _name("x") + b"\x00\x02\xc0\x80"
        + b"\x00"
    )
    strings = read(data).list("s").strings()
    assert strings == [Mutf8Str.from_str("x"), Mutf8Str.from_str("\0")]


def test_compound_list():
    data = (
        b"\x0a" + _name("")
        + b"\x09" + _name("c") + b"\x0a\x00\x00\x00\x02"
        + b"\x01" + _name("v") + b"\x01\x00"
        + b"\x01" + _name("v") + b"\x02\x00"
        + b"\x00"
    )
    compounds = read(data).list("c").compounds()
    assert [c.byte("v") for c in compounds] == [1, 2]


def _nested(levels):
    return b"\x0a" + _name("") + (b"\x0a\x00\x00" * levels) + b"\x00" * (levels + 1)


def test_max_depth_allowed():
    compound = read(_nested(512)).into_inner()
    for _ in range(512):
        assert len(compound) == 1
        compound = compound.compound("")
    assert len(compound) == 0
    assert compound.compound("") is None


def test_max_depth_exceeded():
    with pytest.raises(MaxDepthExceededError):
        read(_nested(513))


def test_truncated_list():
    with pytest.raises(UnexpectedEofError):
        read(b"\x0a" + _name("") + b"\x09" + _name("") + b"\x03\x00\x00\x00\x05\x00\x00\x00\x01")


@given(st.lists(st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1), max_size=50))
def test_int_list_property(values):
    assert read(_list_root(TagId.INT, values, "i")).list("").ints() == values