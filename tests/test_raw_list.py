import struct

from hypothesis import given
from hypothesis import strategies as st

from tapenbt.raw_list import RawList

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
INT64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


def test_ints_decode():
    data = struct.pack(">3i", 1, -2, 3)
    raw = RawList(data, "i")
    assert raw.to_list() == [1, -2, 3]
    assert list(raw) == [1, -2, 3]
    assert len(raw) == 3


def test_as_big_endian_returns_input():
    data = struct.pack(">2q", 10, -10)
    assert RawList(data, "q").as_big_endian() == data


def test_little_endian_swaps_each_item():
    data = struct.pack(">2h", 258, -3)
    assert RawList(data, "h").to_little_endian() == struct.pack("<2h", 258, -3)


def test_empty():
    raw = RawList(b"", "i")
    assert len(raw) == 0
    assert raw.to_list() == []


def test_trailing_partial_item_is_ignored():
    data = struct.pack(">i", 7) + b"\x01"
    raw = RawList(data, "i")
    assert len(raw) == 1
    assert raw.to_list() == [7]


def test_equality_depends_on_code_and_data():
    data = struct.pack(">2i", 1, 2)
    assert RawList(data, "i") == RawList(data, "i")
    assert not RawList(data, "i") == RawList(data, "f")
    assert not RawList(data, "i") == RawList(struct.pack(">2i", 1, 3), "i")


@given(st.lists(INT32))
def test_int_roundtrip(values):
    data = struct.pack(f">{len(values)}i", *values)
    raw = RawList(data, "i")
    assert raw.to_list() == values
    assert raw.to_little_endian() == struct.pack(f"<{len(values)}i", *values)


@given(st.lists(INT64))
def test_long_roundtrip(values):
    data = struct.pack(f">{len(values)}q", *values)
    assert RawList(data, "q").to_list() == values
    assert len(RawList(data, "q")) == len(values)


@given(st.lists(st.floats(allow_nan=False, width=64)))
def test_double_little_endian_roundtrip(values):
    raw = RawList(struct.pack(f">{len(values)}d", *values), "d")
    little = raw.to_little_endian()
    assert list(struct.unpack(f"<{len(values)}d", little)) == values