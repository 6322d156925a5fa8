"""Numbers kept in their big-endian wire form until they are needed."""

import struct


class RawList:
    """A run of big-endian numbers of one struct format code."""

    __slots__ = ("_data", "_code", "_size")

    def __init__(self, data, code):
        self._data = bytes(data)
        self._code = code
        self._size = struct.calcsize(">" + code)

    @property
    def code(self):
        """The struct format code of each item."""
        return self._code

    def __len__(self):
        return len(self._data) // self._size

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other):
        if isinstance(other, RawList):
            return self._code == other._code and self._data == other._data
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"RawList({self.to_list()!r}, code={self._code!r})"

    def to_list(self):
        """Return the decoded numbers."""
        return list(struct.unpack_from(f">{len(self)}{self._code}", self._data))

    def to_little_endian(self):
        """Return the numbers as little-endian bytes."""
        chunks = zip(*[iter(self._data)] * self._size)
        return bytes(byte for chunk in chunks for byte in reversed(chunk))

    def as_big_endian(self):
        """Return the numbers as they are stored, big-endian."""
        return self._data