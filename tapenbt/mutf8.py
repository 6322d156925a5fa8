"""MUTF-8, the string encoding used inside NBT."""

import codecs
import re

_LOSSY_HANDLER = "tapenbt-mutf8-lossy"
_SURROGATE = re.compile("[\ud800-\udfff]")


def _lossy_handler(exc):
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    chunk = bytes(exc.object[exc.start:exc.start + 3])
    if len(chunk) == 3 and chunk[0] == 0xED and 0xA0 <= chunk[1] <= 0xBF and 0x80 <= chunk[2] <= 0xBF:
        return chunk.decode("utf-8", "surrogatepass"), exc.start + 3
    return "\ufffd", exc.end


codecs.register_error(_LOSSY_HANDLER, _lossy_handler)


def _encode_char(char):
    code_point = ord(char)
    if code_point == 0:
        return b"\xc0\x80"
    if code_point >= 0x10000:
        offset = code_point - 0x10000
        high = chr(0xD800 + (offset >> 10))
        low = chr(0xDC00 + (offset & 0x3FF))
        return (high + low).encode("utf-8", "surrogatepass")
    return char.encode("utf-8", "surrogatepass")


def _join_surrogates(text, errors):
    if not _SURROGATE.search(text):
        return text
    return text.encode("utf-16-be", "surrogatepass").decode("utf-16-be", errors)


def is_plain_ascii(data):
    """Return whether no byte of ``data`` has its top bit set."""
    return bytes(data).isascii()


def encode(text):
    """Encode ``text`` as MUTF-8 bytes."""
    if text.isascii() and "\0" not in text:
        return text.encode("ascii")
    return b"".join(_encode_char(char) for char in text)


def decode(data):
    """Decode MUTF-8 bytes, raising ``UnicodeDecodeError`` on invalid data."""
    raw = bytes(data).replace(b"\xc0\x80", b"\x00")
    return _join_surrogates(raw.decode("utf-8", "surrogatepass"), "strict")


def decode_lossy(data):
    """Decode MUTF-8 bytes, replacing invalid sequences with U+FFFD."""
    raw = bytes(data).replace(b"\xc0\x80", b"\x00")
    return _join_surrogates(raw.decode("utf-8", _LOSSY_HANDLER), "replace")


class Mutf8Str:
    """An immutable MUTF-8 string, kept as its encoded bytes."""

    __slots__ = ("_data",)

    def __init__(self, data=b""):
        self._data = bytes(data)

    @classmethod
    def from_str(cls, text):
        """Build a string from Python text."""
        return cls(encode(text))

    def to_str(self):
        """Return the text, or an empty string if the bytes are not valid MUTF-8."""
        if is_plain_ascii(self._data):
            return self._data.decode("ascii")
        try:
            return decode(self._data)
        except UnicodeDecodeError:
            return ""

    def to_string_lossy(self):
        """Return the text with invalid sequences replaced by U+FFFD."""
        return decode_lossy(self._data)

    def as_bytes(self):
        """Return the encoded bytes."""
        return self._data

    def __len__(self):
        return len(self._data)

    def __bytes__(self):
        return self._data

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return "m" + repr(self.to_str())

    def __eq__(self, other):
        if isinstance(other, Mutf8Str):
            return self._data == other._data
        return NotImplemented

    def __hash__(self):
        return hash(self._data)