"""A mutable byte buffer with slicing helpers and lenient base64 decoding."""

from __future__ import annotations

import re
from base64 import b64decode, b64encode
from typing import Iterable, Iterator, Union, overload

BytesSource = Union["ByteArray", bytes, bytearray, memoryview, str, Iterable[int]]

_BASE64_PREFIX = re.compile(rb"[A-Za-z0-9+/\-_]*")
_URLSAFE_TO_STANDARD = bytes.maketrans(b"-_", b"+/")


def _as_bytes(value: BytesSource) -> bytes:
    if isinstance(value, ByteArray):
        return bytes(value._data)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, int):
        raise TypeError("expected a bytes-like object, not int")
    return bytes(value)


def _byte_value(value: int | str | bytes) -> int:
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return value
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    if len(raw) != 1:
        raise ValueError(f"expected a single byte, got {value!r}")
    return raw[0]


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


class ByteArray:
    """A growable sequence of bytes.

    Strings are stored as their UTF-8 encoding. When ``size`` is given only
    the first ``size`` bytes of ``data`` are kept.
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable

    def __init__(self, data: BytesSource | None = None, size: int | None = None) -> None:
        buffer = bytearray(_as_bytes(data)) if data is not None else bytearray()
        if size is not None:
            _require_non_negative(size=size)
            del buffer[size:]
        self._data = buffer

    @classmethod
    def filled(cls, size: int, value: int | str | bytes = 0) -> ByteArray:
        """Return a buffer of ``size`` bytes, each set to ``value``."""
        _require_non_negative(size=size)
        return cls(bytes([_byte_value(value)]) * size)

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> ByteArray: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ByteArray(self._data[index])
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._data[index] = _as_bytes(value)
        else:
            self._data[index] = _byte_value(value)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteArray):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == other
        return NotImplemented

    def __add__(self, other: BytesSource) -> ByteArray:
        result = ByteArray(self)
        result += other
        return result

    def __iadd__(self, other: BytesSource) -> ByteArray:
        self._data.extend(_as_bytes(other))
        return self

    def __repr__(self) -> str:
        return f"ByteArray({bytes(self._data)!r})"

    # -- editing and querying ----------------------------------------------

    def mid(self, pos: int, length: int = 0) -> ByteArray:
        """Return ``length`` bytes from ``pos``; a length of 0 means to the end."""
        _require_non_negative(pos=pos, length=length)
        if pos >= len(self._data):
            return ByteArray()
        if length == 0:
            return ByteArray(self._data[pos:])
        return ByteArray(self._data[pos : pos + length])

    def left(self, count: int) -> ByteArray:
        """Return the first ``count`` bytes, or everything if there are fewer."""
        _require_non_negative(count=count)
        return ByteArray(self._data[:count])

    def remove(self, pos: int, length: int) -> ByteArray:
        """Remove up to ``length`` bytes starting at ``pos``; return ``self``."""
        _require_non_negative(pos=pos, length=length)
        del self._data[pos : pos + length]
        return self

    def clear(self) -> None:
        self._data.clear()

    def resize(self, size: int) -> None:
        """Truncate, or extend with zero bytes, to exactly ``size`` bytes."""
        _require_non_negative(size=size)
        current = len(self._data)
        if size < current:
            del self._data[size:]
        else:
            self._data.extend(bytes(size - current))

    def is_empty(self) -> bool:
        return not self._data

    def index_of(self, value: int | str | bytes) -> int:
        """Return the index of the first byte equal to ``value``, or -1."""
        return self._data.find(_byte_value(value))

    def starts_with(self, prefix: BytesSource) -> bool:
        return self._data.startswith(_as_bytes(prefix))

    def ends_with(self, suffix: BytesSource) -> bool:
        return self._data.endswith(_as_bytes(suffix))

    def to_str(self) -> str:
        """Decode as UTF-8; undecodable bytes survive as surrogate escapes."""
        return self._data.decode("utf-8", errors="surrogateescape")

    # -- base64 --------------------------------------------------------------

    def to_base64(self) -> ByteArray:
        """Encode with the standard alphabet and ``=`` padding."""
        return ByteArray(b64encode(self._data))

    @classmethod
    def from_base64(cls, base64: BytesSource) -> ByteArray:
        """Decode base64 leniently.

        Both the standard and the URL-safe alphabets are accepted. Decoding
        stops at the first padding or foreign character; a trailing lone
        character that cannot form a byte is dropped.
        """
        match = _BASE64_PREFIX.match(_as_bytes(base64))
        assert match is not None  # the pattern matches the empty string
        encoded = match.group().translate(_URLSAFE_TO_STANDARD)
        if len(encoded) % 4 == 1:
            encoded = encoded[:-1]
        encoded += b"=" * (-len(encoded) % 4)
        return cls(b64decode(encoded))