"""A mutable set of bit flags built from enum members."""

from __future__ import annotations

import enum
from typing import Union

FlagSource = Union["Flags", enum.Enum]


def _flag_value(value: object) -> int | None:
    if isinstance(value, Flags):
        return value._value
    if isinstance(value, enum.Enum):
        return int(value.value)
    return None


def _require_flag_value(value: object) -> int:
    result = _flag_value(value)
    if result is None:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise TypeError(f"expected an enum member or Flags, got {type(value).__name__}")
    return result


class Flags:
    """Combination of enum members whose values are bit masks.

    Bitwise operators combine flags with other flags or enum members;
    arithmetic is deliberately not supported.
    """

    __slots__ = ("_value",)
    __hash__ = None  # mutable

    def __init__(self, flag: FlagSource | None = None) -> None:
        self._value = 0 if flag is None else _require_flag_value(flag)

    @classmethod
    def from_int(cls, value: int) -> Flags:
        flags = cls()
        flags._value = int(value)
        return flags

    def to_int(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def test_flag(self, flag: FlagSource | int) -> bool:
        """True when every bit of ``flag`` is set; a zero flag matches only no flags."""
        bits = _require_flag_value(flag)
        return (self._value & bits) == bits and (bits != 0 or self._value == bits)

    def set_flag(self, flag: FlagSource | int, enabled: bool = True) -> Flags:
        """Set or clear ``flag`` in place and return ``self``."""
        bits = _require_flag_value(flag)
        if enabled:
            self._value |= bits
        else:
            self._value &= ~bits
        return self

    def __and__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value & bits)

    def __or__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value | bits)

    def __xor__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        return Flags.from_int(self._value ^ bits)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __iand__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        self._value &= bits
        return self

    def __ior__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        self._value |= bits
        return self

    def __ixor__(self, other: object) -> Flags:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        self._value ^= bits
        return self

    def __invert__(self) -> Flags:
        return Flags.from_int(~self._value)

    def __eq__(self, other: object) -> bool:
        bits = _flag_value(other)
        if bits is None:
            return NotImplemented
        return self._value == bits

    def __repr__(self) -> str:
        return f"Flags.from_int({self._value:#x})"