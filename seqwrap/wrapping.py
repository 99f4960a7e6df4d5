"""32-bit wrapping sequence numbers and conversion to 64-bit absolute numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, overload

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MASK64 = (1 << 64) - 1
_HALF32 = 1 << 31


def _as_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed 32-bit integer."""
    value &= _MASK32
    return value - _MOD32 if value >= _HALF32 else value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer relative to an arbitrary initial sequence number.

    Values outside the 32-bit range are reduced modulo 2**32.
    """

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", int(self.raw_value) & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step ``other`` places past this point, wrapping around."""
        if isinstance(other, WrappingInt32) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    @overload
    def __sub__(self, other: WrappingInt32) -> int: ...

    @overload
    def __sub__(self, other: int) -> WrappingInt32: ...

    def __sub__(self, other: Union[WrappingInt32, int]) -> Union[int, WrappingInt32]:
        """Signed offset from ``other`` to self, or a step back by an integer.

        The offset is negative when the number of decrements needed is less
        than or equal to the number of increments.
        """
        if isinstance(other, WrappingInt32):
            return _as_int32(self.raw_value - other.raw_value)
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute 64-bit sequence number into a wrapping one."""
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` closest to ``checkpoint``."""
    checkpoint &= _MASK64
    offset = n - wrap(checkpoint, isn)
    result = checkpoint + offset
    if result < 0:
        result += _MOD32
    return result & _MASK64