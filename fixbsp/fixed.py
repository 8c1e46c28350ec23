"""Signed fixed-point numbers with 8 fractional bits stored in a 32-bit integer."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS
_INT32_MIN = -(1 << 31)
_INT32_SPAN = 1 << 32

Number = Union[int, float, "Fixed"]


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _to_single(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


class Fixed:
    """A fixed-point number: a 32-bit raw value scaled by 2**-8."""

    __slots__ = ("_raw",)

    def __init__(self, value: Number = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
        elif isinstance(value, int):
            self._raw = _wrap32(value * _SCALE)
        elif isinstance(value, float):
            single = _to_single(value)
            if math.isnan(single) or math.isinf(single):
                raise ValueError(f"cannot represent {value!r} as a fixed-point number")
            self._raw = _wrap32(_round_half_away(single * _SCALE))
        else:
            raise TypeError(f"cannot build Fixed from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int) -> Fixed:
        """Build a value directly from its raw bits."""
        result = cls()
        result.raw = raw
        return result

    @property
    def raw(self) -> int:
        """The underlying 32-bit integer."""
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        self._raw = _wrap32(int(value))

    def to_float(self) -> float:
        """The value as a single-precision float."""
        return _to_single(float(self._raw)) / _SCALE

    def to_int(self) -> int:
        """The integer part, rounding toward negative infinity."""
        return self._raw >> FRACTIONAL_BITS

    def increment(self) -> Fixed:
        """Add the smallest step in place and return self."""
        self.raw = self._raw + 1
        return self

    def decrement(self) -> Fixed:
        """Subtract the smallest step in place and return self."""
        self.raw = self._raw - 1
        return self

    def post_increment(self) -> Fixed:
        """Add the smallest step in place and return the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> Fixed:
        """Subtract the smallest step in place and return the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    def copy(self) -> Fixed:
        """An independent copy of this value."""
        return Fixed.from_raw(self._raw)

    def __str__(self) -> str:
        return format(self.to_float(), ".6g")

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    @staticmethod
    def _coerce(other: object) -> Fixed | None:
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw == rhs._raw

    def __ne__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw != rhs._raw

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw < rhs._raw

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw <= rhs._raw

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw > rhs._raw

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._raw >= rhs._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __add__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed.from_raw(self._raw + rhs._raw)

    def __sub__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed.from_raw(self._raw - rhs._raw)

    def __mul__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        product = _wrap32(self._raw * rhs._raw)
        return Fixed.from_raw(_trunc_div(product, _SCALE))

    def __truediv__(self, other: object) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient = _trunc_div(self._raw, rhs._raw)
        return Fixed.from_raw(_trunc_div(quotient, _SCALE))


def fixed_min(a: Fixed, b: Fixed) -> Fixed:
    """Return a if it is strictly smaller than b, otherwise b."""
    return a if a < b else b


def fixed_max(a: Fixed, b: Fixed) -> Fixed:
    """Return a if it is strictly greater than b, otherwise b."""
    return a if a > b else b