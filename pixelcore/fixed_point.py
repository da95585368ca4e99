"""
Scaled-integer helpers shared by the fixed-point types.

Values are emulated as native 32-bit two's complement integers: every
arithmetic result is wrapped with :func:`to_int32` and integer division
rounds toward zero, so results match a 32-bit implementation bit for bit.
"""

from __future__ import annotations

import math

from .config import settings
from .errors import IllegalParameterValueError, NegativeSqrtError

SHIFT: int = settings.FIXED_POINT_SHIFT
"Number of fractional bits of a scaled integer"

SCALE: int = 1 << SHIFT
"The scale factor, ``2 ** SHIFT``"

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_UINT32_RANGE = 1 << 32


def to_int32(value: int) -> int:
    """
    Wraps an arbitrary integer into the signed 32-bit range.

    :param value: The value
    :return: The value as a native 32-bit int would hold it
    """
    return ((value - INT32_MIN) % _UINT32_RANGE) + INT32_MIN


def div_trunc(numerator: int, denominator: int) -> int:
    """
    Integer division rounding toward zero.

    :param numerator: The dividend
    :param denominator: The divisor, must not be zero
    :return: The truncated quotient
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def check_shift(n: int) -> int:
    """
    Validates a shift count.

    :param n: Number of bits
    :return: The count
    """
    if n < 0:
        raise IllegalParameterValueError(n)
    return n


def isqrt(n: int) -> int:
    """
    Integer square root (the floor of the true root).

    :param n: The radicand
    :return: ``floor(sqrt(n))``
    """
    if n < 0:
        raise NegativeSqrtError(n)
    return math.isqrt(n)
