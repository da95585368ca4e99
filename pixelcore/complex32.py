"""
Implements :class:`Complex`, a fixed-point complex number stored as a pair of
32-bit scaled integers.

Both components are pre-multiplied by :data:`~pixelcore.fixed_point.SCALE`.
Multiplicative operations risk overflow once operands approach ``SCALE``;
division and magnitude avoid it by right-shifting the operands by ``SHIFT``
bits first and compensating the result afterwards. The exact order of these
shifts is part of the numeric contract that transform stages rely on.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import fixed_point
from .errors import (
    DivisionByZeroError,
    ProductTooLargeError,
    SquareTooLargeError,
)
from .fixed_point import check_shift, div_trunc, isqrt, to_int32


@dataclass(frozen=True)
class Complex:
    """
    Immutable fixed-point complex value.

    All operations return new instances; arithmetic wraps like native 32-bit
    integers and performs no overflow protection unless stated otherwise.
    """

    real: int = 0
    imag: int = 0

    def __post_init__(self):
        object.__setattr__(self, "real", to_int32(int(self.real)))
        object.__setattr__(self, "imag", to_int32(int(self.imag)))

    @classmethod
    def from_float(cls, real: float, imag: float = 0.0) -> Complex:
        """
        Creates a scaled value from floating point components.

        :param real: Real part
        :param imag: Imaginary part
        :return: The value, rounded to the nearest scaled integer
        """
        return cls(round(real * fixed_point.SCALE), round(imag * fixed_point.SCALE))

    def to_float(self) -> complex:
        """Returns the unscaled value as a builtin complex number."""
        return complex(self.real / fixed_point.SCALE, self.imag / fixed_point.SCALE)

    # ------------------------------------------------------------------
    # Additive operations
    # ------------------------------------------------------------------

    def add(self, other: Complex) -> Complex:
        return Complex(self.real + other.real, self.imag + other.imag)

    def sub(self, other: Complex) -> Complex:
        return Complex(self.real - other.real, self.imag - other.imag)

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imag)

    # ------------------------------------------------------------------
    # Multiplicative operations
    # ------------------------------------------------------------------

    def multiply(self, other: Complex | int) -> Complex:
        """
        Complex multiplication, or scaling of both components by an int.

        Operands must be pre-scaled by the caller so the products stay within
        32 bits.

        :param other: Complex factor or integer scalar
        :return: The product
        """
        if isinstance(other, Complex):
            real = to_int32(self.real * other.real) - to_int32(self.imag * other.imag)
            imag = to_int32(self.real * other.imag) + to_int32(self.imag * other.real)
            return Complex(real, imag)
        return Complex(self.real * other, self.imag * other)

    def divide_by_scalar(self, n: int) -> Complex:
        """
        Divides both components by an integer, rounding toward zero.

        :param n: The divisor
        :return: The quotient
        """
        if n == 0:
            raise DivisionByZeroError(self, n)
        return Complex(div_trunc(self.real, n), div_trunc(self.imag, n))

    def divide(self, other: Complex) -> Complex:
        """
        Complex division computed as ``self * conj(other) / |other|**2``.

        If either component of the divisor reaches ``SCALE`` the divisor is
        right-shifted by ``SHIFT`` bits before squaring. Multiplying by the
        shifted divisor and dividing by its square shifts the quotient left by
        ``SHIFT`` bits, so the result is shifted back to compensate.

        :param other: The divisor
        :return: The quotient
        """
        shift = 0
        divisor = other
        if abs(divisor.real) >= fixed_point.SCALE or abs(divisor.imag) >= fixed_point.SCALE:
            divisor = divisor.rsh(fixed_point.SHIFT)
            shift = fixed_point.SHIFT
        square = divisor.square()
        if square == 0:
            raise ProductTooLargeError(self, divisor)
        real = to_int32(
            to_int32(self.real * divisor.real) + to_int32(self.imag * divisor.imag)
        )
        imag = to_int32(
            to_int32(self.imag * divisor.real) - to_int32(self.real * divisor.imag)
        )
        return Complex(div_trunc(real, square) >> shift, div_trunc(imag, square) >> shift)

    def square(self) -> int:
        """
        Squared magnitude ``real**2 + imag**2``.

        :return: The square, wrapped to 32 bits
        """
        if abs(self.real) > fixed_point.SCALE or abs(self.imag) > fixed_point.SCALE:
            raise SquareTooLargeError(self)
        return to_int32(to_int32(self.real * self.real) + to_int32(self.imag * self.imag))

    def magnitude(self) -> int:
        """
        Magnitude (integer square root of the square).

        Components above ``SCALE / 2`` are shifted right by ``SHIFT`` bits
        before squaring and the root is shifted back afterwards, extending the
        range beyond what :meth:`square` accepts at the cost of precision.

        :return: The magnitude in the same scale as the components
        """
        if self.real == 0 or self.imag == 0:
            # exact when one component vanishes
            return to_int32(abs(self.real) + abs(self.imag))
        half_scale = fixed_point.SCALE >> 1
        if abs(self.real) > half_scale or abs(self.imag) > half_scale:
            real = self.real >> fixed_point.SHIFT
            imag = self.imag >> fixed_point.SHIFT
            square = to_int32(to_int32(real * real) + to_int32(imag * imag))
            return to_int32(isqrt(square) << fixed_point.SHIFT)
        return isqrt(self.square())

    # ------------------------------------------------------------------
    # Shifts
    # ------------------------------------------------------------------

    def lsh(self, n: int) -> Complex:
        check_shift(n)
        return Complex(self.real << n, self.imag << n)

    def rsh(self, n: int) -> Complex:
        """Arithmetic right shift of both components."""
        check_shift(n)
        return Complex(self.real >> n, self.imag >> n)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Complex | int) -> Complex:
        if not isinstance(other, (Complex, int)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> Complex:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Complex | int) -> Complex:
        if isinstance(other, Complex):
            return self.divide(other)
        if isinstance(other, int):
            return self.divide_by_scalar(other)
        return NotImplemented

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __abs__(self) -> int:
        return self.magnitude()

    def __lshift__(self, n: int) -> Complex:
        return self.lsh(n)

    def __rshift__(self, n: int) -> Complex:
        return self.rsh(n)

    def __int__(self) -> int:
        return self.real

    def __str__(self) -> str:
        return f"({self.real}, {self.imag})"
