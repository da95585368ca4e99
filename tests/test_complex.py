"""
Tests the fixed-point complex arithmetic of pixelcore.complex32.Complex
"""

import dataclasses

import pytest

from pixelcore import (
    SCALE,
    SHIFT,
    Complex,
    DivisionByZeroError,
    IllegalParameterValueError,
    NegativeSqrtError,
    ProductTooLargeError,
    SquareTooLargeError,
    isqrt,
)
from pixelcore.fixed_point import INT32_MAX, INT32_MIN, div_trunc, to_int32


class TestHelpers:
    """Tests the scaled integer helpers."""

    def test_scale_matches_shift(self):
        assert SHIFT == 16
        assert SCALE == 1 << SHIFT

    def test_to_int32_wraps(self):
        assert to_int32(INT32_MAX + 1) == INT32_MIN
        assert to_int32(INT32_MIN - 1) == INT32_MAX
        assert to_int32(0xFFFFFFFF) == -1
        assert to_int32(12345) == 12345

    def test_div_trunc_rounds_toward_zero(self):
        assert div_trunc(7, 2) == 3
        assert div_trunc(-7, 2) == -3
        assert div_trunc(7, -2) == -3
        assert div_trunc(-7, -2) == 3

    def test_isqrt(self):
        assert isqrt(0) == 0
        assert isqrt(24) == 4
        assert isqrt(25) == 5
        with pytest.raises(NegativeSqrtError):
            isqrt(-1)


class TestAdditive:
    def test_add_and_sub(self):
        a = Complex(3, -4)
        b = Complex(10, 20)
        assert a + b == Complex(13, 16)
        assert a.add(b) == Complex(13, 16)
        assert b - a == Complex(7, 24)
        assert b.sub(a) == Complex(7, 24)

    def test_add_wraps_like_int32(self):
        assert Complex(INT32_MAX, 0) + Complex(1, 0) == Complex(INT32_MIN, 0)

    def test_conjugate_and_negation(self):
        assert Complex(3, 4).conjugate() == Complex(3, -4)
        assert -Complex(3, -4) == Complex(-3, 4)

    def test_operations_do_not_mutate(self):
        a = Complex(1, 2)
        a + Complex(5, 5)
        a.conjugate()
        assert a == Complex(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.real = 5


class TestMultiplicative:
    def test_multiply(self):
        assert Complex(3, 4) * Complex(1, 2) == Complex(-5, 10)
        assert Complex(3, 4).multiply(Complex(1, 2)) == Complex(-5, 10)

    def test_multiply_by_scalar_scales_both_components(self):
        assert Complex(2, 3) * 4 == Complex(8, 12)
        assert 4 * Complex(2, 3) == Complex(8, 12)

    def test_divide_inverts_multiply(self):
        a = Complex(3, 4)
        b = Complex(1, 2)
        assert (a * b) / b == a
        assert a.multiply(b).divide(b) == a

    def test_divide_scaled_operands(self):
        a = Complex.from_float(0.5, 0.25)
        b = Complex(2, 1)
        assert a == Complex(SCALE // 2, SCALE // 4)
        assert (a * b).divide(b) == a

    def test_divide_shifts_large_divisor(self):
        """
        A divisor reaching SCALE is shifted right first, the quotient is
        compensated afterwards
        """
        a = Complex(3 << SHIFT, 4 << SHIFT)
        b = Complex(1 << SHIFT, 0)
        assert a.divide(b) == Complex(3, 4)

    def test_divide_by_zero_complex(self):
        with pytest.raises(ProductTooLargeError):
            Complex(1, 1).divide(Complex(0, 0))

    def test_divide_by_scalar(self):
        assert Complex(10, -20).divide_by_scalar(5) == Complex(2, -4)
        assert Complex(-7, 7) / 2 == Complex(-3, 3)

    @pytest.mark.parametrize("value", [Complex(0, 0), Complex(1, -1), Complex(SCALE, SCALE)])
    def test_divide_by_scalar_zero(self, value):
        with pytest.raises(DivisionByZeroError):
            value.divide_by_scalar(0)
        with pytest.raises(ZeroDivisionError):
            value / 0


class TestSquareAndMagnitude:
    def test_square_of_real(self):
        for re in (0, 1, -7, 1000, SCALE // 2):
            assert Complex(re, 0).square() == re * re

    def test_square_too_large(self):
        with pytest.raises(SquareTooLargeError):
            Complex(SCALE + 1, 0).square()
        with pytest.raises(SquareTooLargeError):
            Complex(0, -SCALE - 1).square()

    def test_square_at_scale_wraps(self):
        # 2**16 squared overflows a 32-bit int to zero
        assert Complex(SCALE, 0).square() == 0

    def test_magnitude_pythagorean_triple(self):
        assert Complex(3, 4).magnitude() == 5
        assert abs(Complex(3, 4)) == 5
        assert Complex(3 << SHIFT, 4 << SHIFT).magnitude() == 5 << SHIFT

    def test_magnitude_with_zero_component(self):
        assert Complex(-5, 0).magnitude() == 5
        assert Complex(0, -4 * SCALE).magnitude() == 4 * SCALE

    def test_magnitude_of_large_values_loses_precision(self):
        value = Complex(1 << 20, 1 << 20)
        # (16, 16) after shifting: isqrt(512) == 22
        assert value.magnitude() == 22 << SHIFT


class TestShifts:
    def test_shift_both_components(self):
        assert Complex(1, -1).lsh(4) == Complex(16, -16)
        assert Complex(1, -1) << 4 == Complex(16, -16)
        assert Complex(32, -32).rsh(4) == Complex(2, -2)

    def test_right_shift_is_arithmetic(self):
        assert Complex(-3, 3) >> 1 == Complex(-2, 1)

    def test_negative_shift_rejected(self):
        with pytest.raises(IllegalParameterValueError):
            Complex(1, 1).rsh(-1)


def test_conversions():
    value = Complex(7, -2)
    assert str(value) == "(7, -2)"
    assert int(value) == 7
    assert Complex.from_float(1.5, -0.5).to_float() == complex(1.5, -0.5)
