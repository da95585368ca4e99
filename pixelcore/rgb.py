"""
Helpers for packed RGB pixels.

An RGB pixel is a signed 32-bit int laid out as ``0xAARRGGBB``. The top byte
is spare: plain RGB images keep it zero and masked RGB images use it as the
mask. Channel values are exchanged as signed bytes (-128..127), the stored
unsigned channel being the signed value plus 128.
"""

from __future__ import annotations

from .errors import IllegalParameterValueError
from .fixed_point import to_int32

ALPHA_MASK = 0xFF000000
RGB_MASK = 0x00FFFFFF

_BYTE_BIAS = 128


def _channel(value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise IllegalParameterValueError(value)
    return value


def to_rgb_unsigned(r: int, g: int, b: int) -> int:
    """
    Packs unsigned channel values into an RGB pixel.

    :param r: Red, 0..255
    :param g: Green, 0..255
    :param b: Blue, 0..255
    :return: The packed pixel with a zero top byte
    """
    r, g, b = (_channel(c, 0, 255) for c in (r, g, b))
    return (r << 16) | (g << 8) | b


def to_rgb(r: int, g: int, b: int) -> int:
    """
    Packs signed byte channel values into an RGB pixel.

    :param r: Red, -128..127
    :param g: Green, -128..127
    :param b: Blue, -128..127
    :return: The packed pixel with a zero top byte
    """
    r, g, b = (_channel(c, -_BYTE_BIAS, _BYTE_BIAS - 1) for c in (r, g, b))
    return to_rgb_unsigned(r + _BYTE_BIAS, g + _BYTE_BIAS, b + _BYTE_BIAS)


def get_r(rgb: int) -> int:
    """Returns the red channel as signed byte"""
    return ((rgb >> 16) & 0xFF) - _BYTE_BIAS


def get_g(rgb: int) -> int:
    """Returns the green channel as signed byte"""
    return ((rgb >> 8) & 0xFF) - _BYTE_BIAS


def get_b(rgb: int) -> int:
    """Returns the blue channel as signed byte"""
    return (rgb & 0xFF) - _BYTE_BIAS


def get_alpha(rgb: int) -> int:
    """Returns the spare top byte, 0..255"""
    return (rgb >> 24) & 0xFF


def with_alpha(rgb: int, alpha: int) -> int:
    """
    Replaces the spare top byte of a pixel.

    :param rgb: The packed pixel
    :param alpha: New top byte, 0..255
    :return: The pixel as signed 32-bit int
    """
    _channel(alpha, 0, 255)
    return to_int32((rgb & RGB_MASK) | (alpha << 24))


def rgb_to_string(rgb: int) -> str:
    """
    Renders a pixel for diagnostics.

    :param rgb: The packed pixel
    :return: E.g. ``[r=127,g=-128,b=0]`` with signed channel values
    """
    return f"[r={get_r(rgb)},g={get_g(rgb)},b={get_b(rgb)}]"
