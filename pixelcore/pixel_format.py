"""
Defines :class:`PixelFormat`, the closed enumeration of image pixel layouts.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

import numpy as np


class PixelFormat(IntEnum):
    """
    Pixel format tag of an image.

    The values 0 to 13 follow the common platform image type codes. Only
    a subset is backed by a concrete image variant, see :attr:`dtype`.
    """

    CUSTOM = 0
    "Custom or unknown layout"
    INT_RGB = 1
    "Packed 0x00RRGGBB in a 32-bit int, the top byte is spare"
    INT_ARGB = 2
    INT_ARGB_PRE = 3
    INT_BGR = 4
    BYTE_BGR = 5
    BYTE_ABGR = 6
    BYTE_ABGR_PRE = 7
    USHORT_565_RGB = 8
    USHORT_555_RGB = 9
    BYTE_GRAY = 10
    "Signed 8-bit grayscale"
    USHORT_GRAY = 11
    "Signed 16-bit grayscale"
    BYTE_BINARY = 12
    BYTE_INDEXED = 13
    INT_GRAY = 14
    "Signed 32-bit grayscale"
    COMPLEX32 = 15
    "Pairs of 32-bit fixed-point integers (real, imaginary)"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls.__members__[name]
        return None

    @property
    def dtype(self) -> np.dtype | None:
        """
        The numpy element type of the concrete image variant backing this
        format or None if no variant exists.
        """
        return _DTYPES.get(self)

    @property
    def is_packed_rgb(self) -> bool:
        """Defines if each pixel is stored as a single packed RGB int"""
        return self in _PACKED_RGB

    @property
    def is_gray(self) -> bool:
        return self in (PixelFormat.BYTE_GRAY, PixelFormat.USHORT_GRAY, PixelFormat.INT_GRAY)


_DTYPES: dict[PixelFormat, np.dtype] = {
    PixelFormat.BYTE_GRAY: np.dtype(np.int8),
    PixelFormat.USHORT_GRAY: np.dtype(np.int16),
    PixelFormat.INT_GRAY: np.dtype(np.int32),
    PixelFormat.INT_RGB: np.dtype(np.int32),
    PixelFormat.COMPLEX32: np.dtype(np.int32),
}

_PACKED_RGB = frozenset(
    {
        PixelFormat.INT_RGB,
        PixelFormat.INT_ARGB,
        PixelFormat.INT_ARGB_PRE,
        PixelFormat.INT_BGR,
    }
)

PixelFormatTypes = Union[PixelFormat, int, str]
"Values accepted wherever a pixel format is expected"
