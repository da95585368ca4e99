"""
Base class for images decorating another image with extra information.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .image_base import ImageBase
from .pixel_format import PixelFormat


class DecoratedImage(ImageBase):
    """
    An image wrapping a base image it exclusively owns.

    Size, pixel format, buffer and pixel conversion are those of the base
    image; subclasses add their own state (mask, offset) on top.

    :param base: The wrapped image. Ownership passes to the decoration.
    """

    def __init__(self, base: ImageBase):
        self._base = base

    @property
    def base(self) -> ImageBase:
        """The wrapped image"""
        return self._base

    @property
    def width(self) -> int:
        return self._base.width

    @property
    def height(self) -> int:
        return self._base.height

    @property
    def pixel_format(self) -> PixelFormat:
        return self._base.pixel_format

    @property
    def buffer(self) -> np.ndarray:
        return self._base.buffer

    @property
    def platform_image(self) -> Any | None:
        return self._base.platform_image

    def _to_element(self, value: Any) -> Any:
        return self._base._to_element(value)

    def _from_element(self, element: Any) -> Any:
        return self._base._from_element(element)
