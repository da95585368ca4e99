"""
Implements :class:`ImageBase`, the capability every typed image provides,
independent of how its pixels are stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from .errors import BoundsOutsideImageError, IllegalParameterValueError, ImageTypeError
from .geometry import Rect
from .pixel_format import PixelFormat


class ImageBase(ABC):
    """
    Abstract typed image.

    A typed image has a fixed size, a pixel format and a flat, contiguous
    pixel buffer of ``width * height`` elements stored row by row. Decorated
    images (masked, offset) implement the same interface by delegating to the
    image they wrap.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        """The image's width in pixels"""

    @property
    @abstractmethod
    def height(self) -> int:
        """The image's height in pixels"""

    @property
    @abstractmethod
    def pixel_format(self) -> PixelFormat:
        """The pixel format tag"""

    @property
    @abstractmethod
    def buffer(self) -> np.ndarray:
        """
        The flat pixel buffer. Its first dimension has ``width * height``
        entries. Modifying it modifies the image.
        """

    @property
    @abstractmethod
    def platform_image(self) -> Any | None:
        """Opaque platform-native image backing this image, if any"""

    @abstractmethod
    def clone(self) -> ImageBase:
        """
        Creates an independent deep copy of the image.

        :return: The copy, owning its own buffers
        """

    @abstractmethod
    def _to_element(self, value: Any) -> Any:
        """Converts a pixel value into what is stored in the buffer"""

    @abstractmethod
    def _from_element(self, element: Any) -> Any:
        """Converts a buffer entry into the public pixel value"""

    @property
    def size(self) -> tuple[int, int]:
        """The image's size as (width, height)"""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """
        A ``height x width`` view of the buffer (complex images have a
        trailing dimension of two). Modifying it modifies the image.
        """
        buffer = self.buffer
        return buffer.reshape((self.height, self.width) + buffer.shape[1:])

    def get_pixel(self, row: int, col: int) -> Any:
        """
        Returns the pixel value at a given position.

        Bounds are not validated beyond the range of the flat buffer.

        :param row: The row (y)
        :param col: The column (x)
        :return: The pixel value
        """
        return self._from_element(self.buffer[row * self.width + col])

    def set_pixel(self, row: int, col: int, value: Any) -> None:
        """
        Sets the pixel value at a given position.

        Bounds are not validated beyond the range of the flat buffer.

        :param row: The row (y)
        :param col: The column (x)
        :param value: The new value
        """
        self.buffer[row * self.width + col] = self._to_element(value)

    def fill(self, rect: Rect, value: Any) -> ImageBase:
        """
        Sets every pixel in ``[rect.top, rect.bottom) x [rect.left, rect.right)``.

        :param rect: The region to fill, must lie within the image
        :param value: The pixel value
        :return: This image
        """
        if not rect.is_within(self.width, self.height):
            raise BoundsOutsideImageError(rect, self)
        self.pixels[rect.top : rect.bottom, rect.left : rect.right] = self._to_element(value)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageBase) or type(self) is not type(other):
            return False
        return (
            self.size == other.size
            and self.pixel_format == other.pixel_format
            and np.array_equal(self.buffer, other.buffer)
        )

    __hash__ = None

    def __str__(self) -> str:
        return f"{type(self).__name__} ({self.width}x{self.height})"

    def __repr__(self) -> str:
        return f"<{self}>"


def check_element_range(value: Any, dtype: np.dtype) -> int:
    """
    Validates an integer pixel value against the range of a buffer type.

    :param value: The value
    :param dtype: The integer buffer type
    :return: The value as int
    """
    info = np.iinfo(dtype)
    if not isinstance(value, (int, np.integer)) or not info.min <= value <= info.max:
        raise IllegalParameterValueError(value, dtype)
    return int(value)


def require_format(image: ImageBase, *formats: PixelFormat) -> ImageBase:
    """
    Ensures an image has one of the expected pixel formats.

    :param image: The image to check
    :param formats: The accepted formats
    :return: The image
    """
    if image.pixel_format not in formats:
        expected = "|".join(f.name for f in formats)
        raise ImageTypeError(image, expected)
    return image
