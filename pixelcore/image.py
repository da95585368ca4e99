"""
Implements the concrete image variants, one class per pixel format, and the
:func:`create_image` factory dispatching between them.

All variants keep their pixels in a single flat numpy array of
``width * height`` elements of the variant's signed element type.
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Iterable

import numpy as np

from .complex32 import Complex
from .errors import IllegalParameterValueError, InvalidDimensionError
from .fixed_point import INT32_MIN, to_int32
from .image_base import ImageBase, check_element_range
from .pixel_format import PixelFormat, PixelFormatTypes
from .rgb import to_rgb

IMAGE_CLASSES: dict[PixelFormat, type["BufferImage"]] = {}
"The image variant implementing each supported pixel format"


def register_image(cls: type["BufferImage"]) -> type["BufferImage"]:
    """Decorator registering an image variant for its pixel format."""
    IMAGE_CLASSES[cls.PIXEL_FORMAT] = cls
    return cls


def _check_dimension(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise InvalidDimensionError(value)
    return int(value)


class BufferImage(ImageBase):
    """
    Base class of all images which own their pixel buffer.

    :param width: The width in pixels, >= 0
    :param height: The height in pixels, >= 0
    :param fill_value: The value every pixel is initialized with. Zero by
        default.
    :param platform_image: Opaque platform-native image to attach
    """

    PIXEL_FORMAT: ClassVar[PixelFormat]
    "The pixel format this class implements"
    ELEMENT_SHAPE: ClassVar[tuple[int, ...]] = ()
    "Shape of a single pixel within the buffer"

    def __init__(
        self,
        width: int,
        height: int,
        fill_value: Any | None = None,
        *,
        platform_image: Any | None = None,
    ):
        self._width = _check_dimension(width)
        self._height = _check_dimension(height)
        self._platform_image = platform_image
        self._buffer = np.zeros(
            (self._width * self._height,) + self.ELEMENT_SHAPE,
            dtype=self.PIXEL_FORMAT.dtype,
        )
        if fill_value is not None:
            self._buffer[...] = self._to_element(fill_value)

    @classmethod
    def from_buffer(
        cls,
        width: int,
        height: int,
        data: Iterable | np.ndarray,
        *,
        platform_image: Any | None = None,
    ) -> BufferImage:
        """
        Creates an image from existing pixel data.

        The data is copied and stored in the variant's element type.

        :param width: The width in pixels
        :param height: The height in pixels
        :param data: ``width * height`` pixel values in row order
        :param platform_image: Opaque platform-native image to attach
        :return: The new image
        """
        image = cls(width, height, platform_image=platform_image)
        values = cls._normalize_values(np.asarray(data, dtype=np.int64))
        if values.shape != image._buffer.shape:
            raise IllegalParameterValueError(values.shape, image)
        info = np.iinfo(image._buffer.dtype)
        if values.size and (values.min() < info.min or values.max() > info.max):
            raise IllegalParameterValueError(values.min(), values.max(), image)
        image._buffer[...] = values
        return image

    @classmethod
    def _normalize_values(cls, values: np.ndarray) -> np.ndarray:
        """Maps raw int64 input values into the stored representation"""
        return values

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixel_format(self) -> PixelFormat:
        return self.PIXEL_FORMAT

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    @property
    def platform_image(self) -> Any | None:
        return self._platform_image

    @platform_image.setter
    def platform_image(self, handle: Any | None) -> None:
        self._platform_image = handle

    def clone(self) -> BufferImage:
        image = copy.copy(self)
        image._buffer = self._buffer.copy()
        return image

    def _to_element(self, value: Any) -> Any:
        return check_element_range(value, self._buffer.dtype)

    def _from_element(self, element: Any) -> Any:
        return int(element)


@register_image
class Gray8Image(BufferImage):
    """
    Signed 8-bit grayscale image.

    Pixels range from -128 to 127; data originating from unsigned sources
    has to be biased or masked by the caller.
    """

    PIXEL_FORMAT = PixelFormat.BYTE_GRAY


@register_image
class Gray16Image(BufferImage):
    """Signed 16-bit grayscale image."""

    PIXEL_FORMAT = PixelFormat.USHORT_GRAY


@register_image
class Gray32Image(BufferImage):
    """Signed 32-bit grayscale image."""

    PIXEL_FORMAT = PixelFormat.INT_GRAY


@register_image
class RgbImage(BufferImage):
    """
    Packed RGB image.

    Each pixel is a signed 32-bit int laid out as ``0xAARRGGBB`` with the top
    byte conventionally zero. Pixel values may be passed as unsigned 32-bit
    literals (e.g. ``0xFF102030``); they are stored and returned as signed
    ints.
    """

    PIXEL_FORMAT = PixelFormat.INT_RGB

    @classmethod
    def from_channels(
        cls, width: int, height: int, r: int, g: int, b: int
    ) -> RgbImage:
        """
        Creates an image filled with a single color.

        :param width: The width in pixels
        :param height: The height in pixels
        :param r: Red as signed byte
        :param g: Green as signed byte
        :param b: Blue as signed byte
        :return: The new image
        """
        return cls(width, height, to_rgb(r, g, b))

    @classmethod
    def _normalize_values(cls, values: np.ndarray) -> np.ndarray:
        if values.size and (values.min() < INT32_MIN or values.max() > 0xFFFFFFFF):
            raise IllegalParameterValueError(values.min(), values.max())
        return ((values - INT32_MIN) % (1 << 32)) + INT32_MIN

    def _to_element(self, value: Any) -> Any:
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, np.integer))
            or not INT32_MIN <= value <= 0xFFFFFFFF
        ):
            raise IllegalParameterValueError(value, self._buffer.dtype)
        return to_int32(int(value))


@register_image
class Complex32Image(BufferImage):
    """
    Image of fixed-point complex values, e.g. a frequency domain
    representation.

    The buffer has the shape ``(width * height, 2)`` holding the real and
    imaginary part of each pixel.
    """

    PIXEL_FORMAT = PixelFormat.COMPLEX32
    ELEMENT_SHAPE = (2,)

    @property
    def real(self) -> np.ndarray:
        """View of the real parts"""
        return self._buffer[:, 0]

    @property
    def imag(self) -> np.ndarray:
        """View of the imaginary parts"""
        return self._buffer[:, 1]

    def _to_element(self, value: Any) -> Any:
        if not isinstance(value, Complex):
            raise IllegalParameterValueError(value, Complex.__name__)
        return np.array((value.real, value.imag), dtype=self._buffer.dtype)

    def _from_element(self, element: Any) -> Any:
        return Complex(int(element[0]), int(element[1]))


def create_image(
    width: int,
    height: int,
    pixel_format: PixelFormatTypes,
    fill_value: Any | None = None,
    platform_image: Any | None = None,
) -> BufferImage:
    """
    Creates a new image of the variant implementing a pixel format.

    :param width: The width in pixels, >= 0
    :param height: The height in pixels, >= 0
    :param pixel_format: The pixel format, as enum, code or name
    :param fill_value: Initial value of every pixel, zero by default
    :param platform_image: Opaque platform-native image to attach
    :return: The new image
    """
    try:
        pixel_format = PixelFormat(pixel_format)
    except ValueError:
        raise IllegalParameterValueError(pixel_format) from None
    image_class = IMAGE_CLASSES.get(pixel_format)
    if image_class is None:
        raise IllegalParameterValueError(pixel_format.name)
    return image_class(width, height, fill_value, platform_image=platform_image)


def clone_image(image: ImageBase) -> ImageBase:
    """
    Creates an independent deep copy of any image.

    :param image: The source image
    :return: The copy
    """
    return image.clone()
