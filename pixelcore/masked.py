"""
Masked images: images flagging individual pixels as excluded from processing.

Two storage strategies sit behind the same interface:

* :class:`MaskedGrayImage` keeps a separate :class:`~pixelcore.image.Gray8Image`
  of identical size. The int8 minimum (-128) marks a pixel as unmasked, any
  other value as masked.
* :class:`MaskedRgbImage` uses the spare top byte of each packed pixel with
  the inverse convention: ``0xFF`` is unmasked, ``0x00`` is masked.
"""

from __future__ import annotations

from abc import abstractmethod

import numpy as np

from .decorated import DecoratedImage
from .errors import ImageTypeError, MaskSizeMismatchError
from .fixed_point import to_int32
from .image import Gray8Image, Gray32Image, RgbImage
from .pixel_format import PixelFormat
from .rgb import ALPHA_MASK, RGB_MASK

UNMASKED = -128
"Mask value of an unmasked pixel in a gray mask"

MASKED = 127
"Mask value written when masking a pixel in a gray mask"

_ALPHA = np.int32(to_int32(ALPHA_MASK))
_RGB = np.int32(RGB_MASK)


def _check_mask(base, mask) -> Gray8Image:
    if not isinstance(mask, Gray8Image):
        raise ImageTypeError(mask, Gray8Image.__name__)
    if mask.size != base.size:
        raise MaskSizeMismatchError(base, mask)
    return mask


class MaskedImage(DecoratedImage):
    """Common interface of all masked image variants."""

    @abstractmethod
    def is_masked(self, row: int, col: int) -> bool:
        """
        Defines if a pixel is masked.

        :param row: The row (y)
        :param col: The column (x)
        :return: True if the pixel is excluded from processing
        """

    @abstractmethod
    def set_mask(self, row: int, col: int) -> MaskedImage:
        """Masks a single pixel. Returns this image."""

    @abstractmethod
    def unset_mask(self, row: int, col: int) -> MaskedImage:
        """Unmasks a single pixel. Returns this image."""

    @property
    @abstractmethod
    def masked_pixels(self) -> np.ndarray:
        """Boolean ``height x width`` array, True where a pixel is masked"""

    @property
    @abstractmethod
    def mask(self) -> Gray8Image:
        """The mask as gray image using the gray mask convention"""


class MaskedGrayImage(MaskedImage):
    """
    Gray8 or Gray32 image with a separate Gray8 mask.

    :param base: The image data. It is copied.
    :param mask: The mask, copied as well. If omitted all pixels are
        unmasked.
    """

    def __init__(self, base: Gray8Image | Gray32Image, mask: Gray8Image | None = None):
        if not isinstance(base, (Gray8Image, Gray32Image)):
            raise ImageTypeError(base, "Gray8Image|Gray32Image")
        if mask is None:
            mask = Gray8Image(base.width, base.height, UNMASKED)
        else:
            mask = _check_mask(base, mask).clone()
        super().__init__(base.clone())
        self._mask = mask

    @classmethod
    def from_dimensions(
        cls,
        width: int,
        height: int,
        pixel_format: PixelFormat = PixelFormat.BYTE_GRAY,
    ) -> MaskedGrayImage:
        """
        Creates a zero-filled image with a zero-filled mask, so every pixel
        starts out masked.

        :param width: The width in pixels
        :param height: The height in pixels
        :param pixel_format: BYTE_GRAY or INT_GRAY
        :return: The new image
        """
        if pixel_format == PixelFormat.BYTE_GRAY:
            base = Gray8Image(width, height)
        elif pixel_format == PixelFormat.INT_GRAY:
            base = Gray32Image(width, height)
        else:
            raise ImageTypeError(PixelFormat(pixel_format).name, "BYTE_GRAY|INT_GRAY")
        return cls(base, Gray8Image(width, height))

    @property
    def mask(self) -> Gray8Image:
        """The mask image itself; modifying it modifies the mask"""
        return self._mask

    @property
    def masked_pixels(self) -> np.ndarray:
        return self._mask.pixels != UNMASKED

    def is_masked(self, row: int, col: int) -> bool:
        return bool(self._mask.buffer[row * self.width + col] != UNMASKED)

    def set_mask(self, row: int, col: int) -> MaskedGrayImage:
        self._mask.buffer[row * self.width + col] = MASKED
        return self

    def unset_mask(self, row: int, col: int) -> MaskedGrayImage:
        self._mask.buffer[row * self.width + col] = UNMASKED
        return self

    def clone(self) -> MaskedGrayImage:
        return MaskedGrayImage(self._base, self._mask)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self._mask == other._mask

    __hash__ = None

    def __str__(self) -> str:
        return f"{super().__str__()} ({self._mask})"


class MaskedRgbImage(MaskedImage):
    """
    RGB image storing its mask in the top byte of each pixel.

    Values written through :meth:`set_pixel` or :meth:`fill` carry their own
    top byte and therefore also define the pixel's mask state.

    :param base: The image data. It is copied.
    :param mask: Optional gray mask using the gray convention. If omitted all
        pixels are unmasked.
    """

    def __init__(self, base: RgbImage, mask: Gray8Image | None = None):
        if not isinstance(base, RgbImage):
            raise ImageTypeError(base, RgbImage.__name__)
        image = base.clone()
        data = image.buffer
        if mask is None:
            data |= _ALPHA
        else:
            masked = _check_mask(base, mask).buffer != UNMASKED
            data[masked] &= _RGB
            data[~masked] |= _ALPHA
        super().__init__(image)

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> MaskedRgbImage:
        """
        Creates a zero-filled image; since the top bytes are zero every pixel
        starts out masked.

        :param width: The width in pixels
        :param height: The height in pixels
        :return: The new image
        """
        image = cls(RgbImage(width, height))
        image.buffer[...] &= _RGB
        return image

    @property
    def mask(self) -> Gray8Image:
        """A copy of the mask converted to the gray mask convention"""
        values = np.where(self.masked_pixels.ravel(), MASKED, UNMASKED)
        return Gray8Image.from_buffer(self.width, self.height, values)

    @property
    def masked_pixels(self) -> np.ndarray:
        return (self.pixels & _ALPHA) == 0

    def is_masked(self, row: int, col: int) -> bool:
        return (int(self.buffer[row * self.width + col]) & ALPHA_MASK) == 0

    def set_mask(self, row: int, col: int) -> MaskedRgbImage:
        self.buffer[row * self.width + col] &= _RGB
        return self

    def unset_mask(self, row: int, col: int) -> MaskedRgbImage:
        self.buffer[row * self.width + col] |= _ALPHA
        return self

    def clone(self) -> MaskedRgbImage:
        image = MaskedRgbImage.__new__(MaskedRgbImage)
        DecoratedImage.__init__(image, self._base.clone())
        return image
