"""
Offset images: sub-images remembering where they were extracted from.
"""

from __future__ import annotations

from .decorated import DecoratedImage
from .errors import ImageTypeError
from .geometry import Point
from .image import Gray32Image, RgbImage


class OffsetImage(DecoratedImage):
    """
    A Gray32 or RGB image tagged with the origin of the region it was taken
    from in a larger image.

    The offset is pure metadata and does not affect the pixel buffer.

    :param base: The image data. It is copied.
    :param x_offset: Column of the region's top-left corner
    :param y_offset: Row of the region's top-left corner
    """

    def __init__(self, base: Gray32Image | RgbImage, x_offset: int = 0, y_offset: int = 0):
        if not isinstance(base, (Gray32Image, RgbImage)):
            raise ImageTypeError(base, "Gray32Image|RgbImage")
        super().__init__(base.clone())
        self.x_offset = x_offset
        self.y_offset = y_offset

    @property
    def offset(self) -> Point:
        """The region's origin as point"""
        return Point(self.x_offset, self.y_offset)

    @offset.setter
    def offset(self, value: Point) -> None:
        self.x_offset = value.x
        self.y_offset = value.y

    def clone(self) -> OffsetImage:
        return OffsetImage(self._base, self.x_offset, self.y_offset)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.offset == other.offset

    __hash__ = None

    def __str__(self) -> str:
        return (
            f"{type(self).__name__} ({self.width}x{self.height},"
            f"{self.x_offset},{self.y_offset})"
        )
