"""
Platform bridging.

The hosting application resolves a :class:`PlatformFactories` once at startup
(see :func:`resolve_factories`) and hands it to the code that needs to create
platform-backed images or file I/O. Library code never looks up factories on
its own.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import PIL.Image

from .config import settings
from .errors import IllegalParameterValueError
from .image import BufferImage, create_image
from .image_base import ImageBase
from .pixel_format import PixelFormat, PixelFormatTypes

logger = logging.getLogger(__name__)


class ImageFactory(ABC):
    """Creates images for a platform."""

    @abstractmethod
    def create_image(
        self, width: int, height: int, pixel_format: PixelFormatTypes
    ) -> ImageBase:
        """
        Creates a new, zero-filled image.

        :param width: The width in pixels
        :param height: The height in pixels
        :param pixel_format: The pixel format
        :return: The image
        """


class ImageIo(ABC):
    """Reads and writes image files. Implementations live outside the core."""

    @abstractmethod
    def read_file(self, path: str) -> ImageBase:
        """
        Loads an image.

        :param path: The file path
        :return: The image
        """

    @abstractmethod
    def write_file(self, image: ImageBase, quality: int, path: str) -> None:
        """
        Stores an image.

        :param image: The image to store
        :param quality: Encoder quality, 0..100
        :param path: The file path
        """


class DefaultImageFactory(ImageFactory):
    """Creates plain in-memory images for every supported pixel format."""

    def create_image(
        self, width: int, height: int, pixel_format: PixelFormatTypes
    ) -> BufferImage:
        return create_image(width, height, pixel_format)


class PilImageFactory(ImageFactory):
    """
    Creates images backed by a Pillow image as their platform handle.

    Only formats with a Pillow equivalent are supported.
    """

    PIL_MODES: dict[PixelFormat, str] = {
        PixelFormat.BYTE_GRAY: "L",
        PixelFormat.INT_RGB: "RGB",
    }

    def create_image(
        self, width: int, height: int, pixel_format: PixelFormatTypes
    ) -> BufferImage:
        image = create_image(width, height, pixel_format)
        mode = self.PIL_MODES.get(image.pixel_format)
        if mode is None:
            raise IllegalParameterValueError(image.pixel_format.name, "PIL")
        image.platform_image = PIL.Image.new(mode, image.size)
        return image


@dataclass(frozen=True)
class PlatformFactories:
    """The platform capabilities available to an application."""

    image_factory: ImageFactory
    image_io: ImageIo | None = None

    def create_image(
        self, width: int, height: int, pixel_format: PixelFormatTypes
    ) -> ImageBase:
        return self.image_factory.create_image(width, height, pixel_format)

    def create_image_io(self) -> ImageIo:
        """
        Returns the configured file I/O.

        :return: The image I/O implementation
        """
        if self.image_io is None:
            raise NotImplementedError("No image I/O configured for this platform")
        return self.image_io


IMAGE_FACTORIES: dict[str, Callable[[], ImageFactory]] = {
    "default": DefaultImageFactory,
    "pil": PilImageFactory,
}
"Known image factories by name"


def resolve_factories(
    name: str | None = None, image_io: ImageIo | None = None
) -> PlatformFactories:
    """
    Resolves the platform factories.

    :param name: Name of the image factory, see :data:`IMAGE_FACTORIES`.
        ``settings.IMAGE_FACTORY`` by default.
    :param image_io: Optional file I/O implementation
    :return: The factories
    """
    name = name if name is not None else settings.IMAGE_FACTORY
    factory_class = IMAGE_FACTORIES.get(name.lower())
    if factory_class is None:
        raise IllegalParameterValueError(name)
    logger.info("Using image factory %s", name)
    return PlatformFactories(image_factory=factory_class(), image_io=image_io)
