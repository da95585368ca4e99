# PixelCore Pipeline - Stage
"""
Single-slot pipeline stages.

A stage buffers at most one output image::

    EMPTY --push--> READY --pop--> EMPTY

A failing push restores the state the stage had before the push, so no
partial output is ever published. Stages are not thread-safe; use one
instance per worker.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar

from pixelcore.errors import NoResultAvailableError
from pixelcore.image_base import ImageBase, require_format
from pixelcore.pixel_format import PixelFormat

logger = logging.getLogger(__name__)


class PipelineStage(ABC):
    """
    Base class of all pipeline stages.

    Subclasses implement :meth:`process`, compute their result from the input
    image and publish it with :meth:`set_output`. They can restrict their
    input by declaring ``accepted_formats``.

    Example:
        class Invert(PipelineStage):
            accepted_formats = (PixelFormat.BYTE_GRAY,)

            def process(self, image):
                result = image.clone()
                result.buffer[...] = ~result.buffer
                self.set_output(result)
    """

    accepted_formats: ClassVar[tuple[PixelFormat, ...] | None] = None
    "Pixel formats this stage accepts, None accepts any"

    def __init__(self) -> None:
        self._ready: bool = False
        self._output: ImageBase | None = None

    @abstractmethod
    def process(self, image: ImageBase) -> None:
        """
        Transforms an input image and publishes the result via
        :meth:`set_output`.

        :param image: The input image
        """

    def push(self, image: ImageBase) -> None:
        """
        Supplies an input image to the stage.

        On success the stage is ready and holds the result. If the input is
        rejected or processing raises, the previous state is restored and the
        error is propagated.

        :param image: The input image
        """
        ready, output = self._ready, self._output
        try:
            if self.accepted_formats is not None:
                require_format(image, *self.accepted_formats)
            self.process(image)
        except Exception:
            logger.debug("Push into %s failed, restoring state", self)
            self._ready, self._output = ready, output
            raise
        logger.debug("Pushed %s into %s", image, self)

    @property
    def is_empty(self) -> bool:
        """True if no output is buffered"""
        return not self._ready

    def pop(self) -> ImageBase:
        """
        Takes the buffered output, leaving the stage empty.

        :return: The output image
        """
        if not self._ready:
            raise NoResultAvailableError(self)
        result = self._output
        self._output = None
        self._ready = False
        logger.debug("Popped %s from %s", result, self)
        return result

    def set_output(self, image: ImageBase) -> None:
        """
        Publishes a result. Only to be called from :meth:`process`.

        :param image: The output image
        """
        self._output = image
        self._ready = True

    def __call__(self, image: ImageBase) -> ImageBase:
        """
        Pushes an image and pops the result.

        :param image: The input image
        :return: The output image
        """
        self.push(image)
        return self.pop()

    def __str__(self) -> str:
        return type(self).__name__


class FunctionStage(PipelineStage):
    """
    Stage applying a plain function to each input image.

    :param func: Function mapping the input image to the output image
    :param name: Name used in diagnostics, the function's name by default
    :param accepted_formats: Pixel formats the function accepts, any if None
    """

    def __init__(
        self,
        func: Callable[[ImageBase], ImageBase],
        name: str | None = None,
        accepted_formats: tuple[PixelFormat, ...] | None = None,
    ):
        super().__init__()
        self.func = func
        self.name = name or getattr(func, "__name__", type(self).__name__)
        if accepted_formats is not None:
            self.accepted_formats = tuple(accepted_formats)

    def process(self, image: ImageBase) -> None:
        self.set_output(self.func(image))

    def __str__(self) -> str:
        return self.name
