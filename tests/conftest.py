"""
Pytest fixtures for PixelCore tests
"""

import pytest

from pixelcore import Gray8Image, Gray32Image, RgbImage, PipelineStage
from pixelcore.rgb import to_rgb_unsigned


class AddStage(PipelineStage):
    """Adds a constant to every pixel of a Gray8 image."""

    def __init__(self, amount: int, name: str | None = None):
        super().__init__()
        self.amount = amount
        self.name = name

    def process(self, image):
        result = image.clone()
        result.buffer[...] = result.buffer + self.amount
        self.set_output(result)

    def __str__(self):
        return self.name or super().__str__()


class SilentStage(PipelineStage):
    """Consumes its input without ever producing output."""

    def process(self, image):
        pass


class FailingStage(PipelineStage):
    """Publishes a partial result and then raises."""

    def process(self, image):
        self.set_output(image)
        raise RuntimeError("processing failed")


@pytest.fixture
def gray8_image() -> Gray8Image:
    """
    A 4x3 Gray8 image with the pixel values 0..11 in row order
    """
    return Gray8Image.from_buffer(4, 3, range(12))


@pytest.fixture
def gray32_image() -> Gray32Image:
    return Gray32Image.from_buffer(3, 2, [-100000, 0, 1, 2, 3, 100000])


@pytest.fixture
def rgb_image() -> RgbImage:
    """
    A 3x2 RGB image filled with 0x102030
    """
    return RgbImage(3, 2, to_rgb_unsigned(0x10, 0x20, 0x30))
