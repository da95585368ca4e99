"""
Tests the platform factories and settings of pixelcore
"""

import logging

import PIL.Image
import pytest

from pixelcore import (
    DefaultImageFactory,
    Gray8Image,
    IllegalParameterValueError,
    ImageIo,
    InvalidDimensionError,
    PilImageFactory,
    PixelFormat,
    PlatformFactories,
    RgbImage,
    resolve_factories,
)
from pixelcore import factories
from pixelcore.config import Settings


class MemoryImageIo(ImageIo):
    """Keeps "files" in a dictionary."""

    def __init__(self):
        self.files = {}

    def read_file(self, path):
        return self.files[path].clone()

    def write_file(self, image, quality, path):
        self.files[path] = image.clone()


class TestDefaultImageFactory:
    def test_creates_every_supported_format(self):
        factory = DefaultImageFactory()
        for pixel_format in (PixelFormat.BYTE_GRAY, PixelFormat.INT_RGB, PixelFormat.COMPLEX32):
            image = factory.create_image(3, 2, pixel_format)
            assert image.pixel_format == pixel_format
            assert image.platform_image is None

    def test_unsupported_format(self):
        with pytest.raises(IllegalParameterValueError):
            DefaultImageFactory().create_image(3, 2, PixelFormat.BYTE_INDEXED)


class TestPilImageFactory:
    def test_gray_and_rgb_handles(self):
        factory = PilImageFactory()
        gray = factory.create_image(4, 3, PixelFormat.BYTE_GRAY)
        assert isinstance(gray, Gray8Image)
        assert isinstance(gray.platform_image, PIL.Image.Image)
        assert gray.platform_image.mode == "L"
        assert gray.platform_image.size == (4, 3)
        rgb = factory.create_image(4, 3, "int_rgb")
        assert isinstance(rgb, RgbImage)
        assert rgb.platform_image.mode == "RGB"

    def test_clone_shares_handle(self):
        image = PilImageFactory().create_image(2, 2, PixelFormat.BYTE_GRAY)
        assert image.clone().platform_image is image.platform_image

    def test_unsupported_format(self):
        with pytest.raises(IllegalParameterValueError):
            PilImageFactory().create_image(2, 2, PixelFormat.USHORT_GRAY)

    def test_invalid_dimension(self):
        with pytest.raises(InvalidDimensionError):
            PilImageFactory().create_image(-2, 2, PixelFormat.BYTE_GRAY)


class TestResolveFactories:
    def test_resolve_by_name(self):
        platform = resolve_factories("pil")
        assert isinstance(platform.image_factory, PilImageFactory)
        assert isinstance(platform, PlatformFactories)

    def test_resolve_from_settings(self, monkeypatch):
        monkeypatch.setattr(factories.settings, "IMAGE_FACTORY", "default")
        assert isinstance(resolve_factories().image_factory, DefaultImageFactory)
        monkeypatch.setattr(factories.settings, "IMAGE_FACTORY", "pil")
        assert isinstance(resolve_factories().image_factory, PilImageFactory)

    def test_unknown_name(self):
        with pytest.raises(IllegalParameterValueError):
            resolve_factories("gtk")

    def test_logs_choice(self, caplog):
        with caplog.at_level(logging.INFO, logger="pixelcore.factories"):
            resolve_factories("default")
        assert "default" in caplog.text

    def test_image_io(self):
        platform = resolve_factories("default")
        with pytest.raises(NotImplementedError):
            platform.create_image_io()

        io = MemoryImageIo()
        platform = resolve_factories("default", image_io=io)
        assert platform.create_image_io() is io
        image = platform.create_image(2, 2, PixelFormat.BYTE_GRAY)
        image.set_pixel(1, 1, 3)
        io.write_file(image, 90, "a.gray")
        assert io.read_file("a.gray") == image


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PIXELCORE_FIXED_POINT_SHIFT", raising=False)
        monkeypatch.delenv("PIXELCORE_IMAGE_FACTORY", raising=False)
        settings = Settings()
        assert settings.FIXED_POINT_SHIFT == 16
        assert settings.IMAGE_FACTORY == "default"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PIXELCORE_FIXED_POINT_SHIFT", "12")
        monkeypatch.setenv("PIXELCORE_IMAGE_FACTORY", "pil")
        settings = Settings()
        assert settings.FIXED_POINT_SHIFT == 12
        assert settings.IMAGE_FACTORY == "pil"

    def test_validation(self, monkeypatch):
        monkeypatch.setenv("PIXELCORE_FIXED_POINT_SHIFT", "40")
        with pytest.raises(ValueError):
            Settings()
        monkeypatch.setenv("PIXELCORE_FIXED_POINT_SHIFT", "16")
        monkeypatch.setenv("PIXELCORE_IMAGE_FACTORY", "gtk")
        with pytest.raises(ValueError):
            Settings()
