"""
PixelCore - image data model, single-slot pipeline stages and fixed-point
complex arithmetic for integer image processing
"""

from .pixel_format import PixelFormat, PixelFormatTypes
from .geometry import Point, Rect
from .complex32 import Complex
from .fixed_point import SCALE, SHIFT, isqrt
from .image_base import ImageBase, require_format
from .image import (
    BufferImage,
    Gray8Image,
    Gray16Image,
    Gray32Image,
    RgbImage,
    Complex32Image,
    IMAGE_CLASSES,
    create_image,
    clone_image,
)
from .decorated import DecoratedImage
from .masked import MaskedImage, MaskedGrayImage, MaskedRgbImage, MASKED, UNMASKED
from .offset import OffsetImage
from .pipeline import PipelineStage, FunctionStage, Sequence
from .factories import (
    ImageFactory,
    ImageIo,
    DefaultImageFactory,
    PilImageFactory,
    PlatformFactories,
    resolve_factories,
)
from .errors import (
    ErrorCode,
    ErrorPackage,
    ImageError,
    InvalidDimensionError,
    BoundsOutsideImageError,
    IllegalParameterValueError,
    MaskSizeMismatchError,
    ImageTypeError,
    DivisionByZeroError,
    NegativeSqrtError,
    ProductTooLargeError,
    SquareTooLargeError,
    NoResultAvailableError,
    PipelineEmptyPushError,
)

__all__ = [
    # Pixel formats
    "PixelFormat",
    "PixelFormatTypes",
    # Geometry
    "Point",
    "Rect",
    # Fixed-point arithmetic
    "Complex",
    "SCALE",
    "SHIFT",
    "isqrt",
    # Images
    "ImageBase",
    "BufferImage",
    "Gray8Image",
    "Gray16Image",
    "Gray32Image",
    "RgbImage",
    "Complex32Image",
    "IMAGE_CLASSES",
    "create_image",
    "clone_image",
    "require_format",
    "DecoratedImage",
    "MaskedImage",
    "MaskedGrayImage",
    "MaskedRgbImage",
    "MASKED",
    "UNMASKED",
    "OffsetImage",
    # Pipeline
    "PipelineStage",
    "FunctionStage",
    "Sequence",
    # Platform
    "ImageFactory",
    "ImageIo",
    "DefaultImageFactory",
    "PilImageFactory",
    "PlatformFactories",
    "resolve_factories",
    # Errors
    "ErrorCode",
    "ErrorPackage",
    "ImageError",
    "InvalidDimensionError",
    "BoundsOutsideImageError",
    "IllegalParameterValueError",
    "MaskSizeMismatchError",
    "ImageTypeError",
    "DivisionByZeroError",
    "NegativeSqrtError",
    "ProductTooLargeError",
    "SquareTooLargeError",
    "NoResultAvailableError",
    "PipelineEmptyPushError",
]

__version__ = "0.1.0"
