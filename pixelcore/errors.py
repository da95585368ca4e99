"""Exception classes and error codes for PixelCore.

Every failure inside the core is raised as a subclass of :class:`ImageError`
carrying an :class:`ErrorCode`, the :class:`ErrorPackage` it originated in
and up to three diagnostic parameters. Each subclass also derives from the
closest builtin exception so callers can catch e.g. ``ValueError``.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, ClassVar


class ErrorPackage(Enum):
    """Area of the toolkit an error was raised in."""

    ALGORITHM = auto()  # transform stages built on top of the core
    CORE = auto()
    PLATFORM = auto()  # platform image and I/O bridges


class ErrorCode(Enum):
    """All error conditions the core reports."""

    BOUNDS_OUTSIDE_IMAGE = "region lies outside the image bounds"
    ILLEGAL_PARAMETER_VALUE = "illegal parameter value"
    IMAGE_MASK_SIZE_MISMATCH = "mask size does not match image size"
    IMAGE_TYPE_MISMATCH = "unexpected image type"
    INVALID_DIMENSION = "invalid image dimension"
    MATH_DIVISION_ZERO = "division by zero"
    MATH_NEGATIVE_SQRT = "square root of a negative number"
    MATH_PRODUCT_TOO_LARGE = "product too large"
    MATH_SQUARE_TOO_LARGE = "square too large"
    NO_RESULT_AVAILABLE = "no result available"
    PIPELINE_EMPTY_PUSH = "push into an empty pipeline"


class ImageError(Exception):
    """Base class of all PixelCore errors."""

    code: ClassVar[ErrorCode]

    def __init__(self, *params: Any, package: ErrorPackage = ErrorPackage.CORE):
        """
        :param params: Up to three values describing the failing operands,
            e.g. the image and the mask whose sizes differ.
        :param package: The package the error originated in
        """
        if len(params) > 3:
            raise ValueError("At most three error parameters are supported")
        self.package = package
        self.params: tuple[str, ...] = tuple(
            "" if p is None else str(p) for p in params
        )
        super().__init__(str(self))

    @classmethod
    def from_code(
        cls, code: ErrorCode, *params: Any, package: ErrorPackage = ErrorPackage.CORE
    ) -> ImageError:
        """
        Creates the matching error subclass for an error code.

        :param code: The error code
        :param params: Diagnostic parameters
        :param package: Originating package
        :return: The error instance (not raised)
        """
        return ERROR_CLASSES[code](*params, package=package)

    def __str__(self) -> str:
        details = ",".join(self.params)
        return f"{self.package.name} {self.code.name}: {self.code.value} ({details})"


class InvalidDimensionError(ImageError, ValueError):
    """Raised for negative or non-integer image dimensions."""

    code = ErrorCode.INVALID_DIMENSION


class BoundsOutsideImageError(ImageError, IndexError):
    """Raised if an operation's target region exceeds the image."""

    code = ErrorCode.BOUNDS_OUTSIDE_IMAGE


class IllegalParameterValueError(ImageError, ValueError):
    """Raised for out-of-range indices, values or enumerated parameters."""

    code = ErrorCode.ILLEGAL_PARAMETER_VALUE


class MaskSizeMismatchError(ImageError, ValueError):
    """Raised if a mask and its base image differ in size."""

    code = ErrorCode.IMAGE_MASK_SIZE_MISMATCH


class ImageTypeError(ImageError, TypeError):
    """Raised if an image is not of the variant an operation expects."""

    code = ErrorCode.IMAGE_TYPE_MISMATCH


class DivisionByZeroError(ImageError, ZeroDivisionError):
    code = ErrorCode.MATH_DIVISION_ZERO


class NegativeSqrtError(ImageError, ValueError):
    code = ErrorCode.MATH_NEGATIVE_SQRT


class ProductTooLargeError(ImageError, ArithmeticError):
    code = ErrorCode.MATH_PRODUCT_TOO_LARGE


class SquareTooLargeError(ImageError, ArithmeticError):
    code = ErrorCode.MATH_SQUARE_TOO_LARGE


class NoResultAvailableError(ImageError, LookupError):
    """Raised when popping a stage which has no buffered output."""

    code = ErrorCode.NO_RESULT_AVAILABLE


class PipelineEmptyPushError(ImageError, LookupError):
    """Raised when pushing into a sequence without stages."""

    code = ErrorCode.PIPELINE_EMPTY_PUSH


ERROR_CLASSES: dict[ErrorCode, type[ImageError]] = {
    cls.code: cls
    for cls in (
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
}
"Maps each error code to the exception class raised for it"

_unmapped = set(ErrorCode) - set(ERROR_CLASSES)
if _unmapped:
    raise RuntimeError(f"Error codes without exception class: {sorted(c.name for c in _unmapped)}")
del _unmapped
