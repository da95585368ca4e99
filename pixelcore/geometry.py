"""
Integer value types used as parameters of image operations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An integer position, x to the right and y downwards."""

    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle defined by its top-left corner and size.

    The covered pixel region is ``[top, bottom) x [left, right)``.
    """

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Rect:
        """
        Creates the smallest rectangle spanning two corner points.

        :param p1: First corner
        :param p2: Opposite corner
        :return: The rectangle
        """
        left = min(p1.x, p2.x)
        top = min(p1.y, p2.y)
        return cls(left, top, max(p1.x, p2.x) - left, max(p1.y, p2.y) - top)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def perimeter(self) -> int:
        return 2 * (self.width + self.height)

    def contains(self, point: Point) -> bool:
        """
        Defines if a point lies within the rectangle, edges included.

        :param point: The point to test
        :return: True if the point is inside or on the border
        """
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def overlaps(self, other: Rect) -> bool:
        """
        Defines if two rectangles touch or intersect.

        :param other: The other rectangle
        :return: True if they share at least one point
        """
        return (
            self.left <= other.right
            and other.left <= self.right
            and self.top <= other.bottom
            and other.top <= self.bottom
        )

    def offset(self, dx: int, dy: int) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.width, self.height)

    def expand(self, left: int, top: int, right: int, bottom: int) -> Rect:
        """Grows the rectangle by the given margin on each side."""
        return Rect(
            self.left - left,
            self.top - top,
            self.width + left + right,
            self.height + top + bottom,
        )

    def is_within(self, width: int, height: int) -> bool:
        """
        Defines if the rectangle's pixel region lies inside an image.

        :param width: Image width
        :param height: Image height
        :return: True if no covered pixel lies outside ``width x height``
        """
        return (
            self.top >= 0
            and self.left >= 0
            and self.bottom <= height
            and self.right <= width
        )

    def __str__(self) -> str:
        return f"({self.left},{self.top};{self.width}x{self.height})"
