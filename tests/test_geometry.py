"""
Tests Point and Rect
"""

import pytest

from pixelcore import Point, Rect


def test_point():
    point = Point(3, 4)
    assert point.offset(1, -1) == Point(4, 3)
    assert str(point) == "(3,4)"
    assert Point() == Point(0, 0)
    with pytest.raises(AttributeError):
        point.x = 5


def test_rect_basics():
    rect = Rect(1, 2, 3, 4)
    assert rect.right == 4
    assert rect.bottom == 6
    assert rect.top_left == Point(1, 2)
    assert rect.bottom_right == Point(4, 6)
    assert rect.area == 12
    assert rect.perimeter == 14
    assert str(rect) == "(1,2;3x4)"


def test_rect_from_points():
    assert Rect.from_points(Point(5, 6), Point(1, 2)) == Rect(1, 2, 4, 4)


def test_contains_and_overlaps():
    rect = Rect(0, 0, 4, 4)
    assert rect.contains(Point(0, 0))
    assert rect.contains(Point(4, 4))
    assert not rect.contains(Point(5, 1))
    assert rect.overlaps(Rect(4, 4, 2, 2))
    assert not rect.overlaps(Rect(5, 0, 2, 2))


def test_offset_and_expand():
    rect = Rect(1, 1, 2, 2)
    assert rect.offset(2, 3) == Rect(3, 4, 2, 2)
    assert rect.expand(1, 1, 1, 1) == Rect(0, 0, 4, 4)


def test_is_within():
    assert Rect(0, 0, 4, 4).is_within(4, 4)
    assert Rect(1, 1, 2, 3).is_within(4, 4)
    assert Rect(0, 0, 0, 0).is_within(0, 0)
    assert not Rect(0, 0, 5, 4).is_within(4, 4)
    assert not Rect(-1, 0, 2, 2).is_within(4, 4)
    assert not Rect(3, 3, 2, 1).is_within(4, 4)
