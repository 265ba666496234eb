"""Axis-aligned rectangles on an integer grid, with intersection and bounding box."""

from dataclasses import dataclass
from typing import Iterable

__all__ = ["Point", "Rectangle", "intersect", "intersection", "bounding_box"]


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates; ``y`` grows downwards."""

    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its left-top and right-bottom corners."""

    left_top: Point
    right_bottom: Point

    @classmethod
    def from_coords(cls, left: int, top: int, right: int, bottom: int) -> "Rectangle":
        """Build a rectangle from the four corner coordinates."""
        return cls(Point(left, top), Point(right, bottom))

    def width(self) -> int:
        return self.right_bottom.x - self.left_top.x

    def height(self) -> int:
        return self.right_bottom.y - self.left_top.y

    def is_degenerate(self) -> bool:
        """True when the rectangle has zero width or zero height."""
        return self.width() == 0 or self.height() == 0

    def square(self) -> int:
        """Return the area of the rectangle."""
        return self.width() * self.height()


_EMPTY = Rectangle.from_coords(0, 0, 0, 0)


def intersect(lhs: Rectangle, rhs: Rectangle) -> Rectangle:
    """Return the overlap of two rectangles, or an empty rectangle at the origin."""
    if (
        lhs.right_bottom.y <= rhs.left_top.y
        or lhs.right_bottom.x <= rhs.left_top.x
        or lhs.left_top.y >= rhs.right_bottom.y
        or lhs.left_top.x >= rhs.right_bottom.x
    ):
        return _EMPTY
    return Rectangle.from_coords(
        max(lhs.left_top.x, rhs.left_top.x),
        max(lhs.left_top.y, rhs.left_top.y),
        min(lhs.right_bottom.x, rhs.right_bottom.x),
        min(lhs.right_bottom.y, rhs.right_bottom.y),
    )


def intersection(rectangles: Iterable[Rectangle]) -> Rectangle:
    """Return the common area of all rectangles; empty input gives an empty rectangle."""
    iterator = iter(rectangles)
    result = next(iterator, None)
    if result is None:
        return _EMPTY
    for rect in iterator:
        result = intersect(result, rect)
        if result.is_degenerate():
            break
    return result


def bounding_box(rectangles: Iterable[Rectangle]) -> Rectangle:
    """Return the smallest rectangle enclosing all given rectangles."""
    rects = list(rectangles)
    if not rects:
        return _EMPTY
    min_x = min(r.left_top.x for r in rects)
    min_y = min(r.left_top.y for r in rects)
    max_x = max(r.right_bottom.x for r in rects)
    max_y = max(r.right_bottom.y for r in rects)
    if min_x > max_x or min_y > max_y:
        return _EMPTY
    return Rectangle.from_coords(min_x, min_y, max_x, max_y)