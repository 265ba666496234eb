"""Plane figures that report their perimeter and area."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

__all__ = ["Shape", "Triangle", "Square", "Circle", "main"]


class Shape(ABC):
    @abstractmethod
    def perimeter(self) -> float:
        """Return the length of the boundary."""

    @abstractmethod
    def area(self) -> float:
        """Return the enclosed area."""


@dataclass(frozen=True)
class Triangle(Shape):
    side1: float
    side2: float
    side3: float

    def perimeter(self) -> float:
        return self.side1 + self.side2 + self.side3

    def area(self) -> float:
        """Heron's formula; raises ``ValueError`` if the sides cannot form a triangle."""
        p = self.perimeter() / 2
        product = p * (p - self.side1) * (p - self.side2) * (p - self.side3)
        if product < 0:
            raise ValueError("sides do not form a triangle")
        return math.sqrt(product)


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def perimeter(self) -> float:
        return 4 * self.side

    def area(self) -> float:
        return self.side * self.side


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def area(self) -> float:
        return math.pi * self.radius * self.radius


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print perimeter and area of a sample triangle, square and circle."""
    shapes = [Triangle(3, 4, 5), Square(4), Circle(2.5)]
    for index, shape in enumerate(shapes):
        if index:
            print()
        print(f"{type(shape).__name__}:")
        print(f"Perimeter: {shape.perimeter():g}")
        print(f"Area: {shape.area():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())