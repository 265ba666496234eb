"""Exact ratios and durations measured in units of a ratio."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

__all__ = ["Ratio", "Duration"]

Number = Union[int, float]


@dataclass(frozen=True)
class Ratio:
    """A fraction ``num/den``; it is reduced only by ``reduced`` and arithmetic."""

    num: int = 0
    den: int = 1

    def reduced(self) -> "Ratio":
        """Return the ratio divided through by the gcd of its terms."""
        divisor = math.gcd(self.num, self.den)
        return Ratio(self.num // divisor, self.den // divisor)

    def __add__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            self.num * other.den + other.num * self.den, self.den * other.den
        ).reduced()

    def __neg__(self) -> "Ratio":
        return Ratio(-self.num, self.den)

    def __sub__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(self.num * other.num, self.den * other.den).reduced()

    def __truediv__(self, other: object) -> "Ratio":
        if not isinstance(other, Ratio):
            return NotImplemented
        if other.num == 0:
            raise ZeroDivisionError("division by zero ratio")
        return self * Ratio(other.den, other.num)


def _divide(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


@dataclass(frozen=True)
class Duration:
    """A count ``x`` of ticks, each tick lasting ``ratio`` of a base unit."""

    x: Number = 0
    ratio: Ratio = field(default_factory=lambda: Ratio(1))

    def _scaled(self, target: Ratio) -> Number:
        return _divide(self.x * target.den, self.ratio.den) * self.ratio.num

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        ratio = self.ratio + other.ratio
        return Duration(self._scaled(ratio) + other._scaled(ratio), ratio)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self + Duration(other.x, -other.ratio)