"""Operator mixins built on in-place operators, and a mutable fraction using them."""

from __future__ import annotations

import copy
import functools
import math
import sys
from typing import Any, Optional

from drillbook.rational import Rational, RationalError

__all__ = [
    "Addable",
    "Subtractable",
    "Multipliable",
    "Dividable",
    "Incrementable",
    "Decrementable",
    "MixinRational",
]


def _apply(lhs: Any, method: str, other: Any) -> Any:
    result = getattr(copy.copy(lhs), method)(other)
    return result


def _lift(sample: Any, other: Any) -> Optional[Any]:
    if isinstance(other, type(sample)):
        return other
    if isinstance(other, int):
        return type(sample)(other)
    return None


class Addable:
    """Provides ``+`` from ``+=``."""

    def __add__(self, other: Any) -> Any:
        return _apply(self, "__iadd__", other)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)


class Subtractable:
    """Provides ``-`` from ``-=``."""

    def __sub__(self, other: Any) -> Any:
        return _apply(self, "__isub__", other)

    def __rsub__(self, other: Any) -> Any:
        lhs = _lift(self, other)
        return NotImplemented if lhs is None else lhs - self


class Multipliable:
    """Provides ``*`` from ``*=``."""

    def __mul__(self, other: Any) -> Any:
        return _apply(self, "__imul__", other)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)


class Dividable:
    """Provides ``/`` from ``/=``."""

    def __truediv__(self, other: Any) -> Any:
        return _apply(self, "__itruediv__", other)

    def __rtruediv__(self, other: Any) -> Any:
        lhs = _lift(self, other)
        return NotImplemented if lhs is None else lhs / self


class Incrementable:
    """Provides in-place increment by one from ``+=``."""

    def increment(self) -> Any:
        """Add one in place and return the object itself."""
        return self.__iadd__(type(self)(1))


class Decrementable:
    """Provides in-place decrement by one from ``-=``."""

    def decrement(self) -> Any:
        """Subtract one in place and return the object itself."""
        return self.__isub__(type(self)(1))


@functools.total_ordering
class MixinRational(
    Addable, Subtractable, Multipliable, Dividable, Incrementable, Decrementable
):
    """A mutable fraction kept in lowest terms with a positive denominator."""

    __hash__ = None  # mutable

    def __init__(self, num: int = 0, den: int = 1) -> None:
        if den == 0:
            raise RationalError("Rational: denominator must not be zero")
        self._num = num
        self._den = den
        self._reduce()

    @classmethod
    def parse(cls, text: str) -> "MixinRational":
        """Read a fraction written as ``num/den``."""
        value = Rational.parse(text)
        return cls(value.numerator, value.denominator)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    def _reduce(self) -> None:
        if self._den < 0:
            self._num, self._den = -self._num, -self._den
        divisor = math.gcd(self._num, self._den)
        self._num //= divisor
        self._den //= divisor

    def __float__(self) -> float:
        return self._num / self._den

    def __iadd__(self, other: Any) -> Any:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        lcm = math.lcm(self._den, rhs._den)
        self._num = self._num * (lcm // self._den) + rhs._num * (lcm // rhs._den)
        self._den = lcm
        self._reduce()
        return self

    def __isub__(self, other: Any) -> Any:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        return self.__iadd__(MixinRational(-rhs._num, rhs._den))

    def __imul__(self, other: Any) -> Any:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        self._num *= rhs._num
        self._den *= rhs._den
        self._reduce()
        return self

    def __itruediv__(self, other: Any) -> Any:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        # A zero divisor becomes a zero denominator and raises RationalError.
        return self.__imul__(MixinRational(rhs._den, rhs._num))

    def __eq__(self, other: object) -> bool:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        return self._num == rhs._num and self._den == rhs._den

    def __lt__(self, other: object) -> bool:
        rhs = _lift(self, other)
        if rhs is None:
            return NotImplemented
        return self._num * rhs._den < rhs._num * self._den

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._num}, {self._den})"


def _demo() -> int:
    x = MixinRational(1, 2)
    print(x + 1)
    return 0


if __name__ == "__main__":
    sys.exit(_demo())