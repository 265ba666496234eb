"""Exact fractions kept in lowest terms with a positive denominator."""

from __future__ import annotations

import math
import re
from typing import Union

__all__ = ["RationalError", "Rational", "equal"]

_PATTERN = re.compile(r"\s*([+-]?\d+)\s*/\s*([+-]?\d+)\s*")


class RationalError(ValueError):
    """Raised for a zero denominator or text that is not a fraction."""


class Rational:
    """An immutable fraction ``num/den`` always stored in reduced form."""

    __slots__ = ("_num", "_den")

    def __init__(self, num: int = 0, den: int = 1) -> None:
        if den == 0:
            raise RationalError("Rational: denominator must not be zero")
        if den < 0:
            num, den = -num, -den
        divisor = math.gcd(num, den)
        self._num = num // divisor
        self._den = den // divisor

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Read a fraction written as ``num/den``, e.g. ``"1/2"``."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise RationalError(f"not a fraction: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @staticmethod
    def _coerce(value: object) -> Union["Rational", None]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __float__(self) -> float:
        return self._num / self._den

    def __add__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        lcm = self._den * rhs._den // math.gcd(self._den, rhs._den)
        num = self._num * (lcm // self._den) + rhs._num * (lcm // rhs._den)
        return Rational(num, lcm)

    def __radd__(self, other: object) -> "Rational":
        return self.__add__(other)

    def __neg__(self) -> "Rational":
        return Rational(-self._num, self._den)

    def __sub__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    def __rmul__(self, other: object) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        # A zero divisor becomes a zero denominator and raises RationalError.
        return self * Rational(rhs._den, rhs._num)

    def __rtruediv__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def _cross(self, other: object) -> Union[tuple, None]:
        rhs = self._coerce(other)
        if rhs is None:
            return None
        return self._num * rhs._den, rhs._num * self._den

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._num == rhs._num and self._den == rhs._den

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def __lt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._num}, {self._den})"


def equal(x: float, y: float, epsilon: float = 1e-6) -> bool:
    """Return True when ``x`` and ``y`` differ by less than ``epsilon``."""
    return abs(x - y) < epsilon