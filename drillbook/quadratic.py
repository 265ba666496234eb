"""Solve ``a*x**2 + b*x + c = 0`` over the reals, including degenerate cases."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

__all__ = ["AnyNumber", "is_zero", "solve", "main"]

_EPSILON = 1e-6


@dataclass(frozen=True)
class AnyNumber:
    """Marks an equation that every real number satisfies (``0 = 0``)."""


Roots = Union[AnyNumber, float, Tuple[float, float]]


def is_zero(num: float) -> bool:
    """Return True when ``num`` is closer to zero than the solver's tolerance."""
    return abs(num) < _EPSILON


def solve(a: float, b: float, c: float) -> Optional[Roots]:
    """Return the real roots of ``a*x**2 + b*x + c = 0``.

    The result is ``None`` when there are no real roots, ``AnyNumber()``
    when every number is a root, a single ``float`` for one root, and a pair
    ``((-b - sqrt(D)) / 2a, (-b + sqrt(D)) / 2a)`` for two distinct roots.
    """
    if is_zero(a):
        if is_zero(b):
            return AnyNumber() if is_zero(c) else None
        return -c / b
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    two_a = 2.0 * a
    if is_zero(discriminant):
        return -b / two_a
    root = math.sqrt(discriminant)
    return (-b - root) / two_a, (-b + root) / two_a


def _read_coefficients(args: Sequence[str]) -> List[float]:
    if args:
        if len(args) != 3:
            raise ValueError("expected three coefficients: a b c")
        return [float(arg) for arg in args]
    coefficients = []
    for name in "abc":
        print(f"enter {name}")
        coefficients.append(float(input()))
    return coefficients


def _describe(result: Optional[Roots]) -> str:
    if result is None:
        return "no roots"
    if isinstance(result, AnyNumber):
        return "root is any number"
    if isinstance(result, tuple):
        x1, x2 = result
        return f"two roots: {x1:g} {x2:g}"
    return f"one root: {result:g}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the coefficients (from ``argv`` or interactively) and print the roots."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        a, b, c = _read_coefficients(args)
    except (ValueError, EOFError) as error:
        print(f"Caught exception: {error}", file=sys.stderr)
        return 1
    print(_describe(solve(a, b, c)))
    return 0


if __name__ == "__main__":
    sys.exit(main())