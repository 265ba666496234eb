"""Fibonacci numbers and series approximations of e and pi."""

from __future__ import annotations

from itertools import count

__all__ = ["fibonacci", "compute_exp", "compute_pi"]

_INT_MAX = 2**31 - 1
_MAX_TERMS = 10000


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number (``fibonacci(0) == 0``).

    Raises ``ValueError`` for negative ``n`` and ``OverflowError`` when the
    value would not fit in a signed 32-bit integer.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
        if current > _INT_MAX:
            raise OverflowError("Fibonacci computation would cause integer overflow")
    return current


def compute_exp(epsilon: float) -> float:
    """Sum the series for e, stopping at the first term smaller than ``epsilon``."""
    result = 1.0
    term = 1.0
    for n in count():
        term /= n + 1
        if abs(term) < epsilon:
            break
        result += term
        if n > _MAX_TERMS:
            break
    return result


def compute_pi(epsilon: float) -> float:
    """Sum the Leibniz series for pi, stopping at the first term below ``epsilon``."""
    quarter_pi = 1.0
    sign = -1.0
    for n in count(1):
        term = sign / (2 * n + 1)
        if abs(term) < epsilon:
            break
        quarter_pi += term
        sign = -sign
        if n > _MAX_TERMS:
            break
    return quarter_pi * 4