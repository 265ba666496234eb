"""Functions over any number of arguments: extremes, sums and filtered insertion."""

from __future__ import annotations

from typing import Any, Tuple

__all__ = ["maximum", "minimum", "total", "average", "insert_ints"]


def _floats(values: Tuple[Any, ...]) -> Tuple[float, ...]:
    for value in values:
        if not isinstance(value, float):
            raise TypeError(f"expected floating-point arguments, got {type(value).__name__}")
    return values


def maximum(first: float, *args: float) -> float:
    """Return the largest argument; on ties the earliest one wins."""
    values = _floats((first, *args))
    result = values[-1]
    for value in reversed(values[:-1]):
        result = result if value < result else value
    return result


def minimum(first: float, *args: float) -> float:
    """Return the smallest argument; on ties the earliest one wins."""
    values = _floats((first, *args))
    result = values[-1]
    for value in reversed(values[:-1]):
        result = result if result < value else value
    return result


def total(*args: float) -> float:
    """Return the sum of the arguments, added from the right."""
    if not args:
        raise TypeError("total() needs at least one argument")
    values = _floats(args)
    result = values[-1]
    for value in reversed(values[:-1]):
        result = value + result
    return result


def average(*args: float) -> float:
    """Return the arithmetic mean of the arguments."""
    if not args:
        raise TypeError("average() needs at least one argument")
    return total(*args) / len(args)


def insert_ints(container: Any, *args: Any) -> None:
    """Append to ``container`` those arguments that are plain ``int`` values."""
    for value in args:
        if type(value) is int:
            container.append(value)