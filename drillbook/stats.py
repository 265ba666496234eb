"""Minimum, maximum, mean and population standard deviation of a sample."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

__all__ = ["Summary", "summarize", "main"]


@dataclass(frozen=True)
class Summary:
    minimum: float
    maximum: float
    mean: float
    std_dev: float


def summarize(numbers: Iterable[float], limit: Optional[int] = None) -> Summary:
    """Summarize ``numbers``; the standard deviation divides by the count.

    Raises ``ValueError`` for an empty sample or one longer than ``limit``.
    """
    values = [float(number) for number in numbers]
    if not values:
        raise ValueError("invalid number of elements")
    if limit is not None and len(values) > limit:
        raise ValueError(f"number of elements exceeded {limit}")
    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return Summary(min(values), max(values), mean, math.sqrt(variance))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count followed by that many numbers and print their summary."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    if not tokens:
        tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0]) if tokens else 0
        if count <= 0:
            raise ValueError("invalid number of elements")
        values = [float(token) for token in tokens[1 : 1 + count]]
        if len(values) < count:
            raise ValueError(f"expected {count} numbers, got {len(values)}")
        summary = summarize(values)
    except ValueError as error:
        print(error)
        return 1
    print(f"min: {summary.minimum:g}")
    print(f"max: {summary.maximum:g}")
    print(f"mean: {summary.mean:g}")
    print(f"standard deviation: {summary.std_dev:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())