"""Evolve a random string towards a target by mutation and selection."""

from __future__ import annotations

import random
import string
import sys
from typing import Iterator, Optional, Sequence

__all__ = ["distance", "evolve", "main"]

_TARGET = "methinksitislikeaweasel"
_ALPHABET = string.ascii_lowercase


def distance(candidate: str, target: str) -> int:
    """Return how many positions of ``candidate`` differ from ``target``."""
    if len(candidate) != len(target):
        raise ValueError("candidate and target must have the same length")
    return sum(a != b for a, b in zip(candidate, target))


def _mutate(parent: str, mutation: float, rng: random.Random) -> str:
    return "".join(
        rng.choice(_ALPHABET) if rng.random() < mutation else ch for ch in parent
    )


def evolve(
    target: str,
    copies: int = 100,
    mutation: float = 0.05,
    rng: Optional[random.Random] = None,
) -> Iterator[str]:
    """Yield the current string of each generation, ending with ``target``.

    Every generation breeds ``copies`` children of the current string, each
    letter replaced by a random one with probability ``mutation``; the child
    closest to the target becomes the next current string.
    """
    if any(ch not in _ALPHABET for ch in target):
        raise ValueError("target must consist of lower case letters a..z")
    if copies < 1:
        raise ValueError("copies must be at least 1")
    if not 0.0 <= mutation <= 1.0:
        raise ValueError("mutation must lie in [0, 1]")
    rng = rng if rng is not None else random.Random()
    current = "".join(rng.choice(_ALPHABET) for _ in target)
    while True:
        yield current
        pool = [_mutate(current, mutation, rng) for _ in range(copies)]
        best = min(pool, key=lambda child: distance(child, target))
        if distance(best, target) == 0:
            yield best
            return
        current = best


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evolve towards the target given as argument (or the default phrase)."""
    args = sys.argv[1:] if argv is None else list(argv)
    target = args[0] if args else _TARGET
    try:
        for iteration, current in enumerate(evolve(target)):
            print(f"iteration {iteration} : {current}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())