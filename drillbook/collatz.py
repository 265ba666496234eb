"""Collatz sequence lengths with a memo table of fixed size."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

__all__ = ["Collatz", "main"]


class Collatz:
    """Counts steps to reach 1, remembering results for numbers below ``cache_size``."""

    def __init__(self, cache_size: int = 10000) -> None:
        self._cache = [0] * cache_size

    def seq_len(self, number: int) -> int:
        """Return how many steps the Collatz sequence of ``number`` takes to reach 1."""
        if number < 1:
            raise ValueError("only positive numbers could be accepted")
        cache = self._cache
        length = 0
        n = number
        while n != 1:
            if n < len(cache) and cache[n]:
                length += cache[n]
                break
            n = 3 * n + 1 if n & 1 else n // 2
            length += 1
        if number < len(cache):
            cache[number] = length
        return length

    def max_len(self) -> int:
        """Return the longest sequence length remembered so far."""
        return max(self._cache, default=0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sequence lengths of 1..99 and the longest among them."""
    collatz = Collatz()
    for number in range(1, 100):
        print(collatz.seq_len(number))
    print(f"max seq len: {collatz.max_len()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())