"""A stopwatch that reports on exit and averages repeated measurements."""

from __future__ import annotations

import math
import sys
import time
from typing import Callable, List, Optional, Sequence

from drillbook.rational import equal

__all__ = ["Timer", "calculate", "main"]


class Timer:
    """Measures seconds since creation or the last ``start``.

    Used as a context manager it prints ``"<scope> : <seconds>"`` on exit.
    ``start``/``stop`` pairs record samples whose mean ``average`` returns.
    """

    def __init__(self, scope: str, clock: Callable[[], float] = time.perf_counter) -> None:
        self.scope = scope
        self._clock = clock
        self._begin = clock()
        self._running = False
        self._samples: List[float] = []

    @property
    def samples(self) -> List[float]:
        return list(self._samples)

    def elapsed(self) -> float:
        """Return the seconds passed since the last start."""
        return self._clock() - self._begin

    def start(self) -> None:
        if self._running:
            raise RuntimeError("timer is already running")
        self._running = True
        self._begin = self._clock()

    def stop(self) -> None:
        if not self._running:
            raise RuntimeError("timer is not running")
        self._running = False
        self._samples.append(self._clock() - self._begin)

    def average(self) -> float:
        """Return the mean of the recorded samples, or 0.0 if there are none."""
        if not self._samples:
            return 0.0
        return sum(self._samples) / len(self._samples)

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        print(f"{self.scope} : {self.elapsed():.6f}")


def calculate(size: int) -> float:
    """Return the sum of ``sin(i)**2 + cos(i)**2`` for ``i`` below ``size``."""
    return sum(math.sin(i) ** 2 + math.cos(i) ** 2 for i in range(size))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time a computation once and then as a series of five runs."""
    size = 1_000_000
    with Timer("main : timer"):
        if not equal(calculate(size), size):
            return 1
        with Timer("series : timer") as series:
            for _ in range(5):
                series.start()
                ok = equal(calculate(size), size)
                series.stop()
                if not ok:
                    return 1
            print(f"series average : {series.average():.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())