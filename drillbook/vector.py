"""A growable array that doubles its capacity when it runs out of room."""

from __future__ import annotations

import operator
from itertools import islice
from typing import Any, Iterable, Iterator, List

__all__ = ["Vector"]


class Vector:
    """A sequence with an explicit capacity.

    Built from an iterable, its capacity equals the number of elements.
    ``push_back`` grows the capacity to 1 when it is zero and doubles it
    otherwise. ``clear`` drops the elements but keeps the capacity.
    """

    __slots__ = ("_storage", "_size")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._storage: List[Any] = list(values)
        self._size = len(self._storage)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return islice(self._storage, self._size)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return list(self)[index]
        position = operator.index(index)
        if position < 0:
            position += self._size
        if not 0 <= position < self._size:
            raise IndexError("vector index out of range")
        return self._storage[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __copy__(self) -> "Vector":
        duplicate = Vector()
        duplicate._storage = list(self._storage)
        duplicate._size = self._size
        return duplicate

    def capacity(self) -> int:
        """Return how many elements fit before the storage has to grow."""
        return len(self._storage)

    def push_back(self, value: Any) -> None:
        """Append ``value``, growing the storage when it is full."""
        if self._size >= len(self._storage):
            new_capacity = 2 * len(self._storage) if self._storage else 1
            self._storage.extend([None] * (new_capacity - len(self._storage)))
        self._storage[self._size] = value
        self._size += 1

    def clear(self) -> None:
        """Remove every element while keeping the capacity."""
        self._size = 0

    def swap(self, other: "Vector") -> None:
        """Exchange contents and capacity with ``other``."""
        self._storage, other._storage = other._storage, self._storage
        self._size, other._size = other._size, self._size