"""In-place quicksort with median-of-three pivots and an insertion-sort cutoff."""

from typing import Any, MutableSequence

__all__ = ["quicksort"]


def quicksort(items: MutableSequence[Any], threshold: int = 16) -> None:
    """Sort ``items`` in place.

    Ranges no longer than ``threshold`` are finished by insertion sort.
    Elements only need to support ``<``. Raises ``ValueError`` if
    ``threshold`` is smaller than 1.
    """
    if threshold < 1:
        raise ValueError("threshold must be at least 1")
    _split(items, 0, len(items), threshold)


def _split(items: MutableSequence[Any], left: int, right: int, threshold: int) -> None:
    while right - left > threshold:
        middle = (left + right - 1) // 2
        _median_of_three(items, left, middle, right - 1)
        cut = _partition(items, left, right, items[middle]) + 1
        # Recurse into the smaller side so the stack stays logarithmic.
        if cut - left < right - cut:
            _split(items, left, cut, threshold)
            left = cut
        else:
            _split(items, cut, right, threshold)
            right = cut
    _insertion_sort(items, left, right)


def _median_of_three(items: MutableSequence[Any], first: int, middle: int, last: int) -> None:
    if items[middle] < items[first]:
        items[middle], items[first] = items[first], items[middle]
    if items[last] < items[first]:
        items[last], items[first] = items[first], items[last]
    if items[last] < items[middle]:
        items[last], items[middle] = items[middle], items[last]


def _partition(items: MutableSequence[Any], left: int, right: int, pivot: Any) -> int:
    i, j = left - 1, right
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while pivot < items[j]:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def _insertion_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    for i in range(left + 1, right):
        j = i
        while j > left and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1