"""Comparison-counting implementations of classic sorting algorithms."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SortResult:
    """A sorted copy of the input and the number of element comparisons counted."""

    values: list[int]
    comparisons: int


def insertion_sort(values: Iterable[int]) -> SortResult:
    """Sort by insertion.

    Each shift counts one comparison. The final comparison that stops a pass
    counts one more, including when the pass runs off the front of the list.
    """
    items = list(values)
    comparisons = 0
    for position in range(1, len(items)):
        key = items[position]
        slot = position
        while slot > 0 and items[slot - 1] > key:
            comparisons += 1
            items[slot] = items[slot - 1]
            slot -= 1
        comparisons += 1
        items[slot] = key
    return SortResult(items, comparisons)


def _merge(left: list[int], right: list[int]) -> tuple[list[int], int]:
    merged: list[int] = []
    comparisons = 0
    i = j = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, comparisons


def _merge_sort(items: list[int]) -> tuple[list[int], int]:
    if len(items) < 2:
        return items, 0
    # The left half takes the middle element, as with mid = left + (right-left)/2.
    middle = (len(items) + 1) // 2
    left, left_count = _merge_sort(items[:middle])
    right, right_count = _merge_sort(items[middle:])
    merged, merge_count = _merge(left, right)
    return merged, left_count + right_count + merge_count


def merge_sort(values: Iterable[int]) -> SortResult:
    """Sort by top-down merging, counting comparisons made while merging."""
    items, comparisons = _merge_sort(list(values))
    return SortResult(items, comparisons)


def _sift_down(items: list[int], length: int, root: int) -> int:
    comparisons = 0
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        # Only comparisons that move the candidate are counted.
        if left < length and items[left] > items[largest]:
            comparisons += 1
            largest = left
        if right < length and items[right] > items[largest]:
            comparisons += 1
            largest = right
        if largest == root:
            return comparisons
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> SortResult:
    """Sort with a binary max-heap.

    Only comparisons that find a larger child are counted.
    """
    items = list(values)
    length = len(items)
    comparisons = 0
    for root in range(length // 2 - 1, -1, -1):
        comparisons += _sift_down(items, length, root)
    for end in range(length - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        comparisons += _sift_down(items, end, 0)
    return SortResult(items, comparisons)


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high):
        if items[index] < pivot:
            boundary += 1
            items[boundary], items[index] = items[index], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> SortResult:
    """Sort by quicksort with the last element as pivot.

    Every element compared against a pivot counts one comparison.
    """
    items = list(values)
    comparisons = 0
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        comparisons += high - low
        split = _partition(items, low, high)
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return SortResult(items, comparisons)


def random_array(
    size: int, rng: random.Random | None = None, upper: int = 10000
) -> list[int]:
    """Return ``size`` random integers in ``0 .. upper - 1``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if upper <= 0:
        raise ValueError("upper must be positive")
    source = rng if rng is not None else random.Random()
    return [source.randrange(upper) for _ in range(size)]