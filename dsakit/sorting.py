"""Classic comparison and counting sorts.

Every function accepts any iterable, leaves it untouched and returns a new
list holding the same items in ascending order.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "bubble_sort_adaptive",
    "count_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]


def _bubble(arr: MutableSequence[Any], adaptive: bool) -> None:
    n = len(arr)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if adaptive and not swapped:
            return


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs, always n-1 passes."""
    arr = list(items)
    _bubble(arr, adaptive=False)
    return arr


def bubble_sort_adaptive(items: Iterable[T]) -> list[T]:
    """Bubble sort that stops after the first pass making no swaps."""
    arr = list(items)
    _bubble(arr, adaptive=True)
    return arr


def count_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value.

    Raises ValueError if any value is negative.
    """
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("count_sort only handles non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    arr = list(items)
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging the results."""
    arr = list(items)
    if len(arr) <= 1:
        return arr
    mid = (len(arr) + 1) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _partition(arr: MutableSequence[Any], low: int, high: int) -> int:
    pivot = arr[low]
    i, j = low + 1, high
    while True:
        while i <= high and arr[i] <= pivot:
            i += 1
        while arr[j] > pivot:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
        else:
            break
    arr[low], arr[j] = arr[j], arr[low]
    return j


def quick_sort(items: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element of each range."""
    arr = list(items)
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(arr, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return arr


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front on each pass."""
    arr = list(items)
    n = len(arr)
    for i in range(n - 1):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]
    return arr