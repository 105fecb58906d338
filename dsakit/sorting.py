"""Comparison sorts: bubble, early-exit bubble, selection and quicksort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list made by repeated adjacent swaps."""
    result = list(items)
    n = len(result)
    for pass_number in range(1, n):
        for i in range(n - pass_number):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def optimised_bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list; stops as soon as a pass makes no swap."""
    result = list(items)
    n = len(result)
    for pass_number in range(1, n):
        swapped = False
        for i in range(n - pass_number):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list, moving the smallest remaining item forward each step."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around ``items[high]``.

    Elements not greater than the pivot end up before it, the rest after
    it. Returns the pivot's final index. Raises IndexError when the bounds
    do not describe a range inside ``items``.
    """
    if not 0 <= low <= high < len(items):
        raise IndexError(f"invalid range {low}..{high}")
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list using quicksort with last-element pivots."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result