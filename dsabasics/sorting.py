"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "selection_sort",
]

T = TypeVar("T", bound=Any)


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Each pass bubbles the largest remaining value to the end of the
    unsorted prefix, which then shrinks by one.
    """
    result = list(items)
    for last in range(len(result) - 1, 0, -1):
        for j in range(last):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by sliding each value left until its predecessor is not larger."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    """Merge two sorted lists, taking from the left run on ties."""
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort by splitting in half, sorting each half and merging; stable."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining value to the front of the rest."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result