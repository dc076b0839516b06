"""Searching in sorted, rotated and two-dimensional data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in the ascending sequence, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def _binary_search_range(items: Sequence[Any], low: int, high: int, key: Any) -> int | None:
    while low <= high:
        mid = (low + high) // 2
        if key == items[mid]:
            return mid
        if key > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def ternary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in the ascending sequence, or None.

    Each step splits the remaining range into three parts.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid1 = low + (high - low) // 3
        mid2 = high - (high - low) // 3
        if items[mid1] == key:
            return mid1
        if items[mid2] == key:
            return mid2
        if items[mid1] > key:
            high = mid1 - 1
        elif items[mid2] < key:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return None


def find_pivot(items: Sequence[Any]) -> int | None:
    """Return the index of the largest element of a rotated sorted sequence.

    None means no pivot was found, which is the case for an empty or
    unrotated sequence.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        if low == high:
            return low
        mid = (low + high) // 2
        if mid < high and items[mid] > items[mid + 1]:
            return mid
        if mid > low and items[mid] < items[mid - 1]:
            return mid - 1
        if items[low] >= items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def rotated_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in a rotated ascending sequence, or None."""
    n = len(items)
    pivot = find_pivot(items)
    if pivot is None:
        return _binary_search_range(items, 0, n - 1, key)
    if items[pivot] == key:
        return pivot
    if items[0] <= key:
        return _binary_search_range(items, 0, pivot - 1, key)
    return _binary_search_range(items, pivot + 1, n - 1, key)


def integer_sqrt(x: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x == 0:
        return 0
    start, end = 1, x
    answer = 1
    while start <= end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def find_in_matrix(matrix: Sequence[Sequence[Any]], target: Any) -> tuple[int, int] | None:
    """Return the (row, column) of the first cell equal to target, or None."""
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == target:
                return i, j
    return None