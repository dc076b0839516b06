"""Classic comparison and distribution sorts.

Every function takes any iterable of values and returns a new sorted list;
the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

DEFAULT_RUN = 32


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    data = list(items)
    for settled in range(len(data) - 1):
        for j in range(len(data) - settled - 1):
            if data[j + 1] < data[j]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and data[j] > current:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining value to the front each pass."""
    data = list(items)
    for i in range(len(data) - 1):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    """Merge two sorted lists, taking from the left one on ties."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(data: list[Any], start: int, end: int) -> int:
    """Place data[start] at its final position within data[start:end+1]."""
    pivot = data[start]
    smaller = sum(1 for value in data[start + 1:end + 1] if value <= pivot)
    pivot_index = start + smaller
    data[pivot_index], data[start] = data[start], data[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while data[i] <= pivot:
            i += 1
        while data[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the first element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(data, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return data


def _require_non_negative(data: list[int], algorithm: str) -> None:
    if any(value < 0 for value in data):
        raise ValueError(f"{algorithm} requires non-negative integers")


def radix_sort(items: Iterable[int]) -> list[int]:
    """LSD radix sort in base 10 for non-negative integers."""
    data = list(items)
    if not data:
        return data
    _require_non_negative(data, "radix sort")
    largest = max(data)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // exp) % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        exp *= 10
    return data


def pigeonhole_sort(items: Iterable[int]) -> list[int]:
    """Pigeonhole sort for integers; memory grows with max - min."""
    data = list(items)
    if not data:
        return data
    low = min(data)
    holes: list[list[int]] = [[] for _ in range(max(data) - low + 1)]
    for value in data:
        holes[value - low].append(value)
    return [value for hole in holes for value in hole]


def counting_sort(items: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    data = list(items)
    if not data:
        return data
    _require_non_negative(data, "counting sort")
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def tim_sort(items: Iterable[Any], run: int = DEFAULT_RUN) -> list[Any]:
    """Insertion-sort fixed-size runs, then merge them bottom-up."""
    if run < 1:
        raise ValueError("run length must be at least 1")
    data = list(items)
    n = len(data)
    for start in range(0, n, run):
        data[start:start + run] = insertion_sort(data[start:start + run])
    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size
            right = min(left + 2 * size, n)
            if mid < right:
                data[left:right] = _merge(data[left:mid], data[mid:right])
        size *= 2
    return data


def sort_stack(stack: Iterable[Any]) -> list[Any]:
    """Sort a stack given bottom-to-top using only a second stack.

    The result is again bottom-to-top, so the largest value ends on top.
    """
    source = list(stack)
    result: list[Any] = []
    while source:
        value = source.pop()
        while result and result[-1] > value:
            source.append(result.pop())
        result.append(value)
    return result