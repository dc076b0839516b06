"""Array puzzles: pair and quadruple sums, subarrays, rectangles and greedy picks."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import Any


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices (i, j), j < i, with nums[i] + nums[j] == target, or None.

    The pair returned is the first one completed while scanning left to right.
    """
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return i, seen[partner]
        seen[value] = i
    return None


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Every distinct sorted quadruple of values that adds up to target."""
    data = sorted(nums)
    n = len(data)
    result: list[list[int]] = []
    if n < 4:
        return result
    i = 0
    while i < n:
        j = i + 1
        while j < n:
            remainder = target - data[i] - data[j]
            low, high = j + 1, n - 1
            while low < high:
                pair = data[low] + data[high]
                if pair > remainder:
                    high -= 1
                elif pair < remainder:
                    low += 1
                else:
                    quad = [data[i], data[j], data[low], data[high]]
                    result.append(quad)
                    while low < high and data[low] == quad[2]:
                        low += 1
                    while low < high and data[high] == quad[3]:
                        high -= 1
            while j + 1 < n and data[j] == data[j + 1]:
                j += 1
            j += 1
        while i + 1 < n and data[i] == data[i + 1]:
            i += 1
        i += 1
    return result


def longest_arithmetic_subarray(nums: Sequence[int]) -> int:
    """Length of the longest contiguous run with a constant difference."""
    if len(nums) < 2:
        raise ValueError("at least two values are required")
    difference = nums[1] - nums[0]
    current = best = 2
    for previous, value in zip(nums[1:], nums[2:]):
        if value - previous == difference:
            current += 1
        else:
            difference = value - previous
            current = 2
        best = max(best, current)
    return best


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    best: float = -math.inf
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    if best == -math.inf:
        raise ValueError("max_subarray_sum of an empty sequence")
    return int(best)


def largest_rectangle(heights: Iterable[int]) -> int:
    """Largest rectangle area under a histogram, in linear time."""
    data = list(heights)
    best = 0
    stack: list[int] = []
    for i, height in enumerate([*data, 0]):
        while stack and data[stack[-1]] > height:
            top = stack.pop()
            width = i if not stack else i - stack[-1] - 1
            best = max(best, data[top] * width)
        stack.append(i)
    return best


def largest_rectangle_bruteforce(heights: Iterable[int]) -> int:
    """Largest rectangle area under a histogram, trying every range."""
    data = list(heights)
    best = 0
    for i in range(len(data)):
        lowest = data[i]
        for j in range(i, len(data)):
            lowest = min(lowest, data[j])
            best = max(best, (j - i + 1) * lowest)
    return best


def advantage_shuffle(nums1: Iterable[int], nums2: Sequence[int]) -> list[int]:
    """Arrange nums1 to beat nums2 position by position as often as possible.

    Each position gets the smallest remaining value larger than nums2's,
    or the smallest remaining value when none is larger.
    """
    pool = sorted(nums1)
    if len(pool) != len(nums2):
        raise ValueError("both sequences must have the same length")
    result: list[int] = []
    for value in nums2:
        k = bisect_right(pool, value)
        result.append(pool.pop(k if k < len(pool) else 0))
    return result


def next_greater_elements(nums: Sequence[Any]) -> list[Any]:
    """For each value, the nearest larger value to its right, or None."""
    result: list[Any] = [None] * len(nums)
    stack: list[Any] = []
    for i in reversed(range(len(nums))):
        while stack and stack[-1] <= nums[i]:
            stack.pop()
        result[i] = stack[-1] if stack else None
        stack.append(nums[i])
    return result


def min_product_subset(nums: Iterable[int]) -> int:
    """Smallest product of any non-empty subset of the values."""
    data = list(nums)
    if not data:
        raise ValueError("min_product_subset of an empty sequence")
    if len(data) == 1:
        return data[0]
    negatives = [value for value in data if value < 0]
    positives = [value for value in data if value > 0]
    zeros = len(data) - len(negatives) - len(positives)
    if zeros == len(data) or (not negatives and zeros):
        return 0
    if not negatives:
        return min(positives)
    product = math.prod(value for value in data if value)
    if len(negatives) % 2 == 0:
        product //= max(negatives)
    return product