"""Median of the union of two sorted sequences."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import islice


def median_of_sorted(a: Sequence[float], b: Sequence[float]) -> float:
    """Median of all values in two ascending sequences taken together."""
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("median of two empty sequences")
    prefix = list(islice(heapq.merge(a, b), total // 2 + 1))
    if total % 2:
        return float(prefix[-1])
    return (prefix[-1] + prefix[-2]) / 2