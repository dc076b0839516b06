"""First-in first-out page replacement."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable


def fifo_page_faults(pages: Iterable[Hashable], capacity: int) -> int:
    """Count page faults for a reference string under FIFO replacement."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    resident: set[Hashable] = set()
    order: deque[Hashable] = deque()
    faults = 0
    for page in pages:
        if page in resident:
            continue
        if len(resident) == capacity:
            resident.discard(order.popleft())
        resident.add(page)
        order.append(page)
        faults += 1
    return faults