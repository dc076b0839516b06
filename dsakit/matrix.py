"""Grid puzzles: hourglass sums, counting negatives and zeroing rows/columns."""

from __future__ import annotations

from collections.abc import Sequence


def hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Largest sum of any 3x3 hourglass (top row, centre, bottom row) in the grid."""
    rows = len(grid)
    cols = min((len(row) for row in grid), default=0)
    if rows < 3 or cols < 3:
        raise ValueError("grid must be at least 3x3")
    return max(
        sum(grid[i - 1][j - 1:j + 2]) + grid[i][j] + sum(grid[i + 1][j - 1:j + 2])
        for i in range(1, rows - 1)
        for j in range(1, cols - 1)
    )


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negative values in a grid whose rows are in non-increasing order."""
    total = 0
    for row in grid:
        low, high = 0, len(row) - 1
        first_negative = len(row)
        while low <= high:
            mid = low + (high - low) // 2
            if row[mid] < 0:
                first_negative = mid
                high = mid - 1
            else:
                low = mid + 1
        total += len(row) - first_negative
    return total


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a zero is all zeros."""
    zero_rows: set[int] = set()
    zero_cols: set[int] = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]