"""Backtracking puzzles: N queens, a rat in a maze and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One step of the towers of Hanoi: a disk moved between two rods."""

    disk: int
    source: str
    target: str


def n_queens_count(n: int) -> int:
    """Number of ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return total

    return place(0)


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of open cells (value 1) from the top-left to the bottom-right.

    Moves go down a row or right a column.  Returns a grid marking the path
    with 1s, or None when no path exists.
    """
    rows = len(maze)
    if rows == 0:
        return None
    cols = len(maze[0])
    solution = [[0] * cols for _ in range(rows)]

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < len(maze[x]) and maze[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and is_open(x, y):
            solution[x][y] = 1
            return True
        if not is_open(x, y) or solution[x][y] == 1:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """The moves that carry n disks from source to target."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    moves: list[Move] = []

    def move(disks: int, src: str, dst: str, via: str) -> None:
        if disks == 0:
            return
        move(disks - 1, src, via, dst)
        moves.append(Move(disks, src, dst))
        move(disks - 1, via, dst, src)

    move(n, source, target, auxiliary)
    return moves