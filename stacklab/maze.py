"""Depth-first search for a way from 'S' to 'E' through a grid maze."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_SIZE = 100
MAX_STACK = 100

Point = tuple[int, int]

# Up, down, left, right: the order in which neighbours are tried.
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PASSABLE = frozenset("0E")


class MazeError(ValueError):
    """Raised when a maze is malformed or too large to search."""


def _locate(rows: list[str]) -> tuple[Point | None, Point | None]:
    start: Point | None = None
    end: Point | None = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "S":
                start = (r, c)
            elif cell == "E":
                end = (r, c)
    return start, end


def find_path(grid: Sequence[str]) -> list[Point] | None:
    """Return the path found from 'S' to 'E' as (row, column) pairs, or None."""
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise MazeError("all rows must have the same length")
    if len(rows) > MAX_SIZE or (rows and len(rows[0]) > MAX_SIZE):
        raise MazeError(f"the maze may be at most {MAX_SIZE}x{MAX_SIZE}")
    start, end = _locate(rows)
    if start is None:
        raise MazeError("the maze has no start 'S'")
    height, width = len(rows), len(rows[0])

    visited = {start}
    stack = [start]
    while stack:
        current = stack[-1]
        if current == end:
            return list(stack)
        row, col = current
        for dr, dc in _DIRECTIONS:
            nr, nc = row + dr, col + dc
            step = (nr, nc)
            if (
                0 <= nr < height
                and 0 <= nc < width
                and step not in visited
                and rows[nr][nc] in _PASSABLE
            ):
                if len(stack) >= MAX_STACK:
                    raise MazeError("the search stack is full")
                visited.add(step)
                stack.append(step)
                break
        else:
            stack.pop()
    return None


def mark_path(grid: Sequence[str], path: Sequence[Point]) -> list[str]:
    """Return a copy of the maze with the path drawn as '*', keeping 'S' and 'E'."""
    cells = [list(row) for row in grid]
    for row, col in path:
        if cells[row][col] not in ("S", "E"):
            cells[row][col] = "*"
    return ["".join(row) for row in cells]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a maze from standard input and print the way out; no arguments are used."""
    print("Enter the maze size (rows cols) and rows (S=start, E=exit, 0=path, 1=wall):")
    tokens = sys.stdin.read().split()
    try:
        height, width = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError):
        print("Error: expected the maze size as two integers")
        return 1
    rows = [row[:width] for row in tokens[2 : 2 + height]]
    if len(rows) < height or any(len(row) < width for row in rows):
        print("Error: the maze is shorter than its size")
        return 1
    try:
        path = find_path(rows)
    except MazeError as exc:
        print(f"Error: {exc}")
        return 1
    if path is None:
        print("No way out of the maze!")
        return 0
    print("Escaped the maze! Path:")
    for row in mark_path(rows, path):
        print("".join(f"{cell} " for cell in row))
    return 0


if __name__ == "__main__":
    sys.exit(main())