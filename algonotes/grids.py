"""Breadth- and depth-first searches over rectangular grids and a chessboard."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Cell = tuple[int, int]

_FOUR_WAY = ((-1, 0), (1, 0), (0, -1), (0, 1))
_EIGHT_WAY = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))
_KNIGHT_MOVES = ((-1, 2), (1, 2), (-1, -2), (1, -2), (2, -1), (2, 1), (-2, -1), (-2, 1))
_BOARD_SIZE = 8


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, new_color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the 4-connected region at (sr, sc) recoloured."""
    filled = [list(row) for row in image]
    if not (0 <= sr < len(filled) and 0 <= sc < len(filled[sr])):
        raise ValueError(f"start cell ({sr}, {sc}) is outside the image")
    initial = filled[sr][sc]
    if initial == new_color:
        return filled
    filled[sr][sc] = new_color
    stack = [(sr, sc)]
    while stack:
        i, j = stack.pop()
        for di, dj in _FOUR_WAY:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(filled) and 0 <= nj < len(filled[ni]):
                if filled[ni][nj] == initial:
                    filled[ni][nj] = new_color
                    stack.append((ni, nj))
    return filled


def spread_time(grid: Sequence[Sequence[int]]) -> int:
    """Steps needed for the largest value to reach every cell, moving 8-way.

    Every cell holding the maximum starts at step 0; each step spreads to all
    neighbouring cells, diagonals included. An empty grid takes 0 steps.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    if rows == 0 or cols == 0:
        return 0
    peak = max(max(row) for row in grid)
    level: dict[Cell, int] = {
        (i, j): 0
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
        if value == peak
    }
    queue = deque(level)
    longest = 0
    while queue:
        x, y = queue.popleft()
        for dx, dy in _EIGHT_WAY:
            child = (x + dx, y + dy)
            if not (0 <= child[0] < rows and 0 <= child[1] < cols):
                continue
            if child in level:
                continue
            level[child] = level[(x, y)] + 1
            longest = max(longest, level[child])
            queue.append(child)
    return longest


def parse_square(square: str) -> Cell:
    """Turn a chess square such as ``"e4"`` into zero-based (file, rank)."""
    if len(square) != 2:
        raise ValueError(f"not a chess square: {square!r}")
    file_index = ord(square[0]) - ord("a")
    rank_index = ord(square[1]) - ord("1")
    if not (0 <= file_index < _BOARD_SIZE and 0 <= rank_index < _BOARD_SIZE):
        raise ValueError(f"not a chess square: {square!r}")
    return file_index, rank_index


def knight_distance(source: str, dest: str) -> int:
    """Fewest knight moves from ``source`` to ``dest`` on an 8x8 board."""
    start = parse_square(source)
    goal = parse_square(dest)
    level = {start: 0}
    queue = deque([start])
    while queue and goal not in level:
        x, y = queue.popleft()
        for dx, dy in _KNIGHT_MOVES:
            child = (x + dx, y + dy)
            if not (0 <= child[0] < _BOARD_SIZE and 0 <= child[1] < _BOARD_SIZE):
                continue
            if child not in level:
                level[child] = level[(x, y)] + 1
                queue.append(child)
    return level[goal]