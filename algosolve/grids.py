"""Grid searches: word paths, islands, shortest routes and diagonal sorting."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from typing import Sequence

_STEPS4 = ((1, 0), (0, -1), (-1, 0), (0, 1))
_STEPS8 = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy)

_SOLVED = (1, 2, 3, 4, 5, 0)
# Cells of a 2x3 board, numbered row by row, that the blank may swap with.
_SLIDES = {0: (3, 1), 1: (4, 0, 2), 2: (5, 1), 3: (0, 4), 4: (1, 3, 5), 5: (2, 4)}


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    return len(grid), len(grid[0])


def _neighbours(x: int, y: int, rows: int, cols: int, steps=_STEPS4):
    for dx, dy in steps:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through side-adjacent cells, each used once."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def search(x: int, y: int, index: int) -> bool:
        if index == len(word):
            return True
        used.add((x, y))
        try:
            return any(
                (nx, ny) not in used
                and board[nx][ny] == word[index]
                and search(nx, ny, index + 1)
                for nx, ny in _neighbours(x, y, rows, cols)
            )
        finally:
            used.discard((x, y))

    return any(
        board[x][y] == word[0] and search(x, y, 1)
        for x in range(rows)
        for y in range(cols)
    )


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of side-connected groups of ``'1'`` cells."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for x in range(rows):
        for y in range(cols):
            if grid[x][y] != "1" or (x, y) in seen:
                continue
            islands += 1
            seen.add((x, y))
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for nx, ny in _neighbours(cx, cy, rows, cols):
                    if grid[nx][ny] == "1" and (nx, ny) not in seen:
                        seen.add((nx, ny))
                        stack.append((nx, ny))
    return islands


def sliding_puzzle(board: Sequence[Sequence[int]]) -> int:
    """Fewest moves to bring a 2x3 board to ``[[1, 2, 3], [4, 5, 0]]``; -1 if impossible."""
    if len(board) != 2 or any(len(row) != 3 for row in board):
        raise ValueError("board must have 2 rows of 3 cells")
    start = tuple(value for row in board for value in row)
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        state, steps = queue.popleft()
        if state == _SOLVED:
            return steps
        if 0 not in state:
            break
        blank = state.index(0)
        for other in _SLIDES[blank]:
            cells = list(state)
            cells[blank], cells[other] = cells[other], cells[blank]
            following = tuple(cells)
            if following not in seen:
                seen.add(following)
                queue.append((following, steps + 1))
    return -1


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-connected path of zeros between opposite corners; -1 if none."""
    rows, cols = _shape(grid)
    if grid[0][0] != 0:
        return -1
    seen = {(0, 0)}
    queue = deque([((0, 0), 1)])
    while queue:
        (x, y), length = queue.popleft()
        if (x, y) == (rows - 1, cols - 1):
            return length
        for nx, ny in _neighbours(x, y, rows, cols, _STEPS8):
            if grid[nx][ny] == 0 and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append(((nx, ny), length + 1))
    return -1


def minimum_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Fewest obstacles (cells equal to 1) to remove to walk between opposite corners."""
    rows, cols = _shape(grid)
    dist = [[math.inf] * cols for _ in range(rows)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            cost = 1 if grid[nx][ny] == 1 else 0
            candidate = dist[x][y] + cost
            if candidate < dist[nx][ny]:
                dist[nx][ny] = candidate
                if cost:
                    queue.append((nx, ny))
                else:
                    queue.appendleft((nx, ny))
    return int(dist[-1][-1])


def sort_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """A copy with diagonals on and below the main one in descending order, others ascending."""
    _shape(grid)
    diagonals: dict[int, list[int]] = defaultdict(list)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            diagonals[i - j].append(value)
    ordered = {
        key: iter(sorted(values, reverse=key >= 0)) for key, values in diagonals.items()
    }
    return [
        [next(ordered[i - j]) for j in range(len(row))] for i, row in enumerate(grid)
    ]