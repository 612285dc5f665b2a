"""Find how many opponent stones two extra stones can capture."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections import Counter, deque
from collections.abc import Iterable, Sequence

EMPTY = 0
MINE = 1
THEIRS = 2
_VALUES = {EMPTY, MINE, THEIRS}


def parse_board(text: str) -> list[list[int]]:
    """Read ``rows cols`` followed by ``rows * cols`` cell values."""
    tokens = text.split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"board must contain integers only: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("board must start with its row and column counts")
    rows, cols = numbers[0], numbers[1]
    if rows < 0 or cols < 0:
        raise ValueError(f"invalid board size {rows}x{cols}")
    cells = numbers[2:]
    if len(cells) < rows * cols:
        raise ValueError(f"a {rows}x{cols} board needs {rows * cols} cells, got {len(cells)}")
    return [cells[start : start + cols] for start in range(0, rows * cols, cols)]


def _validate(board: Iterable[Sequence[int]]) -> list[list[int]]:
    grid = [list(row) for row in board]
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("all board rows must have the same length")
    for row in grid:
        for cell in row:
            if cell not in _VALUES:
                raise ValueError(f"invalid cell value: {cell!r}")
    return grid


def _group(
    grid: list[list[int]], start: tuple[int, int], seen: set[tuple[int, int]]
) -> tuple[int, set[tuple[int, int]]]:
    """Return the size of the group at ``start`` and its liberties."""
    rows, cols = len(grid), len(grid[0])
    seen.add(start)
    queue = deque([start])
    size = 0
    liberties: set[tuple[int, int]] = set()
    while queue:
        y, x = queue.popleft()
        size += 1
        for ny, nx in ((y - 1, x), (y, x + 1), (y + 1, x), (y, x - 1)):
            if not (0 <= ny < rows and 0 <= nx < cols):
                continue
            cell = grid[ny][nx]
            if cell == EMPTY:
                liberties.add((ny, nx))
            elif cell == THEIRS and (ny, nx) not in seen:
                seen.add((ny, nx))
                queue.append((ny, nx))
    return size, liberties


def max_captured(board: Iterable[Sequence[int]]) -> int:
    """Return the most opponent stones that placing two stones can capture.

    Cells are 0 (empty), 1 (own stone) or 2 (opponent stone).  A group is
    captured when every empty cell next to it is covered by a new stone.
    """
    grid = _validate(board)
    if not grid or not grid[0]:
        return 0

    single: Counter[tuple[int, int]] = Counter()
    double: Counter[frozenset[tuple[int, int]]] = Counter()
    seen: set[tuple[int, int]] = set()
    for y, x in itertools.product(range(len(grid)), range(len(grid[0]))):
        if grid[y][x] != THEIRS or (y, x) in seen:
            continue
        size, liberties = _group(grid, (y, x), seen)
        if len(liberties) == 1:
            single[next(iter(liberties))] += size
        elif len(liberties) == 2:
            double[frozenset(liberties)] += size

    best = sum(total for _, total in single.most_common(2))
    for pair, total in double.items():
        first, second = pair
        best = max(best, total + single[first] + single[second])
    return best


def main(argv: list[str] | None = None) -> int:
    """Read a board from standard input and print the best capture count."""
    parser = argparse.ArgumentParser(
        description="Count the stones two extra stones can capture."
    )
    parser.parse_args(argv)
    sys.stdout.write(str(max_captured(parse_board(sys.stdin.read()))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())