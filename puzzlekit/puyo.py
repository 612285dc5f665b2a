"""Count chain reactions on a 12 by 6 falling-blocks field."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable

ROWS = 12
COLUMNS = 6
EMPTY = "."
_MIN_GROUP = 4


def parse_field(text: str) -> list[str]:
    """Read a field of 12 rows of 6 cells, ignoring whitespace."""
    cells = "".join(text.split())
    if len(cells) < ROWS * COLUMNS:
        raise ValueError(f"a field needs {ROWS * COLUMNS} cells, got {len(cells)}")
    return [cells[start : start + COLUMNS] for start in range(0, ROWS * COLUMNS, COLUMNS)]


def _group(grid: list[list[str]], start: tuple[int, int], seen: set) -> list:
    colour = grid[start[0]][start[1]]
    seen.add(start)
    stack = [start]
    members = []
    while stack:
        y, x = stack.pop()
        members.append((y, x))
        for ny, nx in ((y - 1, x), (y, x + 1), (y + 1, x), (y, x - 1)):
            if (
                0 <= ny < ROWS
                and 0 <= nx < COLUMNS
                and (ny, nx) not in seen
                and grid[ny][nx] == colour
            ):
                seen.add((ny, nx))
                stack.append((ny, nx))
    return members


def _settle(grid: list[list[str]]) -> None:
    for x in range(COLUMNS):
        blocks = [grid[y][x] for y in reversed(range(ROWS)) if grid[y][x] != EMPTY]
        blocks += [EMPTY] * (ROWS - len(blocks))
        for y, cell in zip(reversed(range(ROWS)), blocks):
            grid[y][x] = cell


def chain_count(rows: Iterable[str]) -> int:
    """Return how many rounds of popping happen before the field is stable."""
    grid = [list(row) for row in rows]
    if len(grid) != ROWS or any(len(row) != COLUMNS for row in grid):
        raise ValueError(f"the field must be {ROWS} rows of {COLUMNS} cells")

    chains = 0
    while True:
        seen: set = set()
        popped = False
        for y, x in itertools.product(range(ROWS), range(COLUMNS)):
            if grid[y][x] == EMPTY or (y, x) in seen:
                continue
            members = _group(grid, (y, x), seen)
            if len(members) >= _MIN_GROUP:
                popped = True
                for my, mx in members:
                    grid[my][mx] = EMPTY
        _settle(grid)
        if not popped:
            return chains
        chains += 1


def main(argv: list[str] | None = None) -> int:
    """Read a field from standard input and print its chain count."""
    parser = argparse.ArgumentParser(
        description="Count chain reactions on a 12x6 field read from standard input."
    )
    parser.parse_args(argv)
    sys.stdout.write(str(chain_count(parse_field(sys.stdin.read()))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())