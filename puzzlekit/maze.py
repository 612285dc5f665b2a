"""Shortest path through a cube of five stackable, rotatable 5x5 layers."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Sequence

SIZE = 5
LAYERS = 5
NO_PATH = -1
_CELLS = SIZE * SIZE * LAYERS
_PER_LAYER = SIZE * SIZE
_BEST_POSSIBLE = 3 * (SIZE - 1)


def _bits(predicate) -> int:
    mask = 0
    for index in range(_CELLS):
        layer, rest = divmod(index, _PER_LAYER)
        y, x = divmod(rest, SIZE)
        if predicate(layer, y, x):
            mask |= 1 << index
    return mask


_NOT_X_FIRST = _bits(lambda _l, _y, x: x != 0)
_NOT_X_LAST = _bits(lambda _l, _y, x: x != SIZE - 1)
_NOT_Y_FIRST = _bits(lambda _l, y, _x: y != 0)
_NOT_Y_LAST = _bits(lambda _l, y, _x: y != SIZE - 1)
_START = 1
_GOAL = 1 << (_CELLS - 1)
_LAYER_ENTRY = 1
_LAYER_EXIT = 1 << (_PER_LAYER - 1)


def rotate_layer(layer: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return ``layer`` turned a quarter clockwise."""
    return [list(row) for row in zip(*reversed(layer))]


def parse_layers(text: str) -> list[list[list[int]]]:
    """Read five 5x5 layers of 0 (wall) and 1 (open) cells."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"layers must contain integers only: {exc}") from None
    if len(numbers) < _CELLS:
        raise ValueError(f"{_CELLS} cells are required, got {len(numbers)}")
    if any(value not in (0, 1) for value in numbers[:_CELLS]):
        raise ValueError("cells must be 0 or 1")
    rows = [numbers[start : start + SIZE] for start in range(0, _CELLS, SIZE)]
    return [rows[start : start + SIZE] for start in range(0, LAYERS * SIZE, SIZE)]


def _layer_mask(layer: Sequence[Sequence[int]]) -> int:
    mask = 0
    for y, row in enumerate(layer):
        for x, cell in enumerate(row):
            if cell:
                mask |= 1 << (y * SIZE + x)
    return mask


def _variants(layer: Sequence[Sequence[int]]) -> list[int]:
    masks = []
    current = [list(row) for row in layer]
    for _ in range(4):
        masks.append(_layer_mask(current))
        current = rotate_layer(current)
    return masks


def _distance(open_cells: int, limit: int) -> int | None:
    """Return the number of moves from start to goal if below ``limit``."""
    visited = frontier = _START
    steps = 0
    while frontier and steps < limit:
        if frontier & _GOAL:
            return steps
        spread = (
            ((frontier << 1) & _NOT_X_FIRST)
            | ((frontier >> 1) & _NOT_X_LAST)
            | ((frontier << SIZE) & _NOT_Y_FIRST)
            | ((frontier >> SIZE) & _NOT_Y_LAST)
            | (frontier << _PER_LAYER)
            | (frontier >> _PER_LAYER)
        )
        frontier = spread & open_cells & ~visited
        visited |= frontier
        steps += 1
    return None


def _check_shape(layers: Sequence[Sequence[Sequence[int]]]) -> None:
    if len(layers) != LAYERS or any(
        len(layer) != SIZE or any(len(row) != SIZE for row in layer)
        for layer in layers
    ):
        raise ValueError(f"expected {LAYERS} layers of {SIZE}x{SIZE} cells")


def shortest_escape(layers: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the fewest moves over every stacking order and rotation, or -1.

    The path runs from the top-left corner of the first layer to the
    bottom-right corner of the last, moving to side-by-side cells or to the
    same cell of an adjacent layer, through open cells only.
    """
    _check_shape(layers)
    variants = [_variants(layer) for layer in layers]
    best = _CELLS + 1
    for order in itertools.permutations(range(LAYERS)):
        for turns in itertools.product(range(4), repeat=LAYERS):
            masks = [variants[index][turn] for index, turn in zip(order, turns)]
            if not masks[0] & _LAYER_ENTRY or not masks[-1] & _LAYER_EXIT:
                continue
            open_cells = 0
            for depth, mask in enumerate(masks):
                open_cells |= mask << (depth * _PER_LAYER)
            found = _distance(open_cells, best)
            if found is not None:
                best = found
                if best == _BEST_POSSIBLE:
                    return best
    return NO_PATH if best > _CELLS else best


def main(argv: list[str] | None = None) -> int:
    """Read five layers from standard input and print the shortest escape."""
    parser = argparse.ArgumentParser(
        description="Find the shortest path through five stackable layers."
    )
    parser.parse_args(argv)
    sys.stdout.write(str(shortest_escape(parse_layers(sys.stdin.read()))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())