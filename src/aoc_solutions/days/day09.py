"""Day 9: largest rectangle between red tiles."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from ..inputs import read_lines

DAY = 9

Tile = Tuple[int, int]


def parse(path: str | Path) -> List[Tile]:
    tiles = []
    for line in read_lines(path):
        if not line.strip():
            continue
        x, y = line.split(",")
        tiles.append((int(x), int(y)))
    return tiles


def area(a: Tile, b: Tile) -> int:
    return (abs(a[0] - b[0]) + 1) * (abs(a[1] - b[1]) + 1)


def part1(tiles: Sequence[Tile]) -> int:
    best = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            best = max(best, area(tiles[i], tiles[j]))
    return best


def _filled_grid(compressed: Sequence[Tile], width: int, height: int) -> np.ndarray:
    """Rasterise the loop on the compressed grid and fill cells it encloses.

    A cell counts as inside when the border appears on all four sides of it.
    """

    grid = np.zeros((height, width), dtype=bool)
    for index, (x, y) in enumerate(compressed):
        nx, ny = compressed[(index + 1) % len(compressed)]
        grid[min(y, ny) : max(y, ny) + 1, min(x, nx) : max(x, nx) + 1] = True

    left = np.logical_or.accumulate(grid, axis=1)
    right = np.logical_or.accumulate(grid[:, ::-1], axis=1)[:, ::-1]
    above = np.logical_or.accumulate(grid, axis=0)
    below = np.logical_or.accumulate(grid[::-1, :], axis=0)[::-1, :]

    filled = grid.copy()
    filled[1:-1, 1:-1] |= (
        ~grid[1:-1, 1:-1]
        & left[1:-1, :-2]
        & right[1:-1, 2:]
        & above[:-2, 1:-1]
        & below[2:, 1:-1]
    )
    return filled


def part2(tiles: Sequence[Tile]) -> int:
    if not tiles:
        return 0
    xs = sorted({x for x, _ in tiles})
    ys = sorted({y for _, y in tiles})
    x_index = {x: i for i, x in enumerate(xs)}
    y_index = {y: i for i, y in enumerate(ys)}
    compressed = [(x_index[x], y_index[y]) for x, y in tiles]

    filled = _filled_grid(compressed, len(xs), len(ys))

    best = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            candidate = area(tiles[i], tiles[j])
            if candidate <= best:
                continue
            (cx1, cy1), (cx2, cy2) = compressed[i], compressed[j]
            block = filled[min(cy1, cy2) : max(cy1, cy2) + 1, min(cx1, cx2) : max(cx1, cx2) + 1]
            if block.all():
                best = candidate
    return best
