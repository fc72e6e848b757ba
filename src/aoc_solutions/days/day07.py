"""Day 7: tachyon beam splitters."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import List, Sequence

from ..inputs import read_grid

DAY = 7
START = "S"
SPLITTER = "^"


def parse(path: str | Path) -> List[List[str]]:
    return read_grid(path)


def part1(grid: Sequence[Sequence[str]]) -> int:
    """Count splits; beams landing on the same column merge."""

    width = len(grid[0])
    beams = {list(grid[0]).index(START)}
    splits = 0
    for row in grid:
        next_beams = set()
        for col in beams:
            if not 0 <= col < width:
                continue
            if row[col] == SPLITTER:
                splits += 1
                next_beams.update((col - 1, col + 1))
            else:
                next_beams.add(col)
        beams = next_beams
    return splits


def part2(grid: Sequence[Sequence[str]]) -> int:
    """Count timelines; every split doubles the beams passing through it."""

    width = len(grid[0])
    beams = Counter({list(grid[0]).index(START): 1})
    for row in grid:
        next_beams: Counter[int] = Counter()
        for col, count in beams.items():
            if not 0 <= col < width:
                continue
            if row[col] == SPLITTER:
                next_beams[col - 1] += count
                next_beams[col + 1] += count
            else:
                next_beams[col] += count
        beams = next_beams
    return sum(beams.values())
