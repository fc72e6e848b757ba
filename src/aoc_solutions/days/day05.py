"""Day 5: fresh ingredient ranges."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from ..inputs import read_lines

DAY = 5

Range = Tuple[int, int]


@dataclass
class Inventory:
    ranges: List[Range]
    ingredients: List[int]


def parse(path: str | Path) -> Inventory:
    return parse_lines(read_lines(path))


def parse_lines(lines: List[str]) -> Inventory:
    ranges: List[Range] = []
    ingredients: List[int] = []
    in_ranges = True
    for line in lines:
        line = line.strip()
        if not line:
            in_ranges = False
            continue
        if in_ranges:
            low, high = line.split("-")
            ranges.append((int(low), int(high)))
        else:
            ingredients.append(int(line))
    return Inventory(ranges=ranges, ingredients=ingredients)


def merge_ranges(ranges: List[Range]) -> List[Range]:
    """Merge overlapping and adjacent inclusive ranges."""

    merged: List[List[int]] = []
    for low, high in sorted(ranges):
        if not merged or low > merged[-1][1] + 1:
            merged.append([low, high])
        else:
            merged[-1][1] = max(merged[-1][1], high)
    return [(low, high) for low, high in merged]


def part1(inventory: Inventory) -> int:
    return sum(
        any(low <= ingredient <= high for low, high in inventory.ranges)
        for ingredient in inventory.ingredients
    )


def part2(inventory: Inventory) -> int:
    return sum(high - low + 1 for low, high in merge_ranges(inventory.ranges))
