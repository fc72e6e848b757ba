"""Day 4: forklift access to paper rolls."""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import List, Sequence, Set, Tuple

from ..frames import GridFrame, GridVisualization, color_for_step
from ..inputs import read_grid

DAY = 4
ROLL = "@"
CROWDED = 4
VISUALIZATION_ID = "grid-fill"
VISUALIZATION_TITLE = "Paper roll removal waves"
WAVE_SYMBOLS = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

NEIGHBOURS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

Cell = Tuple[int, int]


def parse(path: str | Path) -> List[List[str]]:
    return read_grid(path)


def _rolls(grid: Sequence[Sequence[str]]) -> Set[Cell]:
    return {(row, col) for row, line in enumerate(grid) for col, char in enumerate(line) if char == ROLL}


def _adjacent(rolls: Set[Cell], cell: Cell) -> int:
    row, col = cell
    return sum((row + dr, col + dc) in rolls for dr, dc in NEIGHBOURS)


def part1(grid: Sequence[Sequence[str]]) -> int:
    rolls = _rolls(grid)
    return sum(_adjacent(rolls, cell) < CROWDED for cell in rolls)


def part2(grid: Sequence[Sequence[str]]) -> int:
    rolls = _rolls(grid)
    removed = 0
    while True:
        accessible = [cell for cell in rolls if _adjacent(rolls, cell) < CROWDED]
        if not accessible:
            return removed
        rolls.difference_update(accessible)
        removed += len(accessible)


def _count_neighbours(grid: List[List[str]], row: int, col: int) -> int:
    count = 0
    for dr, dc in NEIGHBOURS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == ROLL:
            count += 1
    return count


def _wave_marker(wave: int) -> str:
    return WAVE_SYMBOLS[wave % len(WAVE_SYMBOLS)]


def build_visualization(grid: Sequence[Sequence[str]]) -> GridVisualization:
    """Remove rolls from a queue, tagging each removal with its wave number."""

    working = [[char for char in line if char != "\r"] for line in grid]

    def capture(action: str, position: Cell | None = None, marker: str | None = None) -> GridFrame:
        return GridFrame(grid=["".join(line) for line in working], action=action, position=position, marker=marker)

    palette = {
        ROLL: {"bg": "#059669", "fg": "#e5e7eb"},
        ".": {"bg": "#111827", "fg": "#6b7280"},
    }
    frames = [capture("Initial grid")]

    queue: deque[Cell] = deque(
        (row, col)
        for row, line in enumerate(working)
        for col, char in enumerate(line)
        if char == ROLL and _count_neighbours(working, row, col) < CROWDED
    )
    frames.append(capture("Seeded paper rolls"))

    wave = 0
    wave_remaining = len(queue)
    next_wave = 0
    while queue:
        row, col = queue.popleft()
        # duplicates still count towards the wave they were queued in
        if working[row][col] == ROLL:
            marker = _wave_marker(wave)
            palette.setdefault(marker, color_for_step(wave, 47))
            working[row][col] = marker

            for dr, dc in NEIGHBOURS:
                r, c = row + dr, col + dc
                if 0 <= r < len(working) and 0 <= c < len(working[r]) and working[r][c] == ROLL:
                    if _count_neighbours(working, r, c) < CROWDED:
                        queue.append((r, c))
                        next_wave += 1

            frames.append(capture(f"Wave {wave + 1}: removed paper roll ({row}, {col})", (row, col), marker))

        wave_remaining -= 1
        if wave_remaining == 0:
            wave += 1
            wave_remaining = next_wave
            next_wave = 0

    return GridVisualization(
        rows=len(working),
        cols=len(working[0]) if working else 0,
        frames=frames,
        palette=palette,
    )
