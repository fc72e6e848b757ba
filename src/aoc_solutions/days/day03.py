"""Day 3: pick the largest joltage from each battery bank."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from ..frames import GridFrame, GridVisualization, color_for_step
from ..inputs import read_lines

DAY = 3
SHORT_WIDTH = 2
LONG_WIDTH = 12
VISUALIZATION_ID = "greedy-pick"
VISUALIZATION_TITLE = "Greedy digit picks"


def parse(path: str | Path) -> List[str]:
    return [line.strip() for line in read_lines(path) if line.strip()]


def _highest_in_range(digits: str, start: int, end: int) -> Tuple[str, int]:
    """Return the leftmost highest digit in ``digits[start:end + 1]`` and its index."""

    best, index = "", -1
    for position in range(start, end + 1):
        if digits[position] > best:
            best, index = digits[position], position
    return best, index


def pick_digits(bank: str, width: int) -> List[Tuple[str, int, int, int]]:
    """Return ``(digit, index, window_start, window_end)`` for each greedy pick."""

    picks = []
    start = 0
    for pick in range(width):
        end = len(bank) - (width - pick)
        digit, index = _highest_in_range(bank, start, end)
        picks.append((digit, index, start, end))
        start = index + 1
    return picks


def max_joltage(bank: str, width: int) -> int:
    return int("".join(digit for digit, _, _, _ in pick_digits(bank, width)))


def part1(banks: Sequence[str]) -> int:
    return sum(max_joltage(bank, SHORT_WIDTH) for bank in banks)


def part2(banks: Sequence[str]) -> int:
    return sum(max_joltage(bank, LONG_WIDTH) for bank in banks)


def build_visualization(banks: Sequence[str], width: int = LONG_WIDTH) -> GridVisualization:
    """Three rows per bank: the digits, the search window, the picked digits."""

    cols = max([width, *(len(bank) for bank in banks)])
    results = [["."] * width for _ in banks]
    windows = [["."] * cols for _ in banks]

    def render() -> List[str]:
        rows = []
        for index, bank in enumerate(banks):
            rows.append(bank.ljust(cols, "."))
            rows.append("".join(windows[index]))
            rows.append("".join(results[index]))
        return rows

    palette = {
        ".": {"bg": "#111827", "fg": "#6b7280"},
        "^": {"bg": "#3b82f6", "fg": "#0b111d"},
    }
    frames = [GridFrame(grid=render(), action="Initial digits")]

    for line, bank in enumerate(banks):
        marker = str((line + 1) % 10)
        palette.setdefault(marker, color_for_step(line, 53))
        frames.append(GridFrame(grid=render(), action=f"Line {line + 1}: start"))

        for pick, (digit, index, start, end) in enumerate(pick_digits(bank, width)):
            results[line][pick] = digit
            windows[line] = ["^" if start <= col <= end else "." for col in range(cols)]
            frames.append(
                GridFrame(
                    grid=render(),
                    action=f"Line {line + 1} pick #{pick + 1}: {digit} (index range {start}-{end})",
                    position=(line * 3, index),
                    marker=marker,
                )
            )

    return GridVisualization(rows=len(frames[0].grid), cols=cols, frames=frames, palette=palette)
