"""Solved days, keyed by day number."""

from __future__ import annotations

from types import ModuleType
from typing import Dict

from . import day03, day04, day05, day07, day08, day09, day11

SOLUTIONS: Dict[int, ModuleType] = {
    module.DAY: module for module in (day03, day04, day05, day07, day08, day09, day11)
}


def get_solution(day: int) -> ModuleType:
    try:
        return SOLUTIONS[day]
    except KeyError:
        raise KeyError(f"no solution for day {day:02d}") from None


def has_visualization(module: ModuleType) -> bool:
    return hasattr(module, "build_visualization")


__all__ = ["SOLUTIONS", "get_solution", "has_visualization"]
