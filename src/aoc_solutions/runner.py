"""Convenience helpers for solving days end-to-end."""

from __future__ import annotations

import errno
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd
import requests
from tqdm import tqdm

from .days import SOLUTIONS, get_solution
from .inputs import InputConfig, fetch_input, input_path

RESULT_COLUMNS = ["day", "part1", "part2", "runtime_seconds", "input"]


@dataclass
class SolverConfig:
    """Configuration for solving one or more days."""

    inputs: InputConfig = field(default_factory=InputConfig)
    use_example: bool = False
    filename: str | None = None
    fetch_missing: bool = False
    use_tqdm: bool = True
    verbose: bool = True


@dataclass
class DayResult:
    """Answers and timing for a single day."""

    day: int
    part1: int
    part2: int
    input_path: Path
    runtime_seconds: float


def solve_day(day: int, config: Optional[SolverConfig] = None) -> DayResult:
    """Parse the day's input and compute both answers.

    Raises ``KeyError`` for unsolved days, ``FileNotFoundError`` for missing
    input and whatever the day's solution raises on unusable input.
    """

    config = config or SolverConfig()
    verbose = config.verbose
    module = get_solution(day)
    path = input_path(config.inputs, day, use_example=config.use_example, filename=config.filename)
    if not path.exists() and config.fetch_missing and not config.use_example and config.filename is None:
        if verbose:
            print(f"   Input for day {day:02d} missing, downloading...")
        path = fetch_input(day, config.inputs)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))

    overall_start_time = time.time()
    if verbose:
        print(f"--- Day {day:02d} ({path.name}) ---")
        print("1. Parsing input...")
    t0 = time.time()
    data = module.parse(path)
    if verbose:
        print(f"   Done in {time.time() - t0:.2f}s")

    answers = []
    for part, solve in enumerate((module.part1, module.part2), start=1):
        t0 = time.time()
        if verbose:
            print(f"{part + 1}. Solving part {part}...")
        answers.append(solve(data))
        if verbose:
            print(f"   Part {part}: {answers[-1]}")
            print(f"   Done in {time.time() - t0:.2f}s")

    return DayResult(
        day=day,
        part1=answers[0],
        part2=answers[1],
        input_path=path,
        runtime_seconds=time.time() - overall_start_time,
    )


def run_day(day: int, config: Optional[SolverConfig] = None) -> DayResult | None:
    """Solve ``day`` and report problems instead of raising."""

    if day not in SOLUTIONS:
        print(f"ERROR: No solution registered for day {day:02d}.")
        return None
    try:
        return solve_day(day, config)
    except FileNotFoundError as exc:
        print(f"ERROR: Input file not found at '{exc.filename}'. Add it or pass --fetch.")
    except ValueError as exc:
        print(f"ERROR: Day {day:02d}: {exc}")
    except (RuntimeError, requests.exceptions.RequestException) as exc:
        print(f"ERROR: Could not download input for day {day:02d}: {exc}")
    return None


def run_days(days: Iterable[int], config: Optional[SolverConfig] = None) -> pd.DataFrame:
    """Solve several days and collect the answers into a table."""

    config = config or SolverConfig()
    days = list(days)
    iterator: Iterable[int] = days
    if days and config.use_tqdm:
        iterator = tqdm(days, desc="   Solving", unit="day")

    rows: List[dict] = []
    for day in iterator:
        result = run_day(day, config)
        if result is None:
            continue
        rows.append(
            {
                "day": result.day,
                "part1": result.part1,
                "part2": result.part2,
                "runtime_seconds": result.runtime_seconds,
                "input": str(result.input_path),
            }
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def save_results(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "DayResult",
    "SolverConfig",
    "run_day",
    "run_days",
    "save_results",
    "solve_day",
]
