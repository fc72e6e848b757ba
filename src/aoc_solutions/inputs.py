"""Puzzle directory layout, input readers and the remote input fetcher."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import requests

from .connectivity import Point

DEFAULT_DATA_DIR = "puzzles"
DEFAULT_INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"
INPUT_FILENAME = "input.txt"
EXAMPLE_FILENAME = "example.txt"


@dataclass(frozen=True)
class YearConfig:
    """Calendar information for one event year."""

    year: int
    total_days: int


YEARS: Dict[int, YearConfig] = {
    2025: YearConfig(year=2025, total_days=12),
}


def get_year_config(year: int) -> YearConfig | None:
    return YEARS.get(year)


@dataclass
class InputConfig:
    """Where puzzle files live and how to download missing inputs."""

    data_dir: Path | None = None
    year: int = 2025
    session: str | None = None
    url: str = ""
    max_retries: int = 3
    timeout_seconds: int = 30
    connection_timeout: int = 10

    def __post_init__(self) -> None:
        if self.data_dir is None:
            self.data_dir = Path(os.getenv("AOC_DATA_DIR", DEFAULT_DATA_DIR))
        self.data_dir = Path(self.data_dir)
        if self.session is None:
            self.session = os.getenv("AOC_SESSION")
        if not self.url:
            self.url = os.getenv("AOC_INPUT_URL", DEFAULT_INPUT_URL)

    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": "aoc-solutions input fetcher"}
        if self.session:
            headers["Cookie"] = f"session={self.session}"
        return headers

    def day_dir(self, day: int, year: int | None = None) -> Path:
        return day_dir(self.data_dir, year or self.year, day)


def day_dir(data_dir: str | Path, year: int, day: int) -> Path:
    return Path(data_dir) / str(year) / f"day{day:02d}"


def input_path(
    config: InputConfig,
    day: int,
    use_example: bool = False,
    filename: str | None = None,
) -> Path:
    """Resolve the input file for ``day``; an explicit ``filename`` wins."""

    if filename is None:
        filename = EXAMPLE_FILENAME if use_example else INPUT_FILENAME
    return config.day_dir(day) / filename


def read_lines(path: str | Path) -> List[str]:
    """Return the file's lines without line endings or trailing blank lines."""

    lines = Path(path).read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def read_grid(path: str | Path) -> List[List[str]]:
    return [list(line) for line in read_lines(path)]


def load_points(path: str | Path) -> List[Point]:
    """Load ``x,y,z`` rows in file order."""

    try:
        frame = pd.read_csv(path, header=None, names=["x", "y", "z"], skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return []
    return [tuple(row) for row in frame.to_numpy().tolist()]


def fetch_input(day: int, config: Optional[InputConfig] = None, force: bool = False) -> Path:
    """Download the puzzle input for ``day`` unless it is already on disk."""

    config = config or InputConfig()
    target = input_path(config, day)
    if target.exists() and not force:
        return target
    if not config.session:
        raise ValueError("AOC_SESSION is not set; cannot download puzzle input")

    url = config.url.format(year=config.year, day=day)
    timeout = (config.connection_timeout, config.timeout_seconds)
    last_error: Exception | None = None
    for attempt in range(1, config.max_retries + 1):
        try:
            response = requests.get(url, headers=config.headers(), timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as exc:
            last_error = exc
            backoff = 2 ** attempt
            print(f"   Input fetch timeout on attempt {attempt}/{config.max_retries}: {exc}. Retrying in {backoff}s...")
            time.sleep(backoff)
            continue
        except requests.exceptions.HTTPError as exc:
            if exc.response is None or exc.response.status_code < 500:
                raise
            last_error = exc
            backoff = 2 ** attempt
            print(f"   Input fetch HTTP {exc.response.status_code} on attempt {attempt}/{config.max_retries}. Retrying in {backoff}s...")
            time.sleep(backoff)
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(response.text, encoding="utf-8")
        return target

    raise RuntimeError(f"could not download input for day {day} after {config.max_retries} attempts") from last_error


__all__ = [
    "EXAMPLE_FILENAME",
    "INPUT_FILENAME",
    "InputConfig",
    "YEARS",
    "YearConfig",
    "day_dir",
    "fetch_input",
    "get_year_config",
    "input_path",
    "load_points",
    "read_grid",
    "read_lines",
]
