"""Command line entry point for the puzzle solutions."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import requests

from .days import SOLUTIONS
from .inputs import InputConfig, fetch_input
from .runner import SolverConfig, run_days, save_results
from .server import create_app
from .visualize import generate_visualization


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve daily puzzles and export their visualizations.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path(os.getenv("AOC_DATA_DIR", "puzzles")),
        help="Root folder holding <year>/dayNN puzzle directories (default: puzzles)",
    )
    parser.add_argument("--year", type=int, default=2025, help="Event year (default: 2025)")
    commands = parser.add_subparsers(dest="command", required=True)

    solve = commands.add_parser("solve", help="Print both answers for one or more days")
    solve.add_argument("days", type=int, nargs="*", help="Days to solve (default: every solved day)")
    solve.add_argument("--example", action="store_true", help="Use example.txt instead of input.txt")
    solve.add_argument("--input", dest="filename", default=None, help="Input file name inside the day folder")
    solve.add_argument("--fetch", action="store_true", help="Download missing inputs using AOC_SESSION")
    solve.add_argument("--output", type=Path, default=None, help="Write the answers table to a CSV or Excel file")
    solve.add_argument("--quiet", action="store_true", help="Only print the answers")
    solve.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable the progress bar when solving several days",
    )

    visualize = commands.add_parser("visualize", help="Export animation frames for a day")
    visualize.add_argument("day", type=int)
    visualize.add_argument("--example", action="store_true", help="Use example.txt instead of input.txt")

    fetch = commands.add_parser("fetch", help="Download puzzle inputs")
    fetch.add_argument("days", type=int, nargs="+")
    fetch.add_argument("--force", action="store_true", help="Overwrite inputs already on disk")
    fetch.add_argument("--session", default=os.getenv("AOC_SESSION"), help="Session cookie value")

    serve = commands.add_parser("serve", help="Serve exported visualizations over HTTP")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    return parser.parse_args(argv)


def _solve(args: argparse.Namespace, inputs: InputConfig) -> int:
    config = SolverConfig(
        inputs=inputs,
        use_example=args.example,
        filename=args.filename,
        fetch_missing=args.fetch,
        use_tqdm=not args.disable_tqdm and not args.quiet,
        verbose=not args.quiet,
    )
    days = args.days or sorted(SOLUTIONS)
    table = run_days(days, config)
    for row in table.itertuples(index=False):
        print(f"Day {int(row.day):02d}: part 1 = {row.part1}, part 2 = {row.part2}")
    if args.output is not None:
        save_results(table, args.output)
        print(f"Results saved to '{args.output}'")
    return 0 if len(table) == len(days) else 1


def _visualize(args: argparse.Namespace, inputs: InputConfig) -> int:
    try:
        result = generate_visualization(args.day, inputs, use_example=args.example)
    except KeyError:
        print(f"ERROR: No solution registered for day {args.day:02d}.")
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1
    except FileNotFoundError as exc:
        print(f"ERROR: Input file not found at '{exc.filename}'.")
        return 1
    print(f"Visualization generated for day {args.day:02d} -> {result.out_file.name} ({result.frames} frames)")
    return 0


def _fetch(args: argparse.Namespace, inputs: InputConfig) -> int:
    inputs.session = args.session
    for day in args.days:
        try:
            path = fetch_input(day, inputs, force=args.force)
        except (ValueError, RuntimeError, requests.exceptions.RequestException) as exc:
            print(f"ERROR: {exc}")
            return 1
        print(f"Day {day:02d} input -> {path}")
    return 0


def _serve(args: argparse.Namespace, inputs: InputConfig) -> int:
    create_app(inputs.data_dir).run(host=args.host, port=args.port)
    return 0


COMMANDS = {
    "solve": _solve,
    "visualize": _visualize,
    "fetch": _fetch,
    "serve": _serve,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    inputs = InputConfig(data_dir=args.data_dir, year=args.year)
    return COMMANDS[args.command](args, inputs)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
