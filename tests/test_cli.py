import json

from aoc_solutions.__main__ import main, parse_args


def test_parse_args_defaults(tmp_path):
    args = parse_args(["--data-dir", str(tmp_path), "solve"])
    assert args.command == "solve"
    assert args.days == []
    assert args.year == 2025


def test_solve_command(data_dir, write_day, capsys):
    write_day(5, "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32\n")
    code = main(["--data-dir", str(data_dir), "solve", "5", "--example", "--quiet"])
    assert code == 0
    assert "Day 05: part 1 = 3, part 2 = 14" in capsys.readouterr().out


def test_solve_command_reports_failures(data_dir, capsys):
    code = main(["--data-dir", str(data_dir), "solve", "5", "--quiet"])
    assert code == 1
    assert "ERROR" in capsys.readouterr().out


def test_visualize_command(data_dir, write_day, capsys):
    write_day(4, "@@.\n@@@\n.@.\n")
    code = main(["--data-dir", str(data_dir), "visualize", "4", "--example"])
    assert code == 0
    assert "grid-fill.json" in capsys.readouterr().out
    meta = json.loads((data_dir / "2025" / "day04" / "meta.json").read_text(encoding="utf-8"))
    assert meta["visualizations"][0]["id"] == "grid-fill"


def test_visualize_command_without_generator(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "visualize", "7"]) == 1
    assert "no visualization" in capsys.readouterr().out
