"""
Tests for the command line application and batch script.
"""

import io
import os

import numpy as np
import pytest

from bitsudoku.app import PuzzleSolver, main, run_interactive
from process_all_puzzles import main as process_all

from .conftest import DUPLICATE_ROWS, PUZZLE_ROWS, SOLUTION_ROWS


def test_process_puzzle_saves_image(write_puzzle, tmp_path, solution, capsys):
    path = write_puzzle("01.txt", PUZZLE_ROWS)
    out_dir = tmp_path / "out"

    result = PuzzleSolver(output_size=270).process_puzzle(str(path), str(out_dir))

    np.testing.assert_array_equal(result['solution'], solution)
    assert result['message'].startswith("Solved in ")
    assert result['image_path'] == os.path.join(str(out_dir), "01_solved.png")
    assert os.path.exists(result['image_path'])
    assert "✓ Solved puzzle" in capsys.readouterr().out


def test_process_puzzle_unsolvable(write_puzzle, tmp_path, capsys):
    path = write_puzzle("bad.txt", DUPLICATE_ROWS)

    result = PuzzleSolver().process_puzzle(str(path), str(tmp_path / "out"))

    assert result['solution'] is None
    assert result['image_path'] is None
    assert not (tmp_path / "out").exists()
    assert "Row 1 has duplicate given digit" in capsys.readouterr().out


def test_run_interactive_prints_plain_grid(capsys):
    answers = iter(PUZZLE_ROWS)
    assert run_interactive(input_fn=lambda prompt: next(answers))
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [" ".join(row) for row in SOLUTION_ROWS]


def test_main_file_mode(write_puzzle, capsys):
    path = write_puzzle("01.txt", PUZZLE_ROWS)
    main(["--puzzle", str(path), "--no-save"])
    out = capsys.readouterr().out
    assert "5 3 4 | 6 7 8 | 9 1 2" not in out
    assert "5 3 4 6 7 8 9 1 2" in out


def test_main_file_mode_pretty(write_puzzle, capsys):
    path = write_puzzle("01.txt", PUZZLE_ROWS)
    main(["--puzzle", str(path), "--no-save", "--pretty"])
    assert "5 3 4 | 6 7 8 | 9 1 2" in capsys.readouterr().out


def test_main_exits_on_unsolvable(write_puzzle):
    path = write_puzzle("bad.txt", DUPLICATE_ROWS)
    with pytest.raises(SystemExit) as excinfo:
        main(["--puzzle", str(path), "--no-save"])
    assert excinfo.value.code == 1


def test_main_exits_on_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--puzzle", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 1
    assert "Puzzle file not found" in capsys.readouterr().out


def test_main_exits_on_bad_symbol(write_puzzle, capsys):
    rows = ["53..7...0"] + PUZZLE_ROWS[1:]
    path = write_puzzle("bad_symbol.txt", rows)
    with pytest.raises(SystemExit) as excinfo:
        main(["--puzzle", str(path), "--no-save"])
    assert excinfo.value.code == 1
    assert "Invalid cell (1,9)" in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123\n" + "\n".join(PUZZLE_ROWS) + "\n"))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "Invalid input. Please enter exactly 9 characters." in out
    assert "3 4 5 2 8 6 1 7 9" in out


def test_process_all_puzzles(write_puzzle, tmp_path, monkeypatch):
    write_puzzle("01.txt", PUZZLE_ROWS)
    write_puzzle("02.txt", DUPLICATE_ROWS)
    write_puzzle("03.txt", ["x" * 9] * 9)
    monkeypatch.chdir(tmp_path)

    results = process_all(str(tmp_path))

    assert [os.path.basename(p) for p in results['solved']] == ["01.txt"]
    assert [os.path.basename(p) for p in results['unsolved']] == ["02.txt"]
    assert [os.path.basename(p) for p in results['error']] == ["03.txt"]
    assert (tmp_path / "output" / "01_solved.png").exists()


def test_process_all_puzzles_empty_dir(tmp_path, capsys):
    assert process_all(str(tmp_path)) is None
    assert "No .txt files found" in capsys.readouterr().out
