"""
Tests for the command-line front end.
"""

import os

import numpy as np
import pytest

from sudoku.solver import SolveOutcome
from sudoku.sudoku_solver import SudokuApp, main

from conftest import SOLUTION

PUZZLE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "puzzles")


def test_no_arguments_prints_usage_and_fails(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "9x9 sudoku" in out


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0


def test_solves_puzzle_file(capsys):
    status = main([os.path.join(PUZZLE_DIR, "easy.txt")])
    out = capsys.readouterr().out

    assert status == 0
    assert "Initial board:" in out
    assert "Solved in" in out
    assert "5 3 4 | 6 7 8 | 9 1 2" in out


def test_unsolvable_puzzle_reports_failure(capsys):
    status = main([os.path.join(PUZZLE_DIR, "contradiction.txt"), "--quiet"])
    out = capsys.readouterr().out

    assert status == 1
    assert "No solution found" in out
    assert "Row 1 has duplicate given digit 5" in out
    assert "Solved in" not in out
    assert "[1/3]" not in out


def test_missing_file_reports_error(tmp_path, capsys):
    status = main([str(tmp_path / "nope.txt")])
    out = capsys.readouterr().out

    assert status == 1
    assert "Error: Could not read puzzle" in out


def test_malformed_file_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("12345\n", encoding="utf-8")

    status = main([str(path)])

    assert status == 1
    assert "Error: line 1: expected 9 cells" in capsys.readouterr().out


def test_image_output(tmp_path, capsys):
    image_path = str(tmp_path / "solved.png")
    status = main([os.path.join(PUZZLE_DIR, "easy.txt"), "--image", image_path, "-s", "20"])

    assert status == 0
    assert os.path.exists(image_path)


def test_app_returns_grid_and_result():
    app = SudokuApp(verbose=False)
    grid, result = app.process_file(os.path.join(PUZZLE_DIR, "blank.txt"))

    assert result.solved
    assert grid.is_complete()
    assert grid.locked_count() == 0


def write_board(path, values):
    path.write_text("\n".join("".join(str(v) for v in row) for row in values), encoding="utf-8")
    return str(path)


def test_sparse_clashing_givens_fail_without_search(tmp_path, capsys):
    """Two given 5s in an otherwise empty first row are reported straight away."""
    values = np.zeros((9, 9), dtype=int)
    values[0, 0] = 5
    values[0, 1] = 5
    path = write_board(tmp_path / "clash.txt", values)

    status = main([path, "-q"])
    out = capsys.readouterr().out

    assert status == 1
    assert "No solution found" in out
    assert "Row 1 has duplicate given digit 5" in out
    assert "Solved in" not in out


def test_clashing_givens_leave_grid_untouched(tmp_path):
    values = np.zeros((9, 9), dtype=int)
    values[0, 0] = 5
    values[0, 1] = 5
    path = write_board(tmp_path / "clash.txt", values)

    grid, result = SudokuApp(verbose=False).process_file(path)

    assert result.outcome is SolveOutcome.EXHAUSTED
    assert result.placements == 0
    assert np.array_equal(grid.values, values)


def test_full_board_with_clashing_givens_is_not_reported_solved(tmp_path, capsys):
    values = np.array(SOLUTION)
    values[0, 1] = 5
    path = write_board(tmp_path / "full_clash.txt", values)

    status = main([path])
    out = capsys.readouterr().out

    assert status == 1
    assert "Solved in" not in out
    assert "No solution found" in out
    assert "Column 2 has duplicate given digit 5" in out


def test_too_small_cell_size_rejected_before_solving(tmp_path, capsys):
    image_path = str(tmp_path / "x.png")
    with pytest.raises(SystemExit) as exc:
        main([os.path.join(PUZZLE_DIR, "easy.txt"), "--cell-size", "5", "--image", image_path])
    captured = capsys.readouterr()

    assert exc.value.code == 2
    assert "at least 10 pixels" in captured.err
    assert "Initial board:" not in captured.out
    assert not os.path.exists(image_path)
