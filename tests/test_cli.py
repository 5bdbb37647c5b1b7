import io
import random

import pytest

from sudokugame.board import Board
from sudokugame.cli import give_hint, main, parse_row_col, render_board
from sudokugame.generator import generate
from sudokugame.solver import is_complete


def _run(monkeypatch, capsys, text, seed=1):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main(["--seed", str(seed)])
    return capsys.readouterr().out


def test_parse_row_col_converts_to_zero_based():
    assert parse_row_col("1", "9") == (0, 8)
    assert parse_row_col("5", "3") == (4, 2)


@pytest.mark.parametrize("row, col", [("0", "1"), ("1", "10"), ("x", "2"), ("3", "")])
def test_parse_row_col_rejects_bad_input(row, col):
    with pytest.raises(ValueError, match="between 1 and 9"):
        parse_row_col(row, col)


def test_render_board_layout():
    board = Board()
    board.set(0, 0, 5)
    lines = render_board(board, Board()).split("\n")
    assert lines[0] == "    1 2 3   4 5 6   7 8 9"
    assert lines[1] == "  +-------+-------+-------+"
    assert lines[2].startswith("1 | 5 . . |")
    assert lines[-1] == "  +-------+-------+-------+"
    assert len(lines) == 14


def test_give_hint_fills_one_cell_from_solution():
    puzzle, solution = generate(75, random.Random(4))
    before = len(list(puzzle.empty_cells()))
    message = give_hint(puzzle, solution, random.Random(0))
    assert message.startswith("Hint: placed ")
    assert len(list(puzzle.empty_cells())) == before - 1
    for row in range(9):
        for col in range(9):
            if puzzle[row][col]:
                assert puzzle[row][col] == solution[row][col]


def test_give_hint_on_full_board():
    _, solution = generate(81, random.Random(4))
    puzzle = solution.copy()
    assert give_hint(puzzle, solution, random.Random(0)) == "No empty cells to hint!"
    assert puzzle == solution


def test_main_full_puzzle_congratulates(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "81\n")
    assert "Congratulations! You solved the puzzle!" in out


def test_main_quit(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "80\nquit\n")
    assert out.rstrip().endswith("Goodbye!")


def test_main_solve(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "80\nsolve\n")
    assert "Puzzle solved!" in out


def test_main_hint_completes_near_full_puzzle(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "80\nhint\n")
    assert "Congratulations" in out


def test_main_reports_input_errors(monkeypatch, capsys):
    script = "80\nfoo\n0 1 5\n1 1 0\nclear 1\nq\n"
    out = _run(monkeypatch, capsys, script)
    assert "Unknown command. Type <row> <col> <val> to place a number." in out
    assert "Row and column must each be between 1 and 9." in out
    assert "Value must be between 1 and 9." in out
    assert "Usage: clear <row> <col>" in out


def test_main_protects_original_cells(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "80\nclear 1 1\nclear 1 2\nq\n")
    assert "That cell is part of the original puzzle and cannot be cleared." in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "80\n")
    assert "Goodbye!" not in out
    assert "Generating puzzle" in out


def test_generated_game_is_consistent_with_seed():
    puzzle, solution = generate(80, random.Random(1))
    assert len(list(puzzle.empty_cells())) == 1
    assert is_complete(solution)