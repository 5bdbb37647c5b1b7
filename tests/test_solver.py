import random

from sudokugame.board import Board
from sudokugame.generator import generate
from sudokugame.solver import is_complete, solve


def test_is_complete_on_solved_puzzle():
    _, solution = generate(81, random.Random(7))
    assert is_complete(solution)


def test_is_complete_on_empty_board():
    assert not is_complete(Board())


def test_is_complete_detects_conflict():
    _, solution = generate(81, random.Random(13))
    first, second = solution[0][0], solution[0][1]
    solution.set(0, 0, second)
    solution.set(0, 1, first)
    assert not is_complete(solution)


def test_solve_reports_solvable_board():
    puzzle, _ = generate(60, random.Random(2))
    snapshot = puzzle.copy()
    assert solve(puzzle)
    assert puzzle == snapshot


def test_solve_reports_unsolvable_board():
    board = Board()
    for col, val in enumerate(range(1, 9)):
        board.set(0, col, val)
    board.set(1, 8, 9)
    assert not solve(board)