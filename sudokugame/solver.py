"""Checks on whether a board can be or has been solved."""

from __future__ import annotations

from sudokugame.board import SIZE, Board
from sudokugame.generator import count_solutions


def solve(board: Board) -> bool:
    """Return True if the board has at least one solution; the board is unchanged."""
    return count_solutions(board, 1) == 1


def is_complete(board: Board) -> bool:
    """Return True when the board is full and every value obeys the rules."""
    if not board.is_full():
        return False
    return all(
        board.is_valid_placement(row, col, board[row, col])
        for row in range(SIZE)
        for col in range(SIZE)
    )