"""Puzzle generation by randomised backtracking."""

from __future__ import annotations

import random

from sudokugame.board import SIZE, Board

MIN_CLUES = 17
MAX_CLUES = SIZE * SIZE


def generate(clues: int, rng: random.Random | None = None) -> tuple[Board, Board]:
    """Return (puzzle, solution), with clues clamped to 17..81.

    Cells are removed in random order as long as the puzzle keeps a
    unique solution.
    """
    rng = rng or random.Random()
    clues = max(MIN_CLUES, min(MAX_CLUES, clues))

    solution = Board()
    fill_board(solution, rng)
    puzzle = solution.copy()

    to_remove = MAX_CLUES - clues
    removed = 0
    for position in rng.sample(range(MAX_CLUES), MAX_CLUES):
        if removed == to_remove:
            break
        row, col = divmod(position, SIZE)
        saved = puzzle[row, col]
        puzzle.clear(row, col)
        if count_solutions(puzzle, 2) == 1:
            removed += 1
        else:
            puzzle.set(row, col, saved)
    return puzzle, solution


def fill_board(board: Board, rng: random.Random) -> bool:
    """Fill every empty cell with random value ordering; return success."""
    cell = next(board.empty_cells(), None)
    if cell is None:
        return True
    row, col = cell
    for val in rng.sample(range(1, SIZE + 1), SIZE):
        if board.is_valid_placement(row, col, val):
            board.set(row, col, val)
            if fill_board(board, rng):
                return True
            board.clear(row, col)
    return False


def count_solutions(board: Board, limit: int) -> int:
    """Count the board's solutions, stopping once limit is reached.

    The board is left as it was found.
    """
    cell = next(board.empty_cells(), None)
    if cell is None:
        return 1
    row, col = cell
    count = 0
    for val in range(1, SIZE + 1):
        if board.is_valid_placement(row, col, val):
            board.set(row, col, val)
            count += count_solutions(board, limit - count)
            board.clear(row, col)
            if count >= limit:
                return count
    return count