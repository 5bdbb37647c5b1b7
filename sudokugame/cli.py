"""Interactive terminal game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from sudokugame.board import SIZE, Board
from sudokugame.generator import generate
from sudokugame.solver import is_complete

DEFAULT_CLUES = 35

INSTRUCTIONS = """Commands:
  <row> <col> <val>  — place a number (1-indexed, val 1-9)
  clear <row> <col>  — remove your entry
  hint               — reveal one cell from the solution
  solve              — auto-solve the entire puzzle
  quit               — exit"""

_HEADER = "    1 2 3   4 5 6   7 8 9"
_SEPARATOR = "  +-------+-------+-------+"
_CLEAR_SCREEN = "\033[H\033[2J"

_BAD_POSITION = "Row and column must each be between 1 and 9."


def parse_row_col(row_text: str, col_text: str) -> tuple[int, int]:
    """Turn 1-indexed row and column text into 0-indexed numbers.

    Raises ValueError unless both are integers from 1 to 9.
    """
    try:
        row, col = int(row_text), int(col_text)
    except ValueError:
        raise ValueError(_BAD_POSITION) from None
    if not (1 <= row <= SIZE and 1 <= col <= SIZE):
        raise ValueError(_BAD_POSITION)
    return row - 1, col - 1


def render_board(board: Board, original: Board) -> str:
    """Return the board with row and column numbers for display."""
    lines = [_HEADER, _SEPARATOR]
    for row in range(SIZE):
        parts = [f"{row + 1} | "]
        for col in range(SIZE):
            value = board[row, col]
            parts.append(". " if value == 0 else f"{value} ")
            if col in (2, 5):
                parts.append("| ")
        parts.append("|")
        lines.append("".join(parts))
        if row in (2, 5):
            lines.append(_SEPARATOR)
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def give_hint(puzzle: Board, solution: Board, rng: random.Random) -> str:
    """Reveal one random empty cell from the solution and describe it."""
    empty = list(puzzle.empty_cells())
    if not empty:
        return "No empty cells to hint!"
    row, col = rng.choice(empty)
    value = solution[row, col]
    puzzle.set(row, col, value)
    return f"Hint: placed {value} at ({row + 1},{col + 1})"


def _read_line() -> str | None:
    """Read one full line from stdin, or None at end of input."""
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        return None
    return line


def _show(puzzle: Board, original: Board) -> None:
    print(_CLEAR_SCREEN, end="")
    print(INSTRUCTIONS)
    print()
    print(render_board(puzzle, original))


def _place(parts: list[str], puzzle: Board, original: Board) -> str:
    if len(parts) != 3:
        return "Unknown command. Type <row> <col> <val> to place a number."
    try:
        row, col = parse_row_col(parts[0], parts[1])
    except ValueError as error:
        return str(error)
    try:
        value = int(parts[2])
    except ValueError:
        value = 0
    if not 1 <= value <= SIZE:
        return "Value must be between 1 and 9."
    if original[row, col] != 0:
        return "That cell is part of the original puzzle and cannot be changed."
    message = ""
    if not puzzle.is_valid_placement(row, col, value):
        message = (
            f"Warning: {value} at ({row + 1},{col + 1}) conflicts with another cell!"
        )
    puzzle.set(row, col, value)
    return message


def _clear(parts: list[str], puzzle: Board, original: Board) -> str:
    if len(parts) != 3:
        return "Usage: clear <row> <col>"
    try:
        row, col = parse_row_col(parts[1], parts[2])
    except ValueError as error:
        return str(error)
    if original[row, col] != 0:
        return "That cell is part of the original puzzle and cannot be cleared."
    puzzle.clear(row, col)
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game of sudoku on the terminal."""
    parser = argparse.ArgumentParser(prog="sudokugame", description="Play sudoku.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("Welcome to Sudoku!")
    print("Difficulty: how many clues to show (17–81). More clues = easier.")
    print(f"Enter number of clues [default {DEFAULT_CLUES}]: ", end="", flush=True)
    clues = DEFAULT_CLUES
    answer = sys.stdin.readline().strip()
    if answer:
        try:
            clues = int(answer)
        except ValueError:
            pass

    print("\nGenerating puzzle…")
    puzzle, solution = generate(clues, rng)
    original = puzzle.copy()

    message = ""
    while True:
        _show(puzzle, original)

        if is_complete(puzzle):
            print("\n🎉 Congratulations! You solved the puzzle!")
            break

        if message:
            print(message)
            message = ""

        print("\n> ", end="", flush=True)
        line = _read_line()
        if line is None:
            break
        parts = line.split()
        if not parts:
            continue

        command = parts[0].lower()
        if command in ("quit", "q", "exit"):
            print("Goodbye!")
            return 0
        if command == "solve":
            puzzle = solution.copy()
            _show(puzzle, original)
            print("\nPuzzle solved!")
            return 0
        if command == "hint":
            message = give_hint(puzzle, solution, rng)
        elif command == "clear":
            message = _clear(parts, puzzle, original)
        else:
            message = _place(parts, puzzle, original)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())