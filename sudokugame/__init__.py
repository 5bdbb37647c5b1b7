"""Terminal Sudoku: a board, a unique-solution puzzle generator, solution checks and an interactive game."""

__version__ = "0.1.0"
__all__ = ["board", "generator", "solver", "cli"]