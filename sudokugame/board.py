"""The 9x9 sudoku grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

SIZE = 9
BOX = 3
EMPTY = 0

_SEPARATOR = "  +-------+-------+-------+"


def _check_position(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"cell ({row}, {col}) is outside the board")


class Board:
    """A 9x9 sudoku board in which 0 marks an empty cell."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cells: Iterable[Iterable[int]] | None = None) -> None:
        if cells is None:
            self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]
            return
        rows = [list(row) for row in cells]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("a board needs exactly 9 rows of 9 cells")
        if any(not 0 <= value <= SIZE for row in rows for value in row):
            raise ValueError("cell values must be between 0 and 9")
        self._cells = rows

    def __getitem__(self, key: int | tuple[int, int]) -> int | tuple[int, ...]:
        """Return a row as a tuple, or a single cell for a (row, col) key."""
        if isinstance(key, tuple):
            row, col = key
            _check_position(row, col)
            return self._cells[row][col]
        return tuple(self._cells[key])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def __str__(self) -> str:
        lines = [_SEPARATOR]
        for row_index, row in enumerate(self._cells):
            parts = ["  | "]
            for col_index, value in enumerate(row):
                parts.append(". " if value == EMPTY else f"{value} ")
                if col_index in (2, 5):
                    parts.append("| ")
            parts.append("|")
            lines.append("".join(parts))
            if row_index in (2, 5):
                lines.append(_SEPARATOR)
        lines.append(_SEPARATOR)
        return "\n".join(lines)

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        return Board(self._cells)

    def is_empty(self, row: int, col: int) -> bool:
        """Return True if the cell at (row, col) is empty."""
        _check_position(row, col)
        return self._cells[row][col] == EMPTY

    def set(self, row: int, col: int, val: int) -> None:
        """Place val at (row, col); raise ValueError if anything is out of range."""
        if not (0 <= row < SIZE and 0 <= col < SIZE and 1 <= val <= SIZE):
            raise ValueError(f"cannot place {val} at ({row}, {col})")
        self._cells[row][col] = val

    def clear(self, row: int, col: int) -> None:
        """Remove the value at (row, col)."""
        _check_position(row, col)
        self._cells[row][col] = EMPTY

    def is_valid_placement(self, row: int, col: int, val: int) -> bool:
        """Check whether val fits at (row, col), ignoring that cell's own value."""
        _check_position(row, col)
        cells = self._cells
        if any(c != col and cells[row][c] == val for c in range(SIZE)):
            return False
        if any(r != row and cells[r][col] == val for r in range(SIZE)):
            return False
        box_row = row // BOX * BOX
        box_col = col // BOX * BOX
        return not any(
            (r != row or c != col) and cells[r][c] == val
            for r in range(box_row, box_row + BOX)
            for c in range(box_col, box_col + BOX)
        )

    def is_full(self) -> bool:
        """Return True when no cell is empty."""
        return all(value != EMPTY for row in self._cells for value in row)

    def empty_cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (row, col) of every empty cell in row-major order."""
        for row_index, row in enumerate(self._cells):
            for col_index, value in enumerate(row):
                if value == EMPTY:
                    yield row_index, col_index