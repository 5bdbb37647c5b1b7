# sudokugame

A Sudoku game for the terminal. Every puzzle it generates has exactly one solution.

## Installation

```
pip install .
```

## Playing

```
sudokugame
```

To get the same puzzles and hints each time, give a random seed:

```
sudokugame --seed 42
```

When the game starts, it asks how many clues to show. The number can be from 17 to 81, and more clues make an easier puzzle. Press Enter to get the default of 35. A number outside that range is clamped to fit. Input that is not a number is ignored, and the default is used.

At the `>` prompt, enter one of these commands:

| Command             | Effect                                              |
|---------------------|-----------------------------------------------------|
| `<row> <col> <val>` | place a number (rows and columns 1–9, value 1–9)    |
| `clear <row> <col>` | remove one of your own entries                      |
| `hint`              | fill one random empty cell from the solution        |
| `solve`             | show the whole solution and exit                    |
| `quit`, `q`, `exit` | leave the game                                      |

You cannot change or clear the cells of the original puzzle. If a number you place clashes with another cell in its row, column or 3×3 box, the game warns you but places the number anyway. The game ends when the board is full and every cell obeys the rules, or when input runs out.

## Using the library

```python
import random

from sudokugame.board import Board
from sudokugame.generator import count_solutions, generate
from sudokugame.solver import is_complete, solve

rng = random.Random(42)
puzzle, solution = generate(35, rng)
print(puzzle)

assert count_solutions(puzzle, 2) == 1
assert solve(puzzle)          # the puzzle has a solution
assert is_complete(solution)
```

### `sudokugame.board`

`Board(cells=None)` is a 9×9 grid in which 0 marks an empty cell. Without arguments it is empty. Otherwise it takes 9 rows of 9 values from 0 to 9, and any other shape or value raises `ValueError`.

- `board[row, col]` returns one cell. `board[row]` returns a row as a tuple.
- Two boards are equal when all of their cells are equal. Boards cannot be hashed.
- `str(board)` draws the grid with the 3×3 boxes marked and `.` for empty cells.
- `copy()` returns an independent copy.
- `set(row, col, val)` places a value. It raises `ValueError` if the row or column is outside 0–8 or the value is outside 1–9.
- `clear(row, col)` empties a cell.
- `is_empty(row, col)` reports whether a cell is empty.
- `is_valid_placement(row, col, val)` checks the row, the column and the 3×3 box, and ignores the cell itself.
- `is_full()` reports whether every cell is filled.
- `empty_cells()` yields the `(row, col)` of each empty cell in row-major order.

`clear`, `is_empty` and `is_valid_placement` raise `IndexError` for a position outside the board.

### `sudokugame.generator`

- `generate(clues, rng=None)` returns `(puzzle, solution)`. `clues` is clamped to 17–81. It fills a board at random, then removes cells in random order as long as the puzzle keeps a unique solution. If no more cells can be removed, the puzzle can end up with more clues than you asked for.
- `fill_board(board, rng)` fills the empty cells of a board by backtracking with random value order, and returns whether it succeeded.
- `count_solutions(board, limit)` counts the solutions of a board and stops once it reaches `limit`. The board is left as it was.

### `sudokugame.solver`

- `solve(board)` returns `True` if the board has at least one solution. The board is not changed.
- `is_complete(board)` returns `True` when the board is full and every value obeys the rules.

### `sudokugame.cli`

- `main(argv=None)` runs the interactive game.
- `parse_row_col(row_text, col_text)` turns 1-based text into 0-based `(row, col)`. It raises `ValueError` unless both are whole numbers from 1 to 9.
- `render_board(board, original)` returns the board as text with row and column numbers.
- `give_hint(puzzle, solution, rng)` copies one random empty cell from the solution into the puzzle and returns a message that describes it.

## Limitations

- Games cannot be saved or resumed.
- No undo is available.
- `solve` does not fill in the board you pass it. It only reports whether a solution exists. The full solution comes from `generate`.

## Running the tests

```
pip install .[test]
pytest
```