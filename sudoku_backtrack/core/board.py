"""Fixed 9x9 Sudoku grid backed by a numpy matrix."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Sequence

SIZE = 9
BOX_SIZE = 3
EMPTY = 0


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left cell of the 3x3 box containing (row, col)."""
    return row - row % BOX_SIZE, col - col % BOX_SIZE


class SudokuBoard:
    """
    A 9x9 Sudoku grid. Cells hold 0 (empty) or a digit 1-9.

    The board owns its storage: construction copies the caller's data, and
    solvers mutate the copy in place.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[Sequence] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial 9x9 grid (nested lists or ndarray). It is
                  copied, never aliased. If None, creates an empty board.

        Only the shape is checked. Digits are not checked for legality.
        """
        if grid is not None:
            arr = np.array(grid, dtype=np.int32)
            if arr.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
            self.grid = arr
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """
        First empty cell in reading order (rows 0..8, then columns 0..8).

        Returns:
            (row, col) of the first 0, or None if the board is full.
        """
        flat = np.flatnonzero(self.grid == EMPTY)
        if flat.size == 0:
            return None
        row, col = divmod(int(flat[0]), SIZE)
        return row, col

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in reading order."""
        empty = []
        for i in range(SIZE):
            for j in range(SIZE):
                if self.is_empty(i, j):
                    empty.append((i, j))
        return empty

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, SIZE, BOX_SIZE)
            for box_col in range(0, SIZE, BOX_SIZE)
        ]
        for unit in units:
            non_zero = unit[unit != EMPTY]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Compact 81-character form, 0 for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
               Surrounding whitespace is ignored.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '.':
                continue
            if not c.isdigit():
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            grid[idx // SIZE, idx % SIZE] = int(c)

        return cls(grid)

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(data)

    def display(self) -> str:
        """Plain layout: every cell prefixed by a space, then a blank line."""
        lines = [''.join(f' {int(v)}' for v in row) for row in self.grid]
        return '\n'.join(lines) + '\n\n'

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
