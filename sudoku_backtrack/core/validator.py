"""Constraint checks for Sudoku placements and whole boards."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from .board import SIZE, BOX_SIZE, EMPTY, box_origin

if TYPE_CHECKING:
    from .board import SudokuBoard


def box_cells(row: int, col: int) -> List[Tuple[int, int]]:
    """The nine cells of the box containing (row, col), in reading order."""
    r, c = box_origin(row, col)
    return [(i, j) for i in range(r, r + BOX_SIZE) for j in range(c, c + BOX_SIZE)]


def num_in_row(board: SudokuBoard, row: int, value: int) -> bool:
    """True if value already appears anywhere in the row."""
    return value in board.get_row(row)


def num_in_col(board: SudokuBoard, col: int, value: int) -> bool:
    """True if value already appears anywhere in the column."""
    return value in board.get_col(col)


def num_in_box(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """True if value already appears in the 3x3 box containing (row, col)."""
    return value in board.get_box(row, col)


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Candidate digit (1 to 9).

    Returns:
        True if the digit is absent from the cell's row, column and box.
        Values outside 1-9 are never valid, so empty markers never collide.
    """
    if value < 1 or value > SIZE:
        return False

    return (not num_in_row(board, row, value)
            and not num_in_col(board, col, value)
            and not num_in_box(board, row, col, value))


def find_conflicts(board: SudokuBoard) -> List[Tuple[str, int, int]]:
    """
    List duplicated digits among the filled cells.

    Returns:
        (unit kind, unit index, digit) for every row, column or box holding
        the same nonzero digit more than once. Boxes are numbered 0-8 in
        reading order.
    """
    conflicts = []
    units = [("row", i, board.get_row(i)) for i in range(SIZE)]
    units += [("col", j, board.get_col(j)) for j in range(SIZE)]
    units += [
        ("box", (r // BOX_SIZE) * BOX_SIZE + c // BOX_SIZE, board.get_box(r, c))
        for r in range(0, SIZE, BOX_SIZE)
        for c in range(0, SIZE, BOX_SIZE)
    ]

    for kind, index, values in units:
        seen = set()
        reported = set()
        for v in values.tolist():
            if v == EMPTY:
                continue
            if v in seen and v not in reported:
                conflicts.append((kind, index, v))
                reported.add(v)
            seen.add(v)

    return conflicts


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return not find_conflicts(board)


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    for i in range(SIZE):
        for j in range(SIZE):
            if not puzzle.is_empty(i, j):
                if puzzle.get(i, j) != solution.get(i, j):
                    return False

    return solution.is_solved()
