"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE, EMPTY, box_origin
from .validator import (
    box_cells,
    num_in_row,
    num_in_col,
    num_in_box,
    is_valid_placement,
    is_valid_board,
    find_conflicts,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "EMPTY",
    "box_origin",
    "box_cells",
    "num_in_row",
    "num_in_col",
    "num_in_box",
    "is_valid_placement",
    "is_valid_board",
    "find_conflicts",
    "validate_solution",
]
