"""Naive backtracking Sudoku solver."""

from .core import SudokuBoard
from .solvers import BacktrackingSolver, IterativeBacktrackingSolver, solve

__all__ = ["SudokuBoard", "BacktrackingSolver", "IterativeBacktrackingSolver", "solve"]
