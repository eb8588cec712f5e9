"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver, solve
from .iterative_solver import IterativeBacktrackingSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "IterativeBacktrackingSolver",
    "solve",
]
