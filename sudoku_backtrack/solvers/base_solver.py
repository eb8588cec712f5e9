"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any
import logging
import time
import tracemalloc

from ..core.board import SudokuBoard

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for Sudoku solvers.

    Solvers work on the board they are given: on success it holds the
    solution, on failure it holds whatever the algorithm left behind.
    Callers that need the original puzzle keep their own copy.
    """

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = False):
        """
        Args:
            track_memory: Record peak allocation with tracemalloc. Slows the
                          search considerably, so it is off by default.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> bool:
        """
        Solve a Sudoku puzzle in place, with timing and optional memory tracking.

        Args:
            board: The puzzle to solve. Mutated in place.

        Returns:
            True if the board now holds a complete solution.
        """
        self.reset_stats()
        log.debug("%s: solving board with %d empty cells",
                  self.name, board.count_empty())

        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solved = self._solve(board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = solved
        log.debug("%s: %s in %.4fs (%d iterations, %d backtracks)",
                  self.name, "solved" if solved else "no solution",
                  self.stats.time_seconds, self.stats.iterations,
                  self.stats.backtracks)
        return solved

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve (modified in place).

        Returns:
            True if a solution was found.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
