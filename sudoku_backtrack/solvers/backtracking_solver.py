"""Plain recursive backtracking solver."""

from __future__ import annotations

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_valid_placement


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search using recursive backtracking.

    Cells are visited in reading order and candidates are tried in ascending
    order, so the search is fully deterministic. No heuristics and no
    constraint propagation: every empty cell branches on the digits that
    pass the row, column and box checks.
    """

    name = "Backtracking"

    def _solve(self, board: SudokuBoard) -> bool:
        return self._backtrack(board)

    def _backtrack(self, board: SudokuBoard) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise. On False the board
        is exactly as it was when this call started.
        """
        self.stats.iterations += 1

        cell = board.find_empty()
        if cell is None:
            # No empty cells - solution found!
            return True

        row, col = cell
        self.stats.nodes_explored += 1

        for value in range(1, SIZE + 1):
            if not is_valid_placement(board, row, col, value):
                continue

            board.set(row, col, value)
            if self._backtrack(board):
                return True

            board.clear(row, col)
            self.stats.backtracks += 1

        return False


def solve(board: SudokuBoard) -> bool:
    """
    Solve a board in place with recursive backtracking.

    Args:
        board: Board built from the puzzle; holds the solution on success.

    Returns:
        True if solved, False if no assignment satisfies the given digits.
    """
    return BacktrackingSolver().solve(board)
