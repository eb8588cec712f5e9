"""Backtracking solver driven by an explicit work-list instead of recursion."""

from __future__ import annotations
from typing import List

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_valid_placement


class IterativeBacktrackingSolver(BaseSolver):
    """
    Same search as BacktrackingSolver, without using the call stack.

    Each frame is [row, col, next_candidate]. A frame whose cell is filled
    has a child that failed, so its digit is undone before the next
    candidate is tried. Cell order, candidate order, the final board and
    the recorded stats all match the recursive solver.
    """

    name = "Backtracking (iterative)"

    def _solve(self, board: SudokuBoard) -> bool:
        stack: List[List[int]] = []
        if self._descend(board, stack):
            return True

        while stack:
            frame = stack[-1]
            row, col, start = frame

            if not board.is_empty(row, col):
                board.clear(row, col)
                self.stats.backtracks += 1

            for value in range(start, SIZE + 1):
                if is_valid_placement(board, row, col, value):
                    board.set(row, col, value)
                    frame[2] = value + 1
                    if self._descend(board, stack):
                        return True
                    break
            else:
                # Candidates exhausted; the cell is empty again.
                stack.pop()

        return False

    def _descend(self, board: SudokuBoard, stack: List[List[int]]) -> bool:
        """Open a frame on the next empty cell. True when there is none left."""
        self.stats.iterations += 1

        cell = board.find_empty()
        if cell is None:
            return True

        row, col = cell
        self.stats.nodes_explored += 1
        stack.append([row, col, 1])
        return False
