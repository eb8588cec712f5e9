"""Demonstration puzzle and puzzle-file reading."""

from __future__ import annotations
from typing import List

from .core.board import SudokuBoard

# Default puzzle for the command-line driver.
SAMPLE_BOARD = (
    (9, 0, 0, 1, 0, 0, 0, 0, 5),
    (0, 0, 5, 0, 9, 0, 2, 0, 1),
    (8, 0, 0, 0, 4, 0, 0, 0, 0),
    (0, 0, 0, 0, 8, 0, 0, 0, 0),
    (0, 0, 0, 7, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 2, 6, 0, 0, 9),
    (2, 0, 0, 3, 0, 0, 0, 0, 6),
    (0, 0, 0, 2, 0, 0, 9, 0, 0),
    (0, 0, 1, 9, 0, 4, 5, 7, 0),
)


def read_puzzles(path: str) -> List[SudokuBoard]:
    """
    Load puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        ValueError: A line is not a valid puzzle string. The message
                    carries the line number.
    """
    boards = []
    with open(path) as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            try:
                boards.append(SudokuBoard.from_string(line))
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
    return boards
