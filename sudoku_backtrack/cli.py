"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import json
import logging
import sys

from tqdm import tqdm

from .core.board import SudokuBoard
from .core.validator import find_conflicts
from .samples import SAMPLE_BOARD, read_puzzles
from .solvers import BacktrackingSolver, IterativeBacktrackingSolver

log = logging.getLogger(__name__)

SOLVERS = {
    "recursive": BacktrackingSolver,
    "iterative": IterativeBacktrackingSolver,
}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using plain recursive backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the built-in sample puzzle
  sudoku-backtrack solve

  # Solve a given puzzle with the work-list solver
  sudoku-backtrack solve --algorithm iterative --puzzle "5300700006..."

  # Solve every puzzle in a file and save the results
  sudoku-backtrack batch puzzles.txt --output results.json
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells; default: built-in sample)"
    )
    _add_common_arguments(solve_parser)
    solve_parser.add_argument(
        "--plain", action="store_true",
        help="Print boards as bare rows of digits"
    )
    solve_parser.add_argument(
        "--stats", action="store_true",
        help="Show search statistics"
    )

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve every puzzle in a file")
    batch_parser.add_argument(
        "file", type=str,
        help="Text file with one 81-char puzzle per line"
    )
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for results (JSON format)"
    )
    _add_common_arguments(batch_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "batch":
        cmd_batch(args)


def _add_common_arguments(parser):
    parser.add_argument(
        "--algorithm", "-a",
        choices=sorted(SOLVERS),
        default="recursive",
        help="Search implementation to use (default: recursive)"
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Reject puzzles whose given digits already conflict"
    )


def _describe_conflicts(conflicts):
    return ", ".join(f"{kind} {index} repeats {digit}" for kind, index, digit in conflicts)


def _show(board, plain):
    if plain:
        print(board.display(), end="")
    else:
        print(board)
        print()


def cmd_solve(args):
    """Handle the solve command."""
    try:
        if args.puzzle is None:
            board = SudokuBoard.from_2d_list(SAMPLE_BOARD)
        else:
            board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    if args.strict:
        conflicts = find_conflicts(board)
        if conflicts:
            print(f"Error: puzzle has conflicting givens: {_describe_conflicts(conflicts)}")
            sys.exit(1)

    print("Sudoku grid before solving:")
    _show(board, args.plain)

    solver = SOLVERS[args.algorithm]()
    solved = solver.solve(board)
    stats = solver.stats

    if solved:
        print("Sudoku grid after solving with Backtracking algorithm:")
        _show(board, args.plain)
    else:
        print("This is an unsolvable Sudoku grid.")

    if args.stats:
        print(f"  Time: {stats.time_seconds:.4f}s")
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Backtracks: {stats.backtracks:,}")

    if not solved:
        sys.exit(1)


def cmd_batch(args):
    """Handle the batch command."""
    try:
        boards = read_puzzles(args.file)
    except (OSError, ValueError) as e:
        print(f"Error reading puzzles: {e}")
        sys.exit(1)

    log.info("Loaded %d puzzles from %s", len(boards), args.file)

    solver = SOLVERS[args.algorithm]()
    results = []

    for index, board in enumerate(tqdm(boards, desc="Solving", unit="puzzle"), 1):
        record = {"index": index, "puzzle": board.to_string()}

        conflicts = find_conflicts(board) if args.strict else []
        if conflicts:
            log.warning("Puzzle %d rejected: %s", index, _describe_conflicts(conflicts))
            record.update(solved=False, solution=None, error="conflicting givens")
            results.append(record)
            continue

        solved = solver.solve(board)
        record.update(solver.stats.to_dict())
        record["solution"] = board.to_string() if solved else None
        results.append(record)

    solved_count = sum(1 for r in results if r["solved"])
    print(f"Solved {solved_count}/{len(results)} puzzles")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to {args.output}")


if __name__ == "__main__":
    main()
