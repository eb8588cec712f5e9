"""Tests for the command-line driver."""

import json

import pytest
from sudoku_backtrack.cli import main

from puzzles import TEST_PUZZLE, TEST_SOLUTION, DEAD_END_PUZZLE

CONFLICTING_PUZZLE = "55" + "0" * 79


class TestSolveCommand:
    """Tests for `solve`."""

    def test_solves_given_puzzle(self, capsys):
        main(["solve", "--puzzle", TEST_PUZZLE, "--plain"])
        out = capsys.readouterr().out

        assert out.startswith("Sudoku grid before solving:\n 5 3 0 0 7 0 0 0 0\n")
        assert "Sudoku grid after solving with Backtracking algorithm:" in out
        assert " 5 3 4 6 7 8 9 1 2\n" in out

    def test_iterative_with_stats(self, capsys):
        main(["solve", "-p", TEST_PUZZLE, "-a", "iterative", "--stats"])
        out = capsys.readouterr().out

        assert "| 5 3 4 | 6 7 8 | 9 1 2 |" in out
        assert "Iterations:" in out
        assert "Backtracks:" in out

    def test_unsolvable_exits_nonzero(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", DEAD_END_PUZZLE])
        assert exc.value.code == 1
        assert "This is an unsolvable Sudoku grid." in capsys.readouterr().out

    def test_bad_puzzle_string(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", "12345"])
        assert exc.value.code == 1
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_strict_rejects_conflicts(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["solve", "--puzzle", CONFLICTING_PUZZLE, "--strict"])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "row 0 repeats 5" in out
        assert "Sudoku grid before solving:" not in out

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestBatchCommand:
    """Tests for `batch`."""

    def test_batch_writes_results(self, tmp_path, capsys):
        puzzles = tmp_path / "puzzles.txt"
        puzzles.write_text(
            "# two puzzles and a broken one\n"
            f"{TEST_PUZZLE}\n"
            "\n"
            f"{DEAD_END_PUZZLE}\n"
            f"{CONFLICTING_PUZZLE}\n"
        )
        output = tmp_path / "results.json"

        main(["batch", str(puzzles), "--output", str(output), "--strict"])
        out = capsys.readouterr().out
        assert "Solved 1/3 puzzles" in out

        results = json.loads(output.read_text())
        assert [r["index"] for r in results] == [1, 2, 3]
        assert results[0]["solved"]
        assert results[0]["solution"] == TEST_SOLUTION
        assert results[0]["puzzle"] == TEST_PUZZLE
        assert not results[1]["solved"]
        assert results[1]["solution"] is None
        assert results[1]["backtracks"] == 2
        assert results[2]["error"] == "conflicting givens"

    def test_batch_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["batch", str(tmp_path / "missing.txt")])
        assert exc.value.code == 1
        assert "Error reading puzzles" in capsys.readouterr().out

    def test_batch_reports_bad_line(self, tmp_path, capsys):
        puzzles = tmp_path / "puzzles.txt"
        puzzles.write_text(f"{TEST_PUZZLE}\nnot a puzzle\n")

        with pytest.raises(SystemExit):
            main(["batch", str(puzzles)])
        assert ":2:" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
