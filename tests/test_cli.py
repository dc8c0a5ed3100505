"""Tests for the command line driver."""

import pytest

from pagesim.cli import main

BELADY = "1,2,3,4,1,2,5,1,2,3,4,5"


class TestMain:
    """Verify output and exit codes."""

    def test_runs_all_policies(self, capsys) -> None:
        assert main(["3", "--reference", BELADY]) == 0
        out = capsys.readouterr().out
        assert "=== FIFO Simulation ===" in out
        assert "=== Optimal Simulation ===" in out
        assert "Total Page Faults: 9" in out

    def test_generated_reference(self, capsys) -> None:
        assert main(["4", "--seed", "5", "--length", "12", "--range", "6"]) == 0
        assert "Page Reference String:" in capsys.readouterr().out

    def test_single_policy(self, capsys) -> None:
        assert main(["3", "-r", BELADY, "-p", "lru"]) == 0
        out = capsys.readouterr().out
        assert "=== LRU Simulation ===" in out
        assert "FIFO" not in out

    def test_summary_and_sweep(self, capsys) -> None:
        assert main(["3", "-r", BELADY, "--summary", "--sweep", "5"]) == 0
        out = capsys.readouterr().out
        assert "Algorithm" in out
        assert "Belady's anomaly: FIFO faults more with 4 frames than with 3" in out

    def test_plot(self, capsys, tmp_path) -> None:
        path = tmp_path / "faults.png"
        assert main(["2", "-r", BELADY, "--plot", str(path)]) == 0
        assert path.exists()

    def test_plot_to_missing_directory(self, capsys, tmp_path) -> None:
        """An unwritable chart path gives one error line, not a traceback."""
        path = tmp_path / "missing" / "faults.png"
        assert main(["2", "-r", BELADY, "--plot", str(path)]) == 1
        captured = capsys.readouterr()
        assert "could not save graph" in captured.err
        assert "Traceback" not in captured.err
        assert not path.exists()

    @pytest.mark.parametrize("argv, message", [
        (["three"], "valid number"),
        (["0"], "at least 1"),
        (["3", "-r", "1,a"], "not a valid page number"),
        (["3", "-p", "clock"], "Unknown policy"),
        (["3", "--range", "0"], "page range"),
    ])
    def test_errors_print_message_and_exit_2(self, capsys, argv, message) -> None:
        """Invalid input produces one message and no partial results."""
        assert main(argv) == 2
        captured = capsys.readouterr()
        assert message in captured.err
        assert captured.out == ""
