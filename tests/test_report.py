"""Tests for the text tables and charts."""

from pagesim.report import (format_history, format_report, format_summary,
                            plot_fault_counts, plot_fault_curves)
from pagesim.simulator import SimulationRunner, compare


class TestFormatHistory:
    """Verify the frame history table layout."""

    def test_table(self) -> None:
        result = SimulationRunner(2).run("FIFO", [1, 2, 1])
        assert format_history(result).splitlines() == [
            "Frames ↓ |     1 |     2 |     1 |",
            "-" * 33,
            "Frame 1  |     1 |     1 |       |",
            "Frame 2  |       |     2 |       |",
        ]

    def test_two_digit_frame_numbers(self) -> None:
        result = SimulationRunner(10).run("LRU", [3])
        lines = format_history(result).splitlines()
        assert lines[-1].startswith("Frame 10 |")


class TestFormatReport:
    """Verify the full multi-policy report."""

    def test_sections(self) -> None:
        report = format_report(compare([1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5], 3))
        assert report.startswith("Page Reference String:\n[1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]")
        assert "=== FIFO Simulation ===" in report
        assert "=== LRU Simulation ===" in report
        assert "=== Optimal Simulation ===" in report
        assert "Total Page Faults: 9" in report
        assert "Total Page Faults: 10" in report
        assert "Total Page Faults: 7" in report

    def test_empty(self) -> None:
        assert format_report({}) == ""

    def test_summary(self) -> None:
        summary = format_summary(compare([1, 2, 1, 2], 1)).splitlines()
        assert summary[0].startswith("Algorithm")
        assert summary[2].split() == ["FIFO", "4", "1.000"]
        assert len(summary) == 5


class TestPlots:
    """Charts are written to disk."""

    def test_plot_fault_counts(self, tmp_path) -> None:
        path = tmp_path / "faults.png"
        plot_fault_counts(compare([1, 2, 3, 1, 4], 2), str(path))
        assert path.stat().st_size > 0

    def test_plot_fault_curves(self, tmp_path) -> None:
        path = tmp_path / "curves.png"
        plot_fault_curves([1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5], range(1, 6), str(path))
        assert path.stat().st_size > 0
