"""
Text and chart output for simulation results.

The history table puts the reference string in the header row and one row
per frame underneath, for example with 2 frames over [1, 2, 1]:

    Frames ↓ |     1 |     2 |     1 |
    ---------------------------------
    Frame 1  |     1 |     1 |       |
    Frame 2  |       |     2 |       |
"""

from typing import Iterable, Mapping, Sequence

import matplotlib.pyplot as plt

from .simulator import DEFAULT_POLICIES, SimulationResult, fault_curve

BLANK = " "


def format_history(result: SimulationResult) -> str:
    """Render the frame history of one run as a text table"""
    lines = []
    lines.append("Frames ↓ |" + "".join(f" {page:5d} |" for page in result.reference))
    lines.append("-" * 9 + "-" * 8 * len(result.reference))
    for i, row in enumerate(result.history):
        cells = "".join(f" {BLANK if label is None else label:>5} |" for label in row)
        lines.append(f"Frame {i + 1:<2d} |" + cells)
    return "\n".join(lines)


def format_report(results: Mapping[str, SimulationResult]) -> str:
    """Reference string followed by each policy's table and fault total"""
    if not results:
        return ""
    reference = next(iter(results.values())).reference
    sections = [f"Page Reference String:\n{list(reference)}\n"]
    for name, result in results.items():
        sections.append(f"=== {name} Simulation ===\n"
                        f"{format_history(result)}\n"
                        f"Total Page Faults: {result.fault_count}\n")
    return "\n".join(sections)


def format_summary(results: Mapping[str, SimulationResult]) -> str:
    """One aligned line per policy with its fault count and fault rate"""
    lines = [f"{'Algorithm':<10} {'Page Faults':<12} {'Fault Rate':<12}", "-" * 36]
    for name, result in results.items():
        lines.append(f"{name:<10} {result.fault_count:<12} {result.fault_rate:<12.3f}")
    return "\n".join(lines)


def plot_fault_counts(results: Mapping[str, SimulationResult], path: str):
    """Bar chart of fault counts per policy"""
    names = list(results)
    faults = [results[name].fault_count for name in names]
    frame_count = next(iter(results.values())).frame_count if results else 0

    fig, ax = plt.subplots(figsize=(6, 4))
    bars = ax.bar(names, faults)
    for bar in bars:
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width() / 2., height,
                f'{int(height)}', ha='center', va='bottom', fontsize=9)

    ax.set_title(f'Page Faults with {frame_count} Frames')
    ax.set_ylabel('Page Faults')
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()
    try:
        fig.savefig(path, dpi=150, bbox_inches='tight')
    finally:
        plt.close(fig)


def plot_fault_curves(reference: Sequence[int], frame_counts: Iterable[int], path: str,
                      policies: Iterable[str] = DEFAULT_POLICIES):
    """Line chart of fault count against frame count for each policy"""
    frame_counts = list(frame_counts)

    fig, ax = plt.subplots(figsize=(7, 4))
    for name in policies:
        ax.plot(frame_counts, fault_curve(reference, frame_counts, name),
                marker='o', label=name)

    ax.set_title('Page Faults vs Number of Frames')
    ax.set_xlabel('Frames')
    ax.set_ylabel('Page Faults')
    ax.set_xticks(frame_counts)
    ax.grid(alpha=0.3)
    ax.legend()
    fig.tight_layout()
    try:
        fig.savefig(path, dpi=150, bbox_inches='tight')
    finally:
        plt.close(fig)
