"""Command line driver: run every policy over one reference string and print the tables"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig
from .errors import PageSimError
from .policies import POLICIES
from .reference import (DEFAULT_LENGTH, DEFAULT_PAGE_RANGE, generate_reference_string,
                        parse_frame_count, parse_reference_string)
from .report import format_report, format_summary, plot_fault_counts
from .simulator import compare, fault_curve, find_belady_anomalies

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesim",
        description="Compare FIFO, LRU and Optimal page replacement over a reference string",
    )
    parser.add_argument("frames", help="number of page frames (positive integer)")
    parser.add_argument("-r", "--reference",
                        help="comma or space separated page numbers; random if omitted")
    parser.add_argument("-n", "--length", type=int, default=DEFAULT_LENGTH,
                        help="length of a generated reference string (default: %(default)s)")
    parser.add_argument("--range", dest="page_range", type=int, default=DEFAULT_PAGE_RANGE,
                        help="generated pages are drawn from [0, RANGE) (default: %(default)s)")
    parser.add_argument("--seed", type=int, help="random seed for the generated string")
    parser.add_argument("-p", "--policy", action="append", dest="policies",
                        help=f"policy to run, repeatable (default: {', '.join(POLICIES)})")
    parser.add_argument("--full-history", action="store_true",
                        help="show frame contents on every step, not only on faults")
    parser.add_argument("--summary", action="store_true", help="print a comparison summary")
    parser.add_argument("--sweep", type=int, metavar="MAX",
                        help="also print fault counts for 1..MAX frames")
    parser.add_argument("--plot", metavar="PATH", help="save a fault count bar chart to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def print_sweep(reference, max_frames: int, policies):
    frame_counts = list(range(1, max_frames + 1))
    print(f"{'Frames':<10}" + "".join(f"{n:<6}" for n in frame_counts))
    print("-" * (10 + 6 * len(frame_counts)))
    for name in policies:
        curve = fault_curve(reference, frame_counts, name)
        print(f"{name:<10}" + "".join(f"{int(faults):<6}" for faults in curve))

    anomalies = find_belady_anomalies(reference, max_frames, "FIFO")
    for k in anomalies:
        print(f"Belady's anomaly: FIFO faults more with {k + 1} frames than with {k}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = SimulationConfig(
            frame_count=parse_frame_count(args.frames),
            length=args.length,
            page_range=args.page_range,
            seed=args.seed,
            policies=tuple(args.policies or POLICIES),
            fault_only=not args.full_history,
        ).validate()

        if args.reference is not None:
            reference = parse_reference_string(args.reference)
        else:
            reference = generate_reference_string(config.length, config.page_range, config.seed)
            logger.info("Generated reference string %s", list(reference))
    except PageSimError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    results = compare(reference, config.frame_count, config.policies, config.fault_only)
    print(format_report(results))

    if args.summary:
        print(format_summary(results))
    if args.sweep:
        print()
        print_sweep(reference, args.sweep, config.policies)
    if args.plot:
        try:
            plot_fault_counts(results, args.plot)
        except OSError as e:
            print(f"Error: could not save graph to '{args.plot}': {e.strerror or e}", file=sys.stderr)
            return 1
        print(f"\nGraph saved as '{args.plot}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
