#!/usr/bin/env python3
"""
Radioisotope Elevator Solver

Reads a facility report and prints the minimal number of elevator moves
needed to bring every generator and microchip to the fourth floor.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from rtg_elevator.bfs_solver import BFSSolver, SolverConfig
from rtg_elevator.facility import (PART_TWO_EXTRAS, FacilityReport,
                                   ReportParseError, parse_report, render)
from rtg_elevator.util.logger import logger, set_component_level

log = logger.bind(component="cli")


def report_for_part(report: FacilityReport, part: int) -> FacilityReport:
    """Part two adds the elerium and dilithium items on the first floor."""
    if part == 2:
        return report.with_extra_items(PART_TWO_EXTRAS)
    return report


def run_part(
    report: FacilityReport, part: int, config: SolverConfig, show: bool = False
) -> Optional[int]:
    """Solve one part and print its result line."""
    report = report_for_part(report, part)
    if show:
        print(render(report.configuration, report.names))
        print()

    part_log = log.bind(part=part)
    part_start = time.time()
    result = BFSSolver(config).solve(report.configuration)
    elapsed_ms = (time.time() - part_start) * 1000

    if not result.success:
        part_log.error(
            f"No solution after {result.layers} layers "
            f"({result.states_visited} states visited)"
        )
        print(f"Part {part}: No result")
        return None

    print(f"Part {part}: {result.steps}\t({elapsed_ms:.1f} ms)")
    return result.steps


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Radioisotope elevator solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py input.txt                # Solve both parts
  python main.py input.txt --part 1       # Only the report as given
  python main.py input.txt --workers 4    # Expand layers on 4 threads
        """,
    )

    parser.add_argument("input", type=Path, help="Facility report file")
    parser.add_argument(
        "--part", type=int, choices=(1, 2), default=None, help="Solve only this part"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Threads used to expand each layer"
    )
    parser.add_argument(
        "--depth-cap", type=int, default=None, help="Maximum search depth"
    )
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Timeout in milliseconds"
    )
    parser.add_argument(
        "--show", action="store_true", help="Print the initial floor diagram"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over BFS layers"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every BFS layer"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_component_level("bfs_solver", "DEBUG")
        set_component_level("report", "DEBUG")

    try:
        report = parse_report(args.input.read_text())
    except OSError as e:
        log.error(f"Could not read {args.input}: {e}")
        return 1
    except ReportParseError as e:
        log.error(f"Invalid report {args.input}: {e}")
        return 1

    config = SolverConfig(
        depth_cap=args.depth_cap,
        timeout_ms=args.timeout_ms,
        num_workers=args.workers,
        show_progress=args.progress,
    )

    parts = (args.part,) if args.part else (1, 2)
    for part in parts:
        try:
            run_part(report, part, config, show=args.show)
        except ReportParseError as e:
            log.bind(part=part).error(str(e))
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
