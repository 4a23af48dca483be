#!/usr/bin/env python3
"""
Debug script for BFS solver - prints layer sizes and the solution path.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import rtg_elevator
sys.path.insert(0, str(Path(__file__).parent.parent))

from rtg_elevator.bfs_solver import BFSSolver, SolverConfig
from rtg_elevator.facility import (PART_TWO_EXTRAS, floor_counts,
                                   parse_report, render)
from rtg_elevator.util.logger import set_component_level


def print_layers(solver: BFSSolver, report) -> None:
    """Walk the whole reachable space, one line per BFS layer."""
    total = 0
    goal_step = None
    for step, frontier in enumerate(solver.explore(report.configuration)):
        total += len(frontier)
        if goal_step is None and any(c.is_goal() for c in frontier):
            goal_step = step
        print(f"  Layer {step:3d}: {len(frontier):6d} states ({total} total)")

    print(f"Reachable states: {total}")
    print(f"First goal layer: {goal_step}")


def main():
    """Run debug BFS solver."""
    parser = argparse.ArgumentParser(description="Debug BFS solver with verbose output")
    parser.add_argument("input", type=Path, help="Facility report file")
    parser.add_argument(
        "--part", type=int, choices=(1, 2), default=1, help="Puzzle part"
    )
    parser.add_argument(
        "--layers", action="store_true", help="Explore the full reachable state space"
    )

    args = parser.parse_args()

    set_component_level("bfs_solver", "DEBUG")

    report = parse_report(args.input.read_text())
    if args.part == 2:
        report = report.with_extra_items(PART_TWO_EXTRAS)

    print(f"=== BFS Solver Debug Session ===")
    print(render(report.configuration, report.names))
    print(f"Facilities per floor: {floor_counts(report.configuration).tolist()}")
    print()

    solver = BFSSolver(SolverConfig(track_path=True))

    if args.layers:
        print_layers(solver, report)
        print()

    result = solver.solve(report.configuration)

    if not result.success:
        print("No solution found")
        print(f"States visited: {result.states_visited}")
        return

    # Canonical forms sort the items, so columns are not labelled by name
    for step, config in enumerate(result.solution):
        print(f"--- Step {step} ---")
        print(render(config))
        print()

    print(f"=== Final Result ===")
    print(f"Steps: {result.steps}")
    print(f"Time: {result.time_taken_ms:.1f}ms")
    print(f"Nodes: {result.nodes_explored}")
    print(f"States: {result.states_visited}")


if __name__ == "__main__":
    main()
