"""
BFS solver for the minimal number of elevator moves in the radioisotope puzzle.
"""

import threading
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set

from tqdm import tqdm

from ..facility.moves import successors
from ..facility.state import Configuration, is_goal, normalize
from ..util.logger import logger
from .config import SolverConfig

Parents = Dict[Configuration, Optional[Configuration]]


@dataclass
class BFSResult:
    """Result of BFS solving."""

    steps: Optional[int]
    solution: Optional[List[Configuration]]
    nodes_explored: int
    states_visited: int
    layers: int
    time_taken_ms: float
    success: bool


class BFSSolver:
    """Layered BFS over canonical configurations."""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize BFS solver.

        Args:
            config: Search limits and options, defaults to an unbounded search
        """
        self.config = config or SolverConfig()
        self.logger = logger.bind(component="bfs_solver")
        self._visited_lock = threading.Lock()

    def solve(self, initial: Configuration) -> BFSResult:
        """Find the minimal number of moves bringing everything to the top floor.

        Args:
            initial: Starting configuration

        Returns:
            BFSResult with the step count if a goal was reached
        """
        start_time = time.time()
        depth_cap = self.config.depth_cap
        timeout_ms = self.config.timeout_ms

        start = normalize(initial)
        frontier = [start]
        visited: Set[Configuration] = {start}
        parents: Optional[Parents] = None
        if self.config.track_path:
            parents = {start: None}

        step = 0
        layers = 0
        nodes_explored = 0

        self.logger.info(
            f"Solving {initial.num_items} items, "
            f"elevator on floor {initial.elevator + 1}"
        )

        executor = None
        if self.config.num_workers > 1:
            executor = ThreadPoolExecutor(max_workers=self.config.num_workers)

        try:
            with tqdm(
                desc="BFS layers",
                unit="layer",
                leave=False,
                ncols=100,
                disable=not self.config.show_progress,
            ) as pbar:
                while frontier:
                    elapsed_ms = (time.time() - start_time) * 1000
                    if timeout_ms is not None and elapsed_ms >= timeout_ms:
                        self.logger.warning(
                            f"Timeout after {elapsed_ms:.1f}ms at step {step}"
                        )
                        break

                    layers += 1
                    nodes_explored += len(frontier)

                    goal = next((c for c in frontier if is_goal(c)), None)
                    if goal is not None:
                        elapsed_ms = (time.time() - start_time) * 1000
                        self.logger.info(
                            f"Solved in {step} steps "
                            f"({len(visited)} states, {elapsed_ms:.1f}ms)"
                        )
                        solution = None
                        if parents is not None:
                            solution = self._rebuild_path(parents, goal)
                        return BFSResult(
                            steps=step,
                            solution=solution,
                            nodes_explored=nodes_explored,
                            states_visited=len(visited),
                            layers=layers,
                            time_taken_ms=elapsed_ms,
                            success=True,
                        )

                    if depth_cap is not None and step >= depth_cap:
                        self.logger.warning(f"Hit depth cap ({depth_cap})")
                        break

                    frontier = self._expand_layer(frontier, visited, parents, executor)
                    step += 1

                    self.logger.debug(
                        f"Step {step}: {len(frontier)} new states, "
                        f"{len(visited)} visited"
                    )
                    pbar.update(1)
                    pbar.set_postfix(frontier=len(frontier), visited=len(visited))
        finally:
            if executor is not None:
                executor.shutdown()

        if not frontier:
            self.logger.warning(f"Search space exhausted after {len(visited)} states")

        # No solution found
        elapsed_ms = (time.time() - start_time) * 1000
        return BFSResult(
            steps=None,
            solution=None,
            nodes_explored=nodes_explored,
            states_visited=len(visited),
            layers=layers,
            time_taken_ms=elapsed_ms,
            success=False,
        )

    def explore(self, initial: Configuration) -> Iterator[List[Configuration]]:
        """Yield every BFS layer reachable from the initial configuration."""
        start = normalize(initial)
        frontier = [start]
        visited: Set[Configuration] = {start}

        while frontier:
            yield frontier
            frontier = self._expand_layer(frontier, visited, None, None)

    def _expand_layer(
        self,
        frontier: List[Configuration],
        visited: Set[Configuration],
        parents: Optional[Parents],
        executor: Optional[Executor],
    ) -> List[Configuration]:
        """Expand a layer and return the newly admitted states."""

        def admit(parent: Configuration) -> List[Configuration]:
            admitted = []
            for child in successors(parent):
                # Check and insert under one lock so a state is admitted once
                with self._visited_lock:
                    if child in visited:
                        continue
                    visited.add(child)
                    if parents is not None:
                        parents[child] = parent
                admitted.append(child)
            return admitted

        if executor is None:
            batches = map(admit, frontier)
        else:
            batches = executor.map(admit, frontier)

        return [child for batch in batches for child in batch]

    def _rebuild_path(
        self, parents: Parents, goal: Configuration
    ) -> List[Configuration]:
        path = []
        node: Optional[Configuration] = goal
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path


def solve(
    initial: Configuration, config: Optional[SolverConfig] = None
) -> Optional[int]:
    """Minimal number of moves, or None when the goal cannot be reached."""
    return BFSSolver(config).solve(initial).steps
