"""
Configuration for the BFS solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Configuration for the elevator BFS."""

    # Search limits (None means unbounded)
    depth_cap: Optional[int] = None  # Max number of BFS layers to expand
    timeout_ms: Optional[float] = None  # Wall clock budget, checked once per layer

    # Expansion
    num_workers: int = 1  # >1 expands each layer on a thread pool

    # Output
    track_path: bool = False  # Record parents so the solution path can be rebuilt
    show_progress: bool = False  # tqdm bar over BFS layers
