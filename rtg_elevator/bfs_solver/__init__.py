"""
BFS solver for the radioisotope elevator puzzle.

Finds the minimal number of elevator moves that brings every generator and
microchip to the top floor without frying a chip.
"""

from .config import SolverConfig
from .solver import BFSResult, BFSSolver, solve

__all__ = ["BFSSolver", "BFSResult", "SolverConfig", "solve"]
