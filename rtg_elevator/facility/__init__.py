"""
Facility model for the radioisotope elevator puzzle.

Configurations, elevator moves, report parsing and floor diagrams.
"""

from .moves import (ElevatorDirection, Facility, Move, apply_move,
                    candidate_moves, facilities_on_floor, legal_moves,
                    successors)
from .report import (PART_TWO_EXTRAS, FacilityReport, ReportParseError,
                     build_configuration, parse_report)
from .state import (NUM_FLOORS, TOP_FLOOR, Configuration, FacilityKind, Item,
                    is_goal, is_valid, normalize)
from .visualization import CellCode, floor_counts, floor_grid, render

__all__ = [
    "NUM_FLOORS",
    "TOP_FLOOR",
    "Configuration",
    "FacilityKind",
    "Item",
    "normalize",
    "is_valid",
    "is_goal",
    "ElevatorDirection",
    "Facility",
    "Move",
    "facilities_on_floor",
    "candidate_moves",
    "apply_move",
    "legal_moves",
    "successors",
    "FacilityReport",
    "ReportParseError",
    "PART_TWO_EXTRAS",
    "build_configuration",
    "parse_report",
    "CellCode",
    "floor_grid",
    "floor_counts",
    "render",
]
