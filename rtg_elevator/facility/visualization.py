from enum import IntEnum
from typing import Optional, Sequence

import numpy as np

from .state import NUM_FLOORS, Configuration


class CellCode(IntEnum):
    EMPTY = 0
    GENERATOR = 1
    MICROCHIP = 2
    PAIR = 3  # GENERATOR | MICROCHIP


CELL_SYMBOLS = {
    CellCode.EMPTY: ".",
    CellCode.GENERATOR: "G",
    CellCode.MICROCHIP: "M",
    CellCode.PAIR: "X",
}


def floor_grid(config: Configuration) -> np.ndarray:
    """Floor-by-item grid of cell codes, row 0 is the ground floor."""
    grid = np.zeros((NUM_FLOORS, config.num_items), dtype=int)
    for index, item in enumerate(config.items):
        grid[item.generator, index] |= int(CellCode.GENERATOR)
        grid[item.chip, index] |= int(CellCode.MICROCHIP)
    return grid


def floor_counts(config: Configuration) -> np.ndarray:
    """Number of facilities (generators plus chips) on each floor."""
    grid = floor_grid(config)
    generators = np.count_nonzero(grid & int(CellCode.GENERATOR), axis=1)
    chips = np.count_nonzero(grid & int(CellCode.MICROCHIP), axis=1)
    return generators + chips


def render(config: Configuration, names: Optional[Sequence[str]] = None) -> str:
    """Render a configuration as a text diagram, top floor first.

    Example for the hydrogen/lithium report::

             HY LI
        F4    .  .
        F3    .  G
        F2    G  .
        F1 E  M  M
    """
    grid = floor_grid(config)
    width = 2
    lines = []

    if names is not None:
        labels = [name[:width].upper() for name in names]
        lines.append("     " + " ".join(f"{label:>{width}}" for label in labels))

    for floor in range(NUM_FLOORS - 1, -1, -1):
        marker = "E" if config.elevator == floor else " "
        symbols = [CELL_SYMBOLS[CellCode(int(code))] for code in grid[floor]]
        cells = [f"{symbol:>{width}}" for symbol in symbols]
        lines.append(f"F{floor + 1} {marker} " + " ".join(cells))

    return "\n".join(lines)
