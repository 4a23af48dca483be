from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .state import NUM_FLOORS, Configuration, FacilityKind, is_valid, normalize


class ElevatorDirection(Enum):
    DOWN = -1
    UP = 1

    @property
    def delta(self) -> int:
        return self.value


@dataclass(frozen=True)
class Facility:
    """A single generator or microchip, addressed by item index."""

    item: int
    kind: FacilityKind


@dataclass(frozen=True)
class Move:
    """An elevator trip carrying one or two facilities."""

    direction: ElevatorDirection
    cargo: Tuple[Facility, ...]

    def target_floor(self, config: Configuration) -> int:
        return config.elevator + self.direction.delta


def facilities_on_floor(config: Configuration, floor: int) -> List[Facility]:
    facilities = []
    for index, item in enumerate(config.items):
        if item.generator == floor:
            facilities.append(Facility(index, FacilityKind.GENERATOR))
        if item.chip == floor:
            facilities.append(Facility(index, FacilityKind.MICROCHIP))
    return facilities


def candidate_moves(config: Configuration) -> Iterator[Move]:
    """Yield every elevator move before the safety check.

    Cargo is picked over pairs of facilities (i, j) with i <= j, so a
    generator and a chip of different items can travel together.
    """
    facilities = facilities_on_floor(config, config.elevator)
    for direction in ElevatorDirection:
        target = config.elevator + direction.delta
        if not 0 <= target < NUM_FLOORS:
            continue

        for i in range(len(facilities)):
            for j in range(i, len(facilities)):
                if i == j:
                    cargo = (facilities[i],)
                else:
                    cargo = (facilities[i], facilities[j])
                yield Move(direction, cargo)


def apply_move(config: Configuration, move: Move) -> Configuration:
    target = move.target_floor(config)
    items = list(config.items)
    for facility in move.cargo:
        items[facility.item] = items[facility.item].moved(facility.kind, target)
    return Configuration(tuple(items), target)


def legal_moves(config: Configuration) -> List[Tuple[Move, Configuration]]:
    moves = []
    for move in candidate_moves(config):
        result = apply_move(config, move)
        if is_valid(result):
            moves.append((move, result))
    return moves


def successors(config: Configuration) -> List[Configuration]:
    """Canonical forms of all configurations reachable in one move."""
    return [normalize(result) for _, result in legal_moves(config)]
