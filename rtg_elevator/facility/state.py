"""
Configuration model for the radioisotope elevator puzzle.

A configuration records the floor of every generator and microchip plus the
floor of the elevator. Configurations are immutable values; every move
produces a new one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

NUM_FLOORS = 4
TOP_FLOOR = NUM_FLOORS - 1


class FacilityKind(Enum):
    GENERATOR = "generator"
    MICROCHIP = "microchip"


@dataclass(frozen=True, order=True)
class Item:
    """One element: a generator and its compatible microchip."""

    generator: int
    chip: int

    @property
    def is_paired(self) -> bool:
        return self.generator == self.chip

    def on_floor(self, floor: int) -> bool:
        return self.generator == floor or self.chip == floor

    def floor_of(self, kind: FacilityKind) -> int:
        if kind == FacilityKind.GENERATOR:
            return self.generator
        return self.chip

    def moved(self, kind: FacilityKind, floor: int) -> "Item":
        if kind == FacilityKind.GENERATOR:
            return replace(self, generator=floor)
        return replace(self, chip=floor)


@dataclass(frozen=True)
class Configuration:
    """Snapshot of all facility floors and the elevator floor."""

    items: Tuple[Item, ...]
    elevator: int = 0

    @property
    def num_items(self) -> int:
        return len(self.items)

    def with_items(self, *items: Item) -> "Configuration":
        return Configuration(self.items + tuple(items), self.elevator)

    def normalized(self) -> "Configuration":
        return normalize(self)

    def is_valid(self) -> bool:
        return is_valid(self)

    def is_goal(self) -> bool:
        return is_goal(self)

    def __str__(self) -> str:
        from .visualization import render

        return render(self)


def normalize(config: Configuration) -> Configuration:
    """Return the canonical form of a configuration.

    Items are interchangeable apart from their own generator/chip pairing, so
    sorting the (generator, chip) pairs collapses every relabelling of the
    same layout onto one value.
    """
    items = tuple(sorted(config.items))
    if items == config.items:
        return config
    return Configuration(items, config.elevator)


def is_valid(config: Configuration) -> bool:
    """Check that no microchip gets fried.

    A chip is fried when it shares a floor with any generator while its own
    generator is on another floor.
    """
    for floor in range(NUM_FLOORS):
        has_generator = False
        has_bare_chip = False
        for item in config.items:
            if item.generator == floor:
                has_generator = True
            elif item.chip == floor:
                has_bare_chip = True
            if has_generator and has_bare_chip:
                return False
    return True


def is_goal(config: Configuration) -> bool:
    """All generators and chips are on the top floor."""
    return all(
        item.generator == TOP_FLOOR and item.chip == TOP_FLOOR
        for item in config.items
    )
