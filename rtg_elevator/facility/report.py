"""
Parsing of the facility report into an initial configuration.

Each line of the report describes one floor, ground floor first::

    The first floor contains a hydrogen-compatible microchip and a lithium-compatible microchip.
    The second floor contains a hydrogen generator.
    The third floor contains a lithium generator.
    The fourth floor contains nothing relevant.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from ..util.logger import logger
from .state import NUM_FLOORS, Configuration, FacilityKind, Item

FACILITY_RE = re.compile(
    r"(?P<name>[a-z]+)(?:-compatible)?\s(?P<kind>generator|microchip)"
)

# Extra items found on the ground floor in the second part of the puzzle
PART_TWO_EXTRAS = ("elerium", "dilithium")

Placement = Tuple[str, int, int]

log = logger.bind(component="report")


class ReportParseError(ValueError):
    """Raised when a facility report cannot be turned into a configuration."""


@dataclass(frozen=True)
class FacilityReport:
    names: Tuple[str, ...]
    configuration: Configuration

    def placements(self) -> List[Placement]:
        """(name, generator floor, chip floor) for every item."""
        return [
            (name, item.generator, item.chip)
            for name, item in zip(self.names, self.configuration.items)
        ]

    def with_extra_items(self, names: Sequence[str]) -> "FacilityReport":
        """Add items with both facilities on the ground floor."""
        duplicates = set(names) & set(self.names)
        if duplicates:
            raise ReportParseError(f"Items already in report: {sorted(duplicates)}")
        return FacilityReport(
            self.names + tuple(names),
            self.configuration.with_items(*(Item(0, 0) for _ in names)),
        )


def build_configuration(
    placements: Iterable[Placement], elevator: int = 0
) -> Configuration:
    items = []
    for name, generator, chip in placements:
        item = Item(generator, chip)
        for kind in FacilityKind:
            floor = item.floor_of(kind)
            if not 0 <= floor < NUM_FLOORS:
                raise ValueError(
                    f"{name} {kind.value} floor {floor} "
                    f"out of bounds [0, {NUM_FLOORS - 1}]"
                )
        items.append(item)

    if not 0 <= elevator < NUM_FLOORS:
        raise ValueError(
            f"elevator floor {elevator} out of bounds [0, {NUM_FLOORS - 1}]"
        )

    return Configuration(tuple(items), elevator)


def parse_report(text: str) -> FacilityReport:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) > NUM_FLOORS:
        raise ReportParseError(
            f"Report describes {len(lines)} floors, expected at most {NUM_FLOORS}"
        )

    # name -> {kind: floor}, insertion order gives the item order
    found: Dict[str, Dict[FacilityKind, int]] = {}
    for floor, line in enumerate(lines):
        for match in FACILITY_RE.finditer(line):
            name = match.group("name")
            kind = FacilityKind(match.group("kind"))
            floors = found.setdefault(name, {})
            if kind in floors:
                raise ReportParseError(f"{name} {kind.value} reported twice")
            floors[kind] = floor
            log.debug(f"Floor {floor + 1}: {name} {kind.value}")

    if not found:
        raise ReportParseError("Report contains no generators or microchips")

    placements = []
    for name, floors in found.items():
        missing = [kind.value for kind in FacilityKind if kind not in floors]
        if missing:
            raise ReportParseError(f"{name} has no {' or '.join(missing)}")
        placements.append(
            (name, floors[FacilityKind.GENERATOR], floors[FacilityKind.MICROCHIP])
        )

    log.info(f"Parsed {len(placements)} items from {len(lines)} floors")
    return FacilityReport(
        tuple(name for name, _, _ in placements), build_configuration(placements)
    )
