# citygrid/world/roads.py
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator, List, Set

from citygrid.constants import EDGE_MARGIN
from citygrid.world.settings import LayoutSettings


class Axis(StrEnum):
    ROW = "row"
    COL = "col"


@dataclass(frozen=True, slots=True, order=True)
class RoadLine:
    """A full row or column of the grid reserved for road."""

    axis: Axis
    index: int


class RoadLineSet:
    """
    Interior road lines of a grid.

    Lines on the same axis are never adjacent, and none sit in the two
    outermost rings; the grid edge itself is always road by separate rule.
    """

    def __init__(self, world_length: int) -> None:
        self.world_length = world_length
        self._lines: Set[RoadLine] = set()

    def in_margin(self, index: int) -> bool:
        return index < EDGE_MARGIN or index > self.world_length - 1 - EDGE_MARGIN

    def is_edge(self, index: int) -> bool:
        return index == 0 or index == self.world_length - 1

    def can_add(self, axis: Axis, index: int) -> bool:
        if self.in_margin(index):
            return False
        return (
            RoadLine(axis, index - 1) not in self._lines
            and RoadLine(axis, index + 1) not in self._lines
        )

    def add(self, axis: Axis, index: int) -> bool:
        """Add the line if allowed. Returns whether it is now present."""
        if not self.can_add(axis, index):
            return False
        self._lines.add(RoadLine(axis, index))
        return True

    def has_row(self, i: int) -> bool:
        return RoadLine(Axis.ROW, i) in self._lines

    def has_col(self, j: int) -> bool:
        return RoadLine(Axis.COL, j) in self._lines

    def is_road(self, i: int, j: int) -> bool:
        """True for cells on a road line or on the grid edge."""
        return (
            self.has_row(i)
            or self.has_col(j)
            or self.is_edge(i)
            or self.is_edge(j)
        )

    def rows(self) -> List[int]:
        return sorted(line.index for line in self._lines if line.axis is Axis.ROW)

    def cols(self) -> List[int]:
        return sorted(line.index for line in self._lines if line.axis is Axis.COL)

    def __contains__(self, line: object) -> bool:
        return line in self._lines

    def __iter__(self) -> Iterator[RoadLine]:
        return iter(sorted(self._lines))

    def __len__(self) -> int:
        return len(self._lines)


def select_road_lines(
    settings: LayoutSettings, rng: random.Random
) -> RoadLineSet:
    """
    Randomly pick interior road lines.

    Stops after `settings.road_count` attempts (capped at
    `settings.max_attempts`). Every attempt counts whether or not its line
    was kept, so the result may hold fewer lines than attempted.
    """
    world_length = settings.world_length
    roads = RoadLineSet(world_length)
    if world_length < 4:
        return roads  # No position in [2, N-2] exists

    attempts = placed = 0
    while placed < settings.road_count and attempts < settings.max_attempts:
        attempts += 1
        axis = Axis.ROW if rng.random() < 0.5 else Axis.COL
        pos = rng.randint(2, world_length - 2)
        if rng.random() < settings.road_probability:
            roads.add(axis, pos)
        placed += 1

    return roads
