# citygrid/world/generator.py
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from citygrid.assets.catalog import AssetCatalog
from citygrid.assets.handle import AssetHandle
from citygrid.constants import ROLE_BUILDINGS, ROLE_ROADS
from citygrid.types import QuarterTurns, Vec3
from citygrid.world.roads import RoadLineSet, select_road_lines
from citygrid.world.settings import LayoutSettings

logger = logging.getLogger(__name__)

# (cos, sin) for 0, 90, 180 and 270 degrees, exact.
_QUARTER_TURN_COS_SIN = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


class RoadVariant(IntEnum):
    """Index of each road model within the catalog's "roads" role."""

    TSPLIT = 0
    JUNCTION = 1
    CORNER = 2
    STRAIGHT = 3


class CellKind(StrEnum):
    CORNER = "corner"
    EDGE_INTERSECTION = "edge_intersection"
    CROSSING = "crossing"
    EDGE_ROAD = "edge_road"
    ROAD = "road"
    BUILDING = "building"


@dataclass(frozen=True, slots=True)
class CellPlacement:
    """One grid cell: which model goes there and how it is transformed."""

    row: int
    col: int
    asset: AssetHandle
    kind: CellKind
    quarter_turns: QuarterTurns
    translation: Vec3

    @property
    def rotation_radians(self) -> float:
        return self.quarter_turns * math.pi / 2

    def world_matrix(self) -> np.ndarray:
        """
        4x4 transform: rotate about +Y, then translate.
        Translation lives in the last column; transpose for column-major upload.
        """
        c, s = _QUARTER_TURN_COS_SIN[self.quarter_turns]
        tx, ty, tz = self.translation
        return np.array(
            [
                [c, 0.0, s, tx],
                [0.0, 1.0, 0.0, ty],
                [-s, 0.0, c, tz],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )


@dataclass(frozen=True)
class WorldLayout:
    settings: LayoutSettings
    road_lines: RoadLineSet
    placements: Tuple[CellPlacement, ...]  # row-major

    def cell(self, i: int, j: int) -> CellPlacement:
        n = self.settings.world_length
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError((i, j))
        return self.placements[i * n + j]

    def __iter__(self) -> Iterator[CellPlacement]:
        return iter(self.placements)

    def __len__(self) -> int:
        return len(self.placements)


class WorldLayoutGenerator:
    """
    Lays out a square city grid: roads around the border, random interior
    road lines, and buildings facing the nearest road everywhere else.

    All randomness comes from the injected `rng`, so the same settings and
    seed always give the same layout.
    """

    def generate(
        self,
        settings: LayoutSettings,
        catalog: AssetCatalog,
        rng: Union[random.Random, int],
    ) -> WorldLayout:
        settings.validate()
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)

        roads = catalog.handles(ROLE_ROADS)
        buildings = catalog.handles(ROLE_BUILDINGS)
        if len(roads) < len(RoadVariant):
            raise KeyError(
                f"Role '{ROLE_ROADS}' needs {len(RoadVariant)} variants, "
                f"got {len(roads)}"
            )

        road_lines = select_road_lines(settings, rng)
        logger.debug(
            "Road lines for %dx%d grid: rows=%s cols=%s",
            settings.world_length,
            settings.world_length,
            road_lines.rows(),
            road_lines.cols(),
        )

        n = settings.world_length
        placements = []
        for i in range(n):
            for j in range(n):
                kind, turns, asset = self._classify(
                    i, j, road_lines, roads, buildings, rng
                )
                placements.append(
                    CellPlacement(
                        row=i,
                        col=j,
                        asset=asset,
                        kind=kind,
                        quarter_turns=QuarterTurns(turns),
                        translation=(
                            i * settings.unit_length,
                            0.0,
                            j * settings.unit_length,
                        ),
                    )
                )

        return WorldLayout(
            settings=settings,
            road_lines=road_lines,
            placements=tuple(placements),
        )

    def _classify(
        self,
        i: int,
        j: int,
        lines: RoadLineSet,
        roads: Sequence[AssetHandle],
        buildings: Sequence[AssetHandle],
        rng: random.Random,
    ) -> Tuple[CellKind, int, AssetHandle]:
        n = lines.world_length
        row_edge = lines.is_edge(i)
        col_edge = lines.is_edge(j)

        if row_edge and col_edge:
            turns = _corner_turns(i, j, n)
            return CellKind.CORNER, turns, roads[RoadVariant.CORNER]

        turns = _edge_intersection_turns(i, j, lines)
        if turns is not None:
            return CellKind.EDGE_INTERSECTION, turns, roads[RoadVariant.TSPLIT]

        if lines.has_row(i) and lines.has_col(j):
            turns = 1 if rng.random() < 0.5 else 0
            return CellKind.CROSSING, turns, roads[RoadVariant.JUNCTION]

        if row_edge or col_edge:
            turns = 1 if col_edge else 0
            return CellKind.EDGE_ROAD, turns, roads[RoadVariant.STRAIGHT]

        if lines.has_row(i) or lines.has_col(j):
            turns = 1 if lines.has_col(j) else 0
            return CellKind.ROAD, turns, roads[RoadVariant.STRAIGHT]

        asset = buildings[rng.randrange(len(buildings))]
        return CellKind.BUILDING, _building_turns(i, j, lines), asset


def _corner_turns(i: int, j: int, n: int) -> int:
    if i == 0 and j == 0:
        return 0
    if i == n - 1 and j == 0:
        return 3
    if i == n - 1 and j == n - 1:
        return 2
    return 1  # (0, n-1)


def _edge_intersection_turns(
    i: int, j: int, lines: RoadLineSet
) -> Optional[int]:
    """T-junction where an interior road line meets the border, else None."""
    if lines.is_edge(i) and lines.has_col(j):
        return 0 if i == 0 else 2
    if lines.is_edge(j) and lines.has_row(i):
        return 3 if j == 0 else 1
    return None


def _building_turns(i: int, j: int, lines: RoadLineSet) -> int:
    """Face the first neighbouring road, checking N, E, W, S in that order."""
    n = lines.world_length
    if i > 0 and lines.is_road(i - 1, j):
        return 3
    if j < n - 1 and lines.is_road(i, j + 1):
        return 0
    if j > 0 and lines.is_road(i, j - 1):
        return 2
    if i < n - 1 and lines.is_road(i + 1, j):
        return 1
    return 0


def generate_world(
    settings: LayoutSettings,
    catalog: AssetCatalog,
    rng: Union[random.Random, int],
) -> WorldLayout:
    return WorldLayoutGenerator().generate(settings, catalog, rng)
