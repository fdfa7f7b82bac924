# citygrid/world/__init__.py
from citygrid.world.generator import (
    CellKind,
    CellPlacement,
    RoadVariant,
    WorldLayout,
    WorldLayoutGenerator,
    generate_world,
)
from citygrid.world.roads import Axis, RoadLine, RoadLineSet, select_road_lines
from citygrid.world.settings import LayoutSettings

__all__ = [
    "Axis",
    "CellKind",
    "CellPlacement",
    "LayoutSettings",
    "RoadLine",
    "RoadLineSet",
    "RoadVariant",
    "WorldLayout",
    "WorldLayoutGenerator",
    "generate_world",
    "select_road_lines",
]
