# citygrid/types.py
from typing import NewType, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

QuarterTurns = NewType("QuarterTurns", int)  # 0..3, about +Y
