# citygrid/spatial/extents.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence, Tuple

import numpy as np

from citygrid.errors import EmptyInputError
from citygrid.types import Vec3

if TYPE_CHECKING:
    from citygrid.assets.types import ParsedModel

_INF = float("inf")


@dataclass(frozen=True, slots=True)
class Extents:
    """Closed axis-aligned box."""

    min: Vec3
    max: Vec3

    @staticmethod
    def empty() -> Extents:
        """Identity for `aggregate`: any box merged with it is unchanged."""
        return Extents((_INF, _INF, _INF), (-_INF, -_INF, -_INF))

    @property
    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    @property
    def size(self) -> Vec3:
        sx, sy, sz = (hi - lo for lo, hi in zip(self.min, self.max))
        return (sx, sy, sz)

    @property
    def center(self) -> Vec3:
        cx, cy, cz = ((lo + hi) * 0.5 for lo, hi in zip(self.min, self.max))
        return (cx, cy, cz)

    def union(self, other: Extents) -> Extents:
        lo = tuple(min(a, b) for a, b in zip(self.min, other.min))
        hi = tuple(max(a, b) for a, b in zip(self.max, other.max))
        return Extents(lo, hi)  # type: ignore[arg-type]


def extents_of(positions: Sequence[float], stride: int = 3) -> Extents:
    """
    Bounding box of a flat position stream (x0, y0, z0, x1, ...).

    Raises:
        EmptyInputError: if `positions` is empty.
        ValueError: if the stream ends partway through a vertex.
    """
    if stride < 3:
        raise ValueError(f"stride must be at least 3, got {stride}")
    if len(positions) == 0:
        raise EmptyInputError("cannot compute extents of an empty stream")
    if len(positions) % stride:
        raise ValueError(
            f"stream of {len(positions)} values is not a multiple of {stride}"
        )

    count = len(positions) // stride
    pts = np.asarray(positions, dtype=np.float64)
    xyz = pts.reshape(count, stride)[:, :3]
    lo = xyz.min(axis=0)
    hi = xyz.max(axis=0)
    return Extents(
        (float(lo[0]), float(lo[1]), float(lo[2])),
        (float(hi[0]), float(hi[1]), float(hi[2])),
    )


def aggregate(items: Iterable[Extents]) -> Extents:
    """Component-wise min/max over `items`; empty input gives Extents.empty()."""
    result = Extents.empty()
    for item in items:
        result = result.union(item)
    return result


def model_extents(model: ParsedModel) -> Extents:
    return aggregate(
        extents_of(g.data["position"])
        for g in model.geometries
        if "position" in g.data
    )


def bounding_sphere(extents: Extents) -> Tuple[Vec3, float]:
    """
    Sphere enclosing the box: centered on the box, reaching its max corner.
    Used to frame a camera around a set of models.
    """
    if extents.is_empty:
        raise EmptyInputError("cannot bound an empty box")

    center = extents.center
    radius = math.dist(center, extents.max)
    return center, radius
