# citygrid/spatial/__init__.py
from citygrid.spatial.extents import (
    Extents,
    aggregate,
    bounding_sphere,
    extents_of,
    model_extents,
)

__all__ = [
    "Extents",
    "aggregate",
    "bounding_sphere",
    "extents_of",
    "model_extents",
]
