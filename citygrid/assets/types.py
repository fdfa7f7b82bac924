# citygrid/assets/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from citygrid.types import Vec2, Vec3

# Floats per vertex for each attribute stream.
ATTRIBUTE_COMPONENTS: Dict[str, int] = {
    "position": 3,
    "texcoord": 2,
    "normal": 3,
    "color": 3,
}


@dataclass(frozen=True, slots=True)
class Geometry:
    """One run of triangulated vertex data sharing object/group/material."""

    object_name: str
    groups: Tuple[str, ...]
    material: str
    data: Mapping[str, Tuple[float, ...]]  # attribute kind -> flat floats

    @property
    def vertex_count(self) -> int:
        return len(self.data.get("position", ())) // 3

    def arrays(self) -> Dict[str, np.ndarray]:
        """Per-attribute float32 arrays shaped (vertex_count, components)."""
        return {
            kind: np.asarray(values, dtype=np.float32).reshape(
                -1, ATTRIBUTE_COMPONENTS[kind]
            )
            for kind, values in self.data.items()
        }


@dataclass(frozen=True, slots=True)
class ParsedModel:
    geometries: Tuple[Geometry, ...]
    material_libs: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MaterialRecord:
    """
    Material values exactly as written in an MTL file.
    Fields left as None were absent; defaults come from the material overlay.
    """

    shininess: Optional[float] = None
    ambient: Optional[Vec3] = None
    diffuse: Optional[Vec3] = None
    specular: Optional[Vec3] = None
    emissive: Optional[Vec3] = None
    optical_density: Optional[float] = None
    opacity: Optional[float] = None
    illum: Optional[int] = None
    diffuse_map: Optional[str] = None
    specular_map: Optional[str] = None
    normal_map: Optional[str] = None


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA)


@dataclass(frozen=True)
class LoadedModel:
    """A parsed OBJ together with everything its material libraries pulled in."""

    model: ParsedModel
    materials: Mapping[str, MaterialRecord]
    textures: Mapping[str, TextureData] = field(default_factory=dict)
    path: Optional[str] = None  # For debugging / error reporting.
