# citygrid/assets/materials.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Mapping, Optional

from citygrid.assets.types import MaterialRecord
from citygrid.constants import (
    DEFAULT_AMBIENT,
    DEFAULT_DIFFUSE,
    DEFAULT_OPACITY,
    DEFAULT_SHININESS,
    DEFAULT_SPECULAR,
)
from citygrid.types import Vec3

# Texture key used when a material names no diffuse map.
DEFAULT_WHITE_TEXTURE = "defaultWhite"


@dataclass(frozen=True, slots=True)
class Material:
    """A MaterialRecord with every field the shading model needs filled in."""

    diffuse: Vec3
    ambient: Vec3
    specular: Vec3
    emissive: Vec3
    shininess: float
    opacity: float
    diffuse_map: str
    specular_map: Optional[str] = None
    normal_map: Optional[str] = None
    optical_density: Optional[float] = None
    illum: Optional[int] = None


DEFAULT_MATERIAL = Material(
    diffuse=DEFAULT_DIFFUSE,
    ambient=DEFAULT_AMBIENT,
    specular=DEFAULT_SPECULAR,
    emissive=(0.0, 0.0, 0.0),
    shininess=DEFAULT_SHININESS,
    opacity=DEFAULT_OPACITY,
    diffuse_map=DEFAULT_WHITE_TEXTURE,
)


def resolve_material(record: Optional[MaterialRecord]) -> Material:
    """Overlay the values present in `record` onto DEFAULT_MATERIAL."""
    if record is None:
        return DEFAULT_MATERIAL

    values = {
        f.name: getattr(DEFAULT_MATERIAL, f.name) for f in fields(Material)
    }
    for f in fields(MaterialRecord):
        value = getattr(record, f.name)
        if value is not None:
            values[f.name] = value
    return Material(**values)


def material_for(
    name: str, materials: Mapping[str, MaterialRecord]
) -> Material:
    """Look up a geometry's material by name, falling back to the default."""
    return resolve_material(materials.get(name))


def texture_refs(record: MaterialRecord) -> List[str]:
    """Texture references named by a record, in field order."""
    refs = [record.diffuse_map, record.specular_map, record.normal_map]
    return [r for r in refs if r]
