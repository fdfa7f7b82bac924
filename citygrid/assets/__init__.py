# citygrid/assets/__init__.py
from citygrid.assets.catalog import AssetCatalog
from citygrid.assets.handle import AssetHandle, AssetId
from citygrid.assets.materials import (
    DEFAULT_MATERIAL,
    Material,
    material_for,
    resolve_material,
)
from citygrid.assets.server import AssetServer
from citygrid.assets.types import (
    Geometry,
    LoadedModel,
    MaterialRecord,
    ParsedModel,
    TextureData,
)

__all__ = [
    "AssetCatalog",
    "AssetServer",
    "AssetHandle",
    "AssetId",
    "Geometry",
    "LoadedModel",
    "Material",
    "MaterialRecord",
    "ParsedModel",
    "TextureData",
    "DEFAULT_MATERIAL",
    "material_for",
    "resolve_material",
]
