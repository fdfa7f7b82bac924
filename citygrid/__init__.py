# citygrid/__init__.py
"""
Wavefront OBJ/MTL asset loading and procedural city grid layout.
"""

from citygrid.assets import AssetCatalog, AssetServer
from citygrid.assets.importers import parse_mtl, parse_obj
from citygrid.world import LayoutSettings, WorldLayoutGenerator

__all__ = [
    "AssetCatalog",
    "AssetServer",
    "LayoutSettings",
    "WorldLayoutGenerator",
    "parse_mtl",
    "parse_obj",
]
