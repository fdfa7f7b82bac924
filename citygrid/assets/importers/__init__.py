# citygrid/assets/importers/__init__.py
from citygrid.assets.importers.model import ModelImporter, resolve_resource
from citygrid.assets.importers.mtl import MtlKeyword, MtlParser, parse_mtl
from citygrid.assets.importers.obj import ObjKeyword, ObjParser, parse_obj
from citygrid.assets.importers.texture import TextureImporter

__all__ = [
    "ModelImporter",
    "MtlKeyword",
    "MtlParser",
    "ObjKeyword",
    "ObjParser",
    "TextureImporter",
    "parse_mtl",
    "parse_obj",
    "resolve_resource",
]
