# citygrid/assets/importers/model.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

from citygrid.assets.importers.base import AssetImporter
from citygrid.assets.importers.mtl import MtlParser
from citygrid.assets.importers.obj import ObjParser
from citygrid.assets.importers.texture import TextureImporter, white_texture
from citygrid.assets.materials import DEFAULT_WHITE_TEXTURE, texture_refs
from citygrid.assets.types import LoadedModel, MaterialRecord, TextureData

logger = logging.getLogger(__name__)

ResourceResolver = Callable[[Path, str], Path]


def resolve_resource(base: Path, ref: str) -> Path:
    """
    Resolve a material library or texture reference found in `base`.
    Relative references are taken from the directory holding `base`.
    """
    ref_path = Path(ref)
    if ref_path.is_absolute():
        return ref_path
    return base.parent / ref_path


class ModelImporter(AssetImporter[LoadedModel]):
    """
    Imports an OBJ file along with the MTL libraries it references and,
    optionally, the textures those materials name.
    """

    def __init__(
        self,
        resolver: ResourceResolver = resolve_resource,
        load_textures: bool = True,
    ) -> None:
        self._resolver = resolver
        self._load_textures = load_textures
        self._obj = ObjParser()
        self._mtl = MtlParser()
        self._textures = TextureImporter()

    def import_file(self, path: Path) -> LoadedModel:
        path = Path(path)
        model = self._obj.parse(path.read_text(encoding="utf-8"))

        if not model.geometries:
            raise ValueError(f"No geometry found in OBJ: {path}")

        materials: Dict[str, MaterialRecord] = {}
        for lib in model.material_libs:
            lib_path = self._resolver(path, lib)
            # Later libraries override earlier ones on name clashes.
            materials.update(
                self._mtl.parse(lib_path.read_text(encoding="utf-8"))
            )

        textures: Dict[str, TextureData] = {}
        if self._load_textures:
            textures = self._import_textures(path, materials)

        vertex_count = sum(g.vertex_count for g in model.geometries)
        logger.debug(
            "Imported %s: %d geometries, %d vertices, %d materials, %d textures",
            path,
            len(model.geometries),
            vertex_count,
            len(materials),
            len(textures),
        )

        return LoadedModel(
            model=model,
            materials=materials,
            textures=textures,
            path=str(path),
        )

    def _import_textures(
        self, path: Path, materials: Dict[str, MaterialRecord]
    ) -> Dict[str, TextureData]:
        textures: Dict[str, TextureData] = {
            DEFAULT_WHITE_TEXTURE: white_texture()
        }
        for record in materials.values():
            for ref in texture_refs(record):
                # Materials sharing a map share one decoded texture.
                if ref not in textures:
                    textures[ref] = self._textures.import_file(
                        self._resolver(path, ref)
                    )
        return textures
