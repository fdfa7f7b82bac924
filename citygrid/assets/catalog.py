# citygrid/assets/catalog.py
from __future__ import annotations

import hashlib
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from citygrid.assets.handle import AssetHandle, AssetId
from citygrid.assets.registry import AssetRegistry
from citygrid.assets.types import (
    LoadedModel,
    MaterialRecord,
    ParsedModel,
    TextureData,
)
from citygrid.spatial.extents import Extents, aggregate, model_extents


class AssetCatalog:
    """
    Parsed models grouped by a caller-chosen role ("buildings", "roads", ...).

    Models keep their load order within a role, so a role's handles can be
    addressed by index. Built once, then read by the layout generator.
    """

    def __init__(self) -> None:
        self.registry = AssetRegistry()
        self._roles: Dict[str, List[AssetHandle]] = {}

    def load(
        self,
        role: str,
        model: ParsedModel,
        materials: Mapping[str, MaterialRecord],
        textures: Optional[Mapping[str, TextureData]] = None,
        path: str = "",
    ) -> AssetHandle:
        return self.add(
            role,
            LoadedModel(
                model=model,
                materials=dict(materials),
                textures=dict(textures or {}),
                path=path or None,
            ),
        )

    def add(self, role: str, loaded: LoadedModel) -> AssetHandle:
        handles = self._roles.setdefault(role, [])
        index = len(handles)
        path = loaded.path or ""

        key = f"{role}/{index}/{path}"
        asset_id = AssetId(
            int(hashlib.sha256(key.encode()).hexdigest(), 16) % (10**16)
        )
        handle = AssetHandle(asset_id, role, index, path)

        self.registry.store(asset_id, loaded)
        handles.append(handle)
        return handle

    def handles(self, role: str) -> Sequence[AssetHandle]:
        try:
            return tuple(self._roles[role])
        except KeyError:
            raise KeyError(f"No assets loaded for role '{role}'")

    def variant(self, role: str, index: int) -> AssetHandle:
        handles = self.handles(role)
        if not 0 <= index < len(handles):
            raise KeyError(
                f"Role '{role}' has {len(handles)} assets, no index {index}"
            )
        return handles[index]

    def get(self, handle: AssetHandle) -> LoadedModel:
        data = self.registry.get(handle.id)
        if data is None:
            raise KeyError(f"Asset not in catalog: {handle}")
        return data

    def extents(self, role: Optional[str] = None) -> Extents:
        """Aggregate extents of one role, or of every model when role is None."""
        roles = [role] if role is not None else list(self._roles)
        return aggregate(
            model_extents(self.get(h).model)
            for r in roles
            for h in self.handles(r)
        )

    @property
    def roles(self) -> Sequence[str]:
        return tuple(self._roles)

    def __contains__(self, role: str) -> bool:
        return role in self._roles

    def __iter__(self) -> Iterator[AssetHandle]:
        for handles in self._roles.values():
            yield from handles
