# citygrid/assets/registry.py
from typing import Dict, Optional

from citygrid.assets.handle import AssetId
from citygrid.assets.types import LoadedModel


class AssetRegistry:
    """
    Stores loaded models (CPU side) mapped by AssetId.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, LoadedModel] = {}

    def store(self, asset_id: AssetId, data: LoadedModel) -> None:
        """Register a loaded model."""
        self._storage[asset_id] = data

    def get(self, asset_id: AssetId) -> Optional[LoadedModel]:
        """Retrieve model data if available."""
        return self._storage.get(asset_id)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage

    def __len__(self) -> int:
        return len(self._storage)
