# citygrid/assets/handle.py
from dataclasses import dataclass
from typing import NewType

AssetId = NewType("AssetId", int)  # 64-bit integer GUID


@dataclass(frozen=True)
class AssetHandle:
    """
    Lightweight reference to a model in the catalog.
    `index` is the model's position within its role, in load order.
    """

    id: AssetId
    role: str
    index: int
    path: str = ""
