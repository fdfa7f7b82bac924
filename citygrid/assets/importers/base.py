# citygrid/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class AssetImporter(ABC, Generic[T]):
    """Reads one file from disk into CPU-side data. Called from worker threads."""

    @abstractmethod
    def import_file(self, path: Path) -> T: ...
