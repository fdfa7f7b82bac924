# citygrid/assets/server.py
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from citygrid.assets.catalog import AssetCatalog
from citygrid.assets.handle import AssetHandle
from citygrid.assets.importers.base import AssetImporter
from citygrid.assets.importers.model import ModelImporter
from citygrid.assets.types import LoadedModel
from citygrid.constants import LOADER_WORKERS
from citygrid.errors import AssetLoadError

logger = logging.getLogger(__name__)


class AssetServer:
    """
    Loads batches of model files from disk into an AssetCatalog.

    Each batch is all-or-nothing: the files are imported in parallel, and
    the catalog only changes if every one of them succeeded.
    """

    def __init__(
        self,
        asset_root: Path,
        catalog: Optional[AssetCatalog] = None,
        importer: Optional[AssetImporter[LoadedModel]] = None,
        max_workers: int = LOADER_WORKERS,
    ) -> None:
        self.root = Path(asset_root)
        self.catalog = catalog if catalog is not None else AssetCatalog()

        self._importer = importer or ModelImporter()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="AssetWorker"
        )

    def load_batch(self, role: str, paths: Sequence[str]) -> List[AssetHandle]:
        """
        Import every path (relative to the asset root) and register the
        models under `role`, preserving the order of `paths`.

        Raises:
            AssetLoadError: if any file fails; nothing from the batch is kept.
        """
        loaded = self._import_all(role, paths)

        handles = [self.catalog.add(role, data) for data in loaded]
        logger.info("Loaded %d assets for role '%s'", len(handles), role)
        return handles

    def load_roles(self, batches: Dict[str, Sequence[str]]) -> AssetCatalog:
        """Load several roles; any failure leaves the catalog untouched."""
        staged = {
            role: self._import_all(role, paths)
            for role, paths in batches.items()
        }

        for role, loaded in staged.items():
            for data in loaded:
                self.catalog.add(role, data)
            logger.info("Loaded %d assets for role '%s'", len(loaded), role)
        return self.catalog

    def _import_all(
        self, role: str, paths: Sequence[str]
    ) -> List[LoadedModel]:
        futures: List[Tuple[str, Future[LoadedModel]]] = [
            (path, self._executor.submit(self._worker_load, self.root / path))
            for path in paths
        ]

        loaded: List[LoadedModel] = []
        failure: Optional[AssetLoadError] = None
        for path, future in futures:
            try:
                loaded.append(future.result())
            except Exception as e:
                if failure is None:
                    failure = AssetLoadError(path, e)

        if failure is not None:
            logger.error("Batch '%s' aborted: %s", role, failure)
            raise failure from failure.cause
        return loaded

    def _worker_load(self, full_path: Path) -> LoadedModel:
        """
        Import a model on a background thread.
        """
        return self._importer.import_file(full_path)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> AssetServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
