"""In-process holder for the most recent successful feed load."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from canalflow.ingest.csv_loader import load_feed
from canalflow.ingest.models import DischargeRecord, IngestionBatch

logger = logging.getLogger(__name__)

Loader = Callable[[], IngestionBatch]


class StoreNotLoadedError(LookupError):
    """Raised when records are requested before any successful load."""


class DischargeStore:
    """Single-slot cache of the canonical record set.

    A failed load leaves the previous snapshot in place and re-raises;
    the stale snapshot is never returned in place of the error.
    """

    def __init__(self, loader: Loader = load_feed) -> None:
        self._loader = loader
        self._batch: Optional[IngestionBatch] = None

    @property
    def is_loaded(self) -> bool:
        return self._batch is not None

    @property
    def batch(self) -> Optional[IngestionBatch]:
        return self._batch

    def load(self, force: bool = False) -> List[DischargeRecord]:
        if self._batch is not None and not force:
            return list(self._batch.records)

        try:
            batch = self._loader()
        except Exception:
            logger.exception("Discharge feed load failed")
            raise
        self._batch = batch
        logger.info("Cached %d discharge records", len(batch.records))
        return list(batch.records)

    def get(self) -> List[DischargeRecord]:
        if self._batch is None:
            raise StoreNotLoadedError("Discharge data has not been loaded")
        return list(self._batch.records)

    def invalidate(self) -> None:
        self._batch = None
