"""In-memory registry of fault catalogs received during handshake."""

from __future__ import annotations

import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class FaultCatalogRegistry:
    """Fault catalogs keyed by their entity path (the catalog's ``id``).

    Each connected application registers its catalog; later entries with
    the same id replace earlier ones.
    """

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self.catalogs: dict[str, Any] = {}
        for entry in entries:
            catalog_id = str(entry.id)
            if catalog_id in self.catalogs:
                logger.warning(
                    "Duplicate catalog ID '%s' - overwriting previous entry", catalog_id
                )
            self.catalogs[catalog_id] = entry

    def get(self, path: str) -> Any | None:
        """Return the catalog registered for ``path``, or ``None``."""
        return self.catalogs.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self.catalogs

    def __len__(self) -> int:
        return len(self.catalogs)