"""Directory-scan catalog of managed documents.

Every call rescans the active root. Access problems of any kind (no active
root, missing directory, permissions, I/O errors) produce an empty result;
the catalog never raises to its caller.

Ordering:
- BY_NAME: ascending code-point order of the full file name.
- BY_MODIFICATION_TIME_DESC: entries whose modification time cannot be read
  come first, then most recent first. Ties keep scan order (stable sort),
  and scan order is platform-defined.
"""

import logging
import os
from typing import List, Optional

from .locations import LocationResolver
from .metadata import created_from_stat, modified_from_stat, size_from_stat
from .models import CatalogEntry, SortOrder

logger = logging.getLogger(__name__)


def _is_hidden(entry: os.DirEntry) -> bool:
    return entry.name.startswith(".")


def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _entry_stat(entry: os.DirEntry) -> Optional[os.stat_result]:
    try:
        return entry.stat()
    except OSError as e:
        logger.debug(f"Cannot stat {entry.path}: {e}")
        return None


class Catalog:
    """Lists managed documents under the active storage root."""

    def __init__(self, resolver: LocationResolver, extension: str):
        self.resolver = resolver
        self.extension = extension

    @property
    def suffix(self) -> str:
        return f".{self.extension}"

    def document_name(self, file_name: str) -> str:
        """Extension-less name of a managed file; the whole suffix is removed."""
        return file_name[: -len(self.suffix)]

    def _scan(self, cloud_available: Optional[bool] = None) -> List[os.DirEntry]:
        """Non-recursive scan of the active root, hidden entries skipped."""
        root = self.resolver.active_root(cloud_available)
        if root.path is None:
            return []

        try:
            with os.scandir(root.path) as it:
                return [entry for entry in it if not _is_hidden(entry)]
        except OSError as e:
            logger.debug(f"Cannot list {root.kind.value} root {root.path}: {e}")
            return []

    def _sorted(self, entries: List[os.DirEntry], order: SortOrder) -> List[os.DirEntry]:
        if order == SortOrder.BY_NAME:
            return sorted(entries, key=lambda e: e.name)

        if order == SortOrder.BY_MODIFICATION_TIME_DESC:
            def key(entry: os.DirEntry):
                st = _entry_stat(entry)
                if st is None:
                    return (0, 0.0)
                return (1, -st.st_mtime)

            return sorted(entries, key=key)

        raise ValueError(f"Unknown sort order: {order!r}")

    def _managed(self, entries: List[os.DirEntry]) -> List[os.DirEntry]:
        return [e for e in entries if e.name.endswith(self.suffix) and _is_regular_file(e)]

    def file_list(
        self,
        order: SortOrder = SortOrder.BY_NAME,
        cloud_available: Optional[bool] = None,
    ) -> List[str]:
        """File names (extension included) of managed documents, sorted."""
        entries = self._managed(self._sorted(self._scan(cloud_available), order))
        return [e.name for e in entries]

    def entries(
        self,
        order: SortOrder = SortOrder.BY_NAME,
        cloud_available: Optional[bool] = None,
    ) -> List[CatalogEntry]:
        """Managed documents as CatalogEntry records, same order as file_list."""
        records = []
        for entry in self._managed(self._sorted(self._scan(cloud_available), order)):
            st = _entry_stat(entry)
            records.append(
                CatalogEntry(
                    name=self.document_name(entry.name),
                    file_name=entry.name,
                    modified_at=modified_from_stat(st) if st is not None else None,
                    created_at=created_from_stat(st) if st is not None else None,
                    size_bytes=size_from_stat(st) if st is not None else None,
                )
            )
        return records
