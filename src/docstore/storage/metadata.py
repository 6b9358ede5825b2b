"""Per-document metadata: creation date, modification date, size.

Each attribute has its own typed accessor. A missing document, an
unreadable path or an attribute the platform does not record all come back
as None, never as a zero/epoch placeholder.
"""

import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .models import CatalogEntry, MetadataKind
from .paths import PathBuilder

logger = logging.getLogger(__name__)

MetadataValue = Union[datetime, int]


def _timestamp_to_datetime(ts: Optional[float]) -> Optional[datetime]:
    if ts is None:
        return None
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def created_from_stat(st: os.stat_result) -> Optional[datetime]:
    """Creation time from a stat result, if the platform records one.

    ``st_birthtime`` where available; on Windows ``st_ctime`` is the
    creation time. Elsewhere ``st_ctime`` is the inode change time, which
    is not a creation date, so None is returned.
    """
    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        return _timestamp_to_datetime(birthtime)
    if os.name == "nt":
        return _timestamp_to_datetime(st.st_ctime)
    return None


def modified_from_stat(st: os.stat_result) -> Optional[datetime]:
    return _timestamp_to_datetime(st.st_mtime)


def size_from_stat(st: os.stat_result) -> Optional[int]:
    size = getattr(st, "st_size", None)
    if not isinstance(size, int):
        return None
    return size


class MetadataReader:
    """Reads filesystem attributes for documents under the active root."""

    def __init__(self, paths: PathBuilder):
        self.paths = paths

    def _stat(self, name: str, cloud_available: Optional[bool] = None) -> Optional[os.stat_result]:
        path = self.paths.persistent_path(name, cloud_available)
        if path is None:
            return None
        return self._stat_path(path)

    @staticmethod
    def _stat_path(path: Path) -> Optional[os.stat_result]:
        try:
            st = path.stat()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.debug(f"Cannot read attributes of {path}: {e}")
            return None
        # Directories and other non-regular entries are not documents.
        if not stat.S_ISREG(st.st_mode):
            return None
        return st

    def creation_date(self, name: str, cloud_available: Optional[bool] = None) -> Optional[datetime]:
        st = self._stat(name, cloud_available)
        return created_from_stat(st) if st is not None else None

    def last_edited_date(self, name: str, cloud_available: Optional[bool] = None) -> Optional[datetime]:
        st = self._stat(name, cloud_available)
        return modified_from_stat(st) if st is not None else None

    def file_size(self, name: str, cloud_available: Optional[bool] = None) -> Optional[int]:
        st = self._stat(name, cloud_available)
        return size_from_stat(st) if st is not None else None

    def entry(self, name: str, cloud_available: Optional[bool] = None) -> Optional[CatalogEntry]:
        """All attributes of one document from a single stat call."""
        st = self._stat(name, cloud_available)
        if st is None:
            return None
        return CatalogEntry(
            name=name,
            file_name=self.paths.file_name(name),
            modified_at=modified_from_stat(st),
            created_at=created_from_stat(st),
            size_bytes=size_from_stat(st),
        )

    def attribute(
        self,
        kind: MetadataKind,
        name: str,
        cloud_available: Optional[bool] = None,
    ) -> Optional[MetadataValue]:
        """Read one attribute by kind. Dispatches to the typed accessors."""
        if kind == MetadataKind.CREATED:
            return self.creation_date(name, cloud_available)
        if kind == MetadataKind.MODIFIED:
            return self.last_edited_date(name, cloud_available)
        if kind == MetadataKind.SIZE:
            return self.file_size(name, cloud_available)
        raise ValueError(f"Unknown metadata kind: {kind!r}")
