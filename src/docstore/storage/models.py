"""Data models for the document storage layer.

These are transient value objects. Nothing here owns a file handle and
nothing is persisted; every instance is recomputed per call.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class RootKind(str, Enum):
    """Which storage root was selected."""

    LOCAL = "local"
    CLOUD = "cloud"
    UNAVAILABLE = "unavailable"


class PathPurpose(str, Enum):
    """What a built document path will be used for."""

    PERSISTENT = "persistent"
    CACHE = "cache"


class SortOrder(str, Enum):
    """Catalog ordering."""

    BY_NAME = "name"
    BY_MODIFICATION_TIME_DESC = "modified"


class MetadataKind(str, Enum):
    """Per-document attribute that can be read."""

    CREATED = "created"
    MODIFIED = "modified"
    SIZE = "size"


@dataclass(frozen=True)
class ActiveRoot:
    """Outcome of resolving the active storage root.

    Exactly one of three shapes: a local root, a cloud root, or
    unavailable (no path). ``cloud_selected`` records which side the
    availability signal pointed at, so an unavailable cloud root can be
    told apart from an unavailable local one.
    """

    kind: RootKind
    path: Optional[Path] = None
    cloud_selected: bool = False

    @classmethod
    def local(cls, path: Path) -> "ActiveRoot":
        return cls(kind=RootKind.LOCAL, path=path, cloud_selected=False)

    @classmethod
    def cloud(cls, path: Path) -> "ActiveRoot":
        return cls(kind=RootKind.CLOUD, path=path, cloud_selected=True)

    @classmethod
    def unavailable(cls, cloud_selected: bool) -> "ActiveRoot":
        return cls(kind=RootKind.UNAVAILABLE, path=None, cloud_selected=cloud_selected)

    @property
    def is_available(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class CatalogEntry:
    """One managed document found by a directory scan."""

    name: str  # Display name, extension stripped
    file_name: str  # Name including the managed extension
    modified_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    size_bytes: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "name": self.name,
            "file_name": self.file_name,
            "modified_at": self.modified_at.isoformat() if self.modified_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "size_bytes": self.size_bytes,
        }
