"""Storage layer: active location, catalog, naming and metadata.

Usage:
    from docstore.storage import DocumentManager, SortOrder

    manager = DocumentManager(config)

    # Where do documents live right now?
    root = manager.active_root()          # ActiveRoot(kind=LOCAL|CLOUD|UNAVAILABLE)
    path = manager.persistent_path("Notes")

    # Listing (fresh scan every call, empty when unreachable)
    names = manager.file_list(SortOrder.BY_NAME)
    recent = manager.file_list(SortOrder.BY_MODIFICATION_TIME_DESC)

    # Naming
    name = manager.available_name("Untitled")   # "Untitled", "Untitled 1", ...

    # Metadata (None when the document does not exist)
    size = manager.file_size("Notes")
"""

from .models import (
    ActiveRoot,
    CatalogEntry,
    MetadataKind,
    PathPurpose,
    RootKind,
    SortOrder,
)
from .protocol import DirectoryProvider, IdentitySource
from .platform import ConfiguredDirectories, EnvironmentIdentity, StaticIdentity
from .locations import LocationResolver
from .paths import PathBuilder, validate_document_name
from .catalog import Catalog
from .naming import NameAllocator, strip_extension
from .metadata import MetadataReader
from .manager import DocumentManager

__all__ = [
    # Models
    "ActiveRoot",
    "CatalogEntry",
    "MetadataKind",
    "PathPurpose",
    "RootKind",
    "SortOrder",
    # Protocols
    "DirectoryProvider",
    "IdentitySource",
    # Platform adapters
    "ConfiguredDirectories",
    "EnvironmentIdentity",
    "StaticIdentity",
    # Components
    "LocationResolver",
    "PathBuilder",
    "validate_document_name",
    "Catalog",
    "NameAllocator",
    "strip_extension",
    "MetadataReader",
    # Service
    "DocumentManager",
]
