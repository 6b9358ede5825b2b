"""DocumentManager: the service the editor layer talks to.

Construct one instance at process start (see ``docstore.startup``) and pass
it to whatever needs it. The manager holds configuration and collaborators
only; every operation re-resolves the active root and rescans the folder.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from docstore.config.settings import StoreConfig

from .catalog import Catalog
from .locations import LocationResolver
from .metadata import MetadataReader, MetadataValue
from .models import ActiveRoot, CatalogEntry, MetadataKind, SortOrder
from .naming import NameAllocator
from .paths import PathBuilder
from .platform import ConfiguredDirectories, EnvironmentIdentity
from .protocol import DirectoryProvider, IdentitySource

logger = logging.getLogger(__name__)


class DocumentManager:
    """Storage location, catalog, naming and metadata for one document folder.

    Usage:
        manager = DocumentManager(config)

        manager.active_root_available()
        path = manager.persistent_path("Untitled")
        names = manager.file_list(SortOrder.BY_MODIFICATION_TIME_DESC)
        new_name = manager.available_name("Untitled")
        size = manager.file_size("Untitled")
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        *,
        directories: Optional[DirectoryProvider] = None,
        identity: Optional[IdentitySource] = None,
    ):
        self.config = config or StoreConfig()
        self.directories = directories or ConfiguredDirectories(self.config)
        self.identity = identity or EnvironmentIdentity(self.config.identity_env_var)

        self.resolver = LocationResolver(self.directories, self.identity)
        self.paths = PathBuilder(self.resolver, self.directories, self.config.extension)
        self.catalog = Catalog(self.resolver, self.config.extension)
        self.names = NameAllocator(self.catalog)
        self.metadata_reader = MetadataReader(self.paths)

    @property
    def extension(self) -> str:
        return self.config.extension

    # -------------------------------------------------------------------------
    # Location
    # -------------------------------------------------------------------------

    def cloud_available(self) -> bool:
        """Whether a cloud identity is currently present."""
        return self.resolver.cloud_available()

    def active_root(self, cloud_available: Optional[bool] = None) -> ActiveRoot:
        return self.resolver.active_root(cloud_available)

    def active_root_available(self, cloud_available: Optional[bool] = None) -> bool:
        return self.resolver.active_root(cloud_available).is_available

    @property
    def app_group_dir(self) -> Optional[Path]:
        """Directory shared with companion processes, if configured."""
        return self.directories.app_group_dir()

    @property
    def cache_dir(self) -> Path:
        return self.directories.cache_dir()

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def persistent_path(self, name: str, cloud_available: Optional[bool] = None) -> Optional[Path]:
        """Path of a document under the active root, None without an active root."""
        return self.paths.persistent_path(name, cloud_available)

    def cache_path(self, name: str) -> Optional[Path]:
        """Path of a document's transient artifact in the local cache directory."""
        return self.paths.cache_path(name)

    # -------------------------------------------------------------------------
    # Catalog and naming
    # -------------------------------------------------------------------------

    def file_list(
        self,
        order: SortOrder = SortOrder.BY_NAME,
        cloud_available: Optional[bool] = None,
    ) -> List[str]:
        """File names (with extension) of all documents, empty when unreachable."""
        return self.catalog.file_list(order, cloud_available)

    def entries(
        self,
        order: SortOrder = SortOrder.BY_NAME,
        cloud_available: Optional[bool] = None,
    ) -> List[CatalogEntry]:
        return self.catalog.entries(order, cloud_available)

    def is_name_available(self, name: str, cloud_available: Optional[bool] = None) -> bool:
        return self.names.is_available(name, cloud_available)

    def available_name(self, proposed: str, cloud_available: Optional[bool] = None) -> str:
        return self.names.available_name(proposed, cloud_available)

    # -------------------------------------------------------------------------
    # Metadata
    # -------------------------------------------------------------------------

    def metadata(
        self,
        kind: MetadataKind,
        name: str,
        cloud_available: Optional[bool] = None,
    ) -> Optional[MetadataValue]:
        return self.metadata_reader.attribute(kind, name, cloud_available)

    def creation_date(self, name: str, cloud_available: Optional[bool] = None) -> Optional[datetime]:
        return self.metadata_reader.creation_date(name, cloud_available)

    def last_edited_date(self, name: str, cloud_available: Optional[bool] = None) -> Optional[datetime]:
        return self.metadata_reader.last_edited_date(name, cloud_available)

    def file_size(self, name: str, cloud_available: Optional[bool] = None) -> Optional[int]:
        return self.metadata_reader.file_size(name, cloud_available)

    def describe(self, name: str, cloud_available: Optional[bool] = None) -> Optional[CatalogEntry]:
        """Catalog record for one document, None if it does not exist."""
        return self.metadata_reader.entry(name, cloud_available)
