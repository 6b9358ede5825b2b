"""Document path construction.

Pure path computation: nothing here touches the filesystem beyond what the
LocationResolver does to find the active root.
"""

from pathlib import Path
from typing import Optional

from docstore.errors import InvalidDocumentNameError

from .locations import LocationResolver
from .models import PathPurpose
from .protocol import DirectoryProvider


def validate_document_name(name: str) -> str:
    """Check the preconditions for an extension-less document name.

    Raises:
        InvalidDocumentNameError: If the name is empty, blank, a relative
            path marker, or contains a path separator.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidDocumentNameError("Document name must not be empty")
    if name in (".", ".."):
        raise InvalidDocumentNameError(f"Invalid document name: {name!r}")
    if "/" in name or "\\" in name:
        raise InvalidDocumentNameError(f"Document name must not contain path separators: {name!r}")
    return name


class PathBuilder:
    """Builds fully-qualified document paths with the managed extension."""

    def __init__(self, resolver: LocationResolver, directories: DirectoryProvider, extension: str):
        self.resolver = resolver
        self.directories = directories
        self.extension = extension

    def file_name(self, name: str) -> str:
        """Return ``name`` with the managed extension appended unconditionally."""
        validate_document_name(name)
        return f"{name}.{self.extension}"

    def path(
        self,
        name: str,
        purpose: PathPurpose = PathPurpose.PERSISTENT,
        cloud_available: Optional[bool] = None,
    ) -> Optional[Path]:
        """Build the path for a document.

        Args:
            name: Extension-less document name.
            purpose: PERSISTENT resolves against the active root; CACHE
                always resolves against the local cache directory.
            cloud_available: Explicit availability signal (persistent only).

        Returns:
            Path, or None when a persistent path is requested and there is
            no active root.
        """
        file_name = self.file_name(name)

        if purpose == PathPurpose.CACHE:
            return self.directories.cache_dir() / file_name

        root = self.resolver.active_root(cloud_available)
        if root.path is None:
            return None
        return root.path / file_name

    def persistent_path(self, name: str, cloud_available: Optional[bool] = None) -> Optional[Path]:
        return self.path(name, PathPurpose.PERSISTENT, cloud_available)

    def cache_path(self, name: str) -> Path:
        return self.directories.cache_dir() / self.file_name(name)
