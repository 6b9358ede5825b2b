"""Protocols for the external collaborators of the storage layer.

The host environment owns sign-in, sync transport and directory
provisioning. The storage layer only consumes these narrow interfaces, so
tests and embedding applications can supply their own implementations.
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IdentitySource(Protocol):
    """Reports whether a cloud-synced identity/session is currently active."""

    def cloud_identity_present(self) -> bool:
        """Return True when cloud sync is currently usable.

        Must be re-evaluated on every call; implementations must not cache.
        """
        ...


@runtime_checkable
class DirectoryProvider(Protocol):
    """Supplies the directory handles the storage layer works against.

    None of these methods create directories.
    """

    def local_documents_dir(self) -> Optional[Path]:
        """Local sandbox documents directory, or None if not obtainable."""
        ...

    def cloud_documents_dir(self) -> Optional[Path]:
        """Cloud-synced documents directory, or None if sync is not set up."""
        ...

    def cache_dir(self) -> Path:
        """Ephemeral directory for transient artifacts. Always local."""
        ...

    def app_group_dir(self) -> Optional[Path]:
        """Directory shared with companion processes, or None if unconfigured."""
        ...
