"""Active storage root resolution.

Decides per call whether documents live in the cloud-synced directory or in
the local sandbox directory. There is no caching: a toggled availability
signal takes effect on the very next call.
"""

import logging
from typing import Optional

from .models import ActiveRoot
from .protocol import DirectoryProvider, IdentitySource

logger = logging.getLogger(__name__)


class LocationResolver:
    """Selects the active storage root from the availability signal."""

    def __init__(self, directories: DirectoryProvider, identity: IdentitySource):
        self.directories = directories
        self.identity = identity

    def cloud_available(self) -> bool:
        """Current availability signal as reported by the identity source."""
        return self.identity.cloud_identity_present()

    def active_root(self, cloud_available: Optional[bool] = None) -> ActiveRoot:
        """Resolve the active storage root.

        Args:
            cloud_available: Explicit availability signal. When None, the
                identity source is queried.

        Returns:
            ActiveRoot that is local, cloud, or unavailable. An unobtainable
            directory is reported as unavailable, never raised.
        """
        if cloud_available is None:
            cloud_available = self.cloud_available()

        if cloud_available:
            path = self.directories.cloud_documents_dir()
            if path is None:
                logger.debug("Cloud selected but sync directory is unavailable")
                return ActiveRoot.unavailable(cloud_selected=True)
            return ActiveRoot.cloud(path)

        path = self.directories.local_documents_dir()
        if path is None:
            logger.debug("Local selected but documents directory is unavailable")
            return ActiveRoot.unavailable(cloud_selected=False)
        return ActiveRoot.local(path)
