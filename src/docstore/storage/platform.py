"""Default platform adapters backed by StoreConfig and the process environment."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from docstore.config.settings import StoreConfig

logger = logging.getLogger(__name__)


class ConfiguredDirectories:
    """DirectoryProvider reading locations from a StoreConfig.

    Every lookup checks the filesystem again; a container that appears or
    disappears between calls is picked up on the next call.
    """

    def __init__(self, config: StoreConfig):
        self.config = config

    def local_documents_dir(self) -> Optional[Path]:
        path = self.config.local_documents_dir
        if path is None:
            return None
        if not path.is_dir():
            logger.debug(f"Local documents directory not found: {path}")
            return None
        return path

    def cloud_documents_dir(self) -> Optional[Path]:
        base = self.config.cloud_containers_dir
        if base is None:
            return None

        container = base / self.config.cloud_container_id
        if not container.is_dir():
            logger.debug(f"Sync container not obtainable: {container}")
            return None

        # The documents sub-path may not exist yet; listing it then yields nothing.
        return container / self.config.cloud_documents_subdir

    def cache_dir(self) -> Path:
        if self.config.cache_dir is not None:
            return self.config.cache_dir
        return Path(tempfile.gettempdir())

    def app_group_dir(self) -> Optional[Path]:
        if self.config.app_group is None or self.config.app_groups_dir is None:
            return None
        return self.config.app_groups_dir / self.config.app_group


class EnvironmentIdentity:
    """IdentitySource that reads an environment variable on every call.

    A non-empty value (the identity token) means a cloud session is active.
    """

    def __init__(self, env_var: str = "DOCSTORE_CLOUD_IDENTITY"):
        self.env_var = env_var

    def cloud_identity_present(self) -> bool:
        return bool(os.getenv(self.env_var, "").strip())


class StaticIdentity:
    """IdentitySource with a fixed answer, for hosts that push the signal in."""

    def __init__(self, present: bool):
        self.present = present

    def cloud_identity_present(self) -> bool:
        return self.present
