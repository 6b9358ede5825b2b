"""Centralized initialization for docstore entry points.

This module provides a single point of initialization for:
- Environment variables (.env loading)
- Store configuration (YAML + DOCSTORE_* overrides)
- Platform capability checks
- Construction of the DocumentManager

The manager is returned to the caller, which passes it on explicitly.
There is no module-level instance.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from docstore.config.settings import CONFIG_DIR_NAME, StoreConfig, default_config_path, load_store_config
from docstore.errors import PlatformCapabilityError
from docstore.storage.manager import DocumentManager
from docstore.storage.platform import ConfiguredDirectories, EnvironmentIdentity
from docstore.storage.protocol import DirectoryProvider, IdentitySource

logger = logging.getLogger(__name__)


def find_project_root(start_path: Optional[Path] = None) -> Path:
    """Find project root by looking for .docstore or pyproject.toml.

    Args:
        start_path: Starting path for search. Defaults to the current directory.

    Returns:
        Project root directory, or start_path if no marker is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()
    for parent in [current] + list(current.parents):
        if (parent / CONFIG_DIR_NAME).is_dir():
            return parent
        if (parent / "pyproject.toml").exists():
            return parent
    return current


def load_env(project_root: Path) -> bool:
    """Load .env file from project root.

    Returns:
        True if .env was loaded, False otherwise.
    """
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        logger.debug(f"Loaded .env from {env_path}")
        return True
    logger.debug(f".env not found at {env_path}")
    return False


def check_platform_capabilities(
    config: StoreConfig,
    directories: DirectoryProvider,
    identity: IdentitySource,
) -> None:
    """Verify the directory capabilities the store cannot run without.

    Raises:
        PlatformCapabilityError: If a shared group container is configured
            but does not exist, or a cloud identity is present while no sync
            container mechanism is configured at all.
    """
    if config.app_group is not None:
        group_dir = directories.app_group_dir()
        if group_dir is None:
            raise PlatformCapabilityError(
                f"App group '{config.app_group}' is configured but app_groups_dir is not set"
            )
        if not group_dir.is_dir():
            raise PlatformCapabilityError(f"Expected app group directory to exist: {group_dir}")

    if config.cloud_containers_dir is None and identity.cloud_identity_present():
        raise PlatformCapabilityError(
            "A cloud identity is present but cloud_containers_dir is not configured; "
            f"cannot locate sync container '{config.cloud_container_id}'"
        )


def initialize(
    config_path: Optional[Path] = None,
    *,
    config: Optional[StoreConfig] = None,
    directories: Optional[DirectoryProvider] = None,
    identity: Optional[IdentitySource] = None,
    project_root: Optional[Path] = None,
    env: bool = True,
) -> DocumentManager:
    """Load configuration, run the startup checks and build the manager.

    Args:
        config_path: Explicit YAML config path.
        config: Ready-made configuration; skips loading when given.
        directories: DirectoryProvider override (defaults to ConfiguredDirectories).
        identity: IdentitySource override (defaults to EnvironmentIdentity).
        project_root: Where to look for .env and .docstore/.
        env: Load .env and apply DOCSTORE_* overrides.

    Returns:
        A DocumentManager to be passed explicitly to its users.

    Raises:
        ConfigurationError: If the configuration is invalid.
        PlatformCapabilityError: If a startup capability check fails.
    """
    if project_root is None:
        project_root = find_project_root()

    if config is None:
        if env:
            load_env(project_root)
        if config_path is None:
            config_path = default_config_path(project_root)
        config = load_store_config(config_path, use_env=env)

    directories = directories or ConfiguredDirectories(config)
    identity = identity or EnvironmentIdentity(config.identity_env_var)

    check_platform_capabilities(config, directories, identity)

    manager = DocumentManager(config, directories=directories, identity=identity)
    root = manager.active_root()
    logger.debug(f"docstore initialized: extension=.{config.extension} active_root={root.kind.value} path={root.path}")
    return manager
