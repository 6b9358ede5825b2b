"""Store configuration schema and loader.

Configuration is loaded from a YAML file (``$DOCSTORE_CONFIG`` or
``{project_root}/.docstore/config.yaml``) and then overridden by
``DOCSTORE_*`` environment variables. Nothing here creates directories.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from docstore.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOCSTORE_CONFIG"
CONFIG_DIR_NAME = ".docstore"
CONFIG_FILE_NAME = "config.yaml"

# Environment variable -> StoreConfig field
ENV_OVERRIDES = {
    "DOCSTORE_EXTENSION": "extension",
    "DOCSTORE_LOCAL_DOCUMENTS_DIR": "local_documents_dir",
    "DOCSTORE_CLOUD_CONTAINERS_DIR": "cloud_containers_dir",
    "DOCSTORE_CACHE_DIR": "cache_dir",
    "DOCSTORE_APP_GROUPS_DIR": "app_groups_dir",
    "DOCSTORE_APP_GROUP": "app_group",
}


def _default_local_documents_dir() -> Path:
    return Path.home() / "Documents"


class StoreConfig(BaseModel):
    """Document store configuration.

    Attributes:
        extension: Managed document extension, without leading dot.
        local_documents_dir: Local sandbox documents directory.
        cloud_containers_dir: Base directory where sync containers appear.
        cloud_container_id: Identifier of this application's sync container.
        cloud_documents_subdir: Sub-path of the container holding documents.
        cache_dir: Ephemeral cache directory (None = system temp dir).
        app_groups_dir: Base directory for shared group containers.
        app_group: Identifier of the shared group container.
        identity_env_var: Variable whose non-empty value signals a cloud identity.
    """

    extension: str = Field(
        default="txt",
        description="Managed document extension, without leading dot",
    )
    local_documents_dir: Optional[Path] = Field(
        default_factory=_default_local_documents_dir,
        description="Local sandbox documents directory",
    )
    cloud_containers_dir: Optional[Path] = Field(
        default=None,
        description="Base directory under which sync containers appear",
    )
    cloud_container_id: str = Field(
        default="iCloud.com.silverfox.plaintextedit",
        min_length=1,
        description="Identifier of this application's sync container",
    )
    cloud_documents_subdir: str = Field(
        default="Documents",
        min_length=1,
        description="Sub-path of the sync container holding documents",
    )
    cache_dir: Optional[Path] = Field(
        default=None,
        description="Ephemeral cache directory (defaults to the system temp dir)",
    )
    app_groups_dir: Optional[Path] = Field(
        default=None,
        description="Base directory for shared group containers",
    )
    app_group: Optional[str] = Field(
        default=None,
        description="Identifier of the shared group container",
    )
    identity_env_var: str = Field(
        default="DOCSTORE_CLOUD_IDENTITY",
        min_length=1,
        description="Environment variable signalling an active cloud identity",
    )

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Strip a single leading dot and reject empty or path-like values."""
        v = v.strip()
        if v.startswith("."):
            v = v[1:]
        if not v:
            raise ValueError("extension must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError(f"extension must not contain path separators: {v!r}")
        return v

    @field_validator(
        "local_documents_dir", "cloud_containers_dir", "cache_dir", "app_groups_dir"
    )
    @classmethod
    def expand_user(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ``~`` in configured directories."""
        if v is None:
            return None
        return Path(v).expanduser()


def default_config_path(project_root: Optional[Path] = None) -> Path:
    """Return the config file location used when none is given explicitly."""
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    root = project_root if project_root is not None else Path.cwd()
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_var, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            overrides[field_name] = value
    return overrides


def load_store_config(
    config_path: Optional[Path] = None,
    *,
    use_env: bool = True,
) -> StoreConfig:
    """Load store configuration from YAML and environment.

    Args:
        config_path: Explicit path to a YAML config. If not provided, uses
            ``$DOCSTORE_CONFIG`` or ``{cwd}/.docstore/config.yaml``.
            A missing file is not an error; defaults are used.
        use_env: Apply ``DOCSTORE_*`` environment overrides.

    Returns:
        Validated StoreConfig.

    Raises:
        ConfigurationError: If the file is unreadable, not valid YAML, not a
            mapping, or contains invalid values.
    """
    if config_path is None:
        config_path = default_config_path()

    data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in store config {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read store config {config_path}: {e}") from e

        if loaded is None:
            logger.warning(f"Empty store config at {config_path}")
        elif not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Store config {config_path} must be a mapping, got {type(loaded).__name__}"
            )
        else:
            data.update(loaded)
            logger.debug(f"Loaded store config from {config_path}")
    else:
        logger.debug(f"No store config found at {config_path}, using defaults")

    if use_env:
        data.update(_env_overrides())

    try:
        return StoreConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid store configuration: {e}") from e
