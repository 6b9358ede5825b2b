"""Store configuration management."""

from docstore.config.settings import (
    StoreConfig,
    default_config_path,
    load_store_config,
)

__all__ = [
    "StoreConfig",
    "default_config_path",
    "load_store_config",
]
