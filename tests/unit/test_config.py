"""Unit tests for store configuration loading."""

from pathlib import Path

import pytest

from docstore.config import StoreConfig, default_config_path, load_store_config
from docstore.errors import ConfigurationError


class TestStoreConfig:
    """Tests for StoreConfig validation."""

    def test_defaults(self):
        config = StoreConfig()

        assert config.extension == "txt"
        assert config.local_documents_dir == Path.home() / "Documents"
        assert config.cloud_containers_dir is None
        assert config.cloud_documents_subdir == "Documents"
        assert config.cache_dir is None
        assert config.app_group is None

    def test_leading_dot_stripped(self):
        assert StoreConfig(extension=".md").extension == "md"

    @pytest.mark.parametrize("extension", ["", ".", "  ", "a/b", "a\\b"])
    def test_invalid_extension(self, extension):
        with pytest.raises(ValueError):
            StoreConfig(extension=extension)

    def test_expands_user(self):
        config = StoreConfig(cache_dir="~/cache-here")

        assert config.cache_dir == Path.home() / "cache-here"


class TestLoadStoreConfig:
    """Tests for load_store_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_store_config(tmp_path / "absent.yaml")

        assert config == StoreConfig()

    def test_loads_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "extension: md\n"
            f"local_documents_dir: {tmp_path / 'docs'}\n"
            "cloud_container_id: iCloud.example\n"
        )

        config = load_store_config(config_path)

        assert config.extension == "md"
        assert config.local_documents_dir == tmp_path / "docs"
        assert config.cloud_container_id == "iCloud.example"

    def test_empty_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")

        assert load_store_config(config_path).extension == "txt"

    def test_invalid_yaml_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("extension: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_store_config(config_path)

    def test_non_mapping_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_store_config(config_path)

    def test_invalid_value_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("extension: ''\n")

        with pytest.raises(ConfigurationError, match="Invalid store configuration"):
            load_store_config(config_path)

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("extension: md\n")
        monkeypatch.setenv("DOCSTORE_EXTENSION", "rtf")
        monkeypatch.setenv("DOCSTORE_CACHE_DIR", str(tmp_path / "cache"))

        config = load_store_config(config_path)

        assert config.extension == "rtf"
        assert config.cache_dir == tmp_path / "cache"

    def test_env_ignored_when_disabled(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCSTORE_EXTENSION", "rtf")

        assert load_store_config(tmp_path / "absent.yaml", use_env=False).extension == "txt"


class TestDefaultConfigPath:
    """Tests for default_config_path."""

    def test_project_root_location(self, tmp_path):
        assert default_config_path(tmp_path) == tmp_path / ".docstore" / "config.yaml"

    def test_env_var_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCSTORE_CONFIG", str(tmp_path / "custom.yaml"))

        assert default_config_path(tmp_path) == tmp_path / "custom.yaml"
