"""Tests for startup: configuration loading and platform capability checks."""

import os

import pytest

from docstore.config import StoreConfig
from docstore.errors import ConfigurationError, PlatformCapabilityError
from docstore.startup import check_platform_capabilities, find_project_root, initialize, load_env
from docstore.storage import ConfiguredDirectories, DocumentManager, RootKind, StaticIdentity


class TestFindProjectRoot:
    """Tests for find_project_root."""

    def test_finds_docstore_marker(self, tmp_path):
        (tmp_path / ".docstore").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_finds_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "pkg"
        nested.mkdir()

        assert find_project_root(nested) == tmp_path.resolve()


class TestLoadEnv:
    """Tests for .env loading."""

    def test_loads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("DOCSTORE_EXTENSION=md\n")

        assert load_env(tmp_path) is True
        assert os.environ["DOCSTORE_EXTENSION"] == "md"

    def test_missing_env_file(self, tmp_path):
        assert load_env(tmp_path) is False


class TestCheckPlatformCapabilities:
    """Tests for the startup precondition checks."""

    def test_passes_with_defaults(self, store_config):
        check_platform_capabilities(
            store_config, ConfiguredDirectories(store_config), StaticIdentity(False)
        )

    def test_missing_app_group_dir_is_fatal(self, tmp_path):
        config = StoreConfig(app_groups_dir=tmp_path, app_group="group.pixure")

        with pytest.raises(PlatformCapabilityError, match="app group directory"):
            check_platform_capabilities(config, ConfiguredDirectories(config), StaticIdentity(False))

    def test_app_group_without_base_dir_is_fatal(self):
        config = StoreConfig(app_group="group.pixure")

        with pytest.raises(PlatformCapabilityError):
            check_platform_capabilities(config, ConfiguredDirectories(config), StaticIdentity(False))

    def test_existing_app_group_passes(self, tmp_path):
        (tmp_path / "group.pixure").mkdir()
        config = StoreConfig(app_groups_dir=tmp_path, app_group="group.pixure")

        check_platform_capabilities(config, ConfiguredDirectories(config), StaticIdentity(False))

    def test_cloud_identity_without_container_mechanism_is_fatal(self):
        config = StoreConfig(cloud_containers_dir=None)

        with pytest.raises(PlatformCapabilityError, match="cloud_containers_dir"):
            check_platform_capabilities(config, ConfiguredDirectories(config), StaticIdentity(True))

    def test_missing_container_is_not_fatal(self, store_config):
        """An absent sync container is a runtime 'unavailable', not a startup error."""
        check_platform_capabilities(
            store_config, ConfiguredDirectories(store_config), StaticIdentity(True)
        )

    def test_is_configuration_error(self):
        assert issubclass(PlatformCapabilityError, ConfigurationError)


class TestInitialize:
    """Tests for initialize."""

    def test_returns_manager_from_config(self, store_config, local_dir):
        manager = initialize(config=store_config, identity=StaticIdentity(False))

        assert isinstance(manager, DocumentManager)
        assert manager.active_root().kind == RootKind.LOCAL
        assert manager.active_root().path == local_dir

    def test_loads_yaml_config(self, tmp_path, local_dir):
        config_path = tmp_path / "store.yaml"
        config_path.write_text(f"extension: md\nlocal_documents_dir: {local_dir}\n")

        manager = initialize(config_path, identity=StaticIdentity(False), project_root=tmp_path)

        assert manager.extension == "md"
        assert manager.persistent_path("a") == local_dir / "a.md"

    def test_env_file_applied(self, tmp_path, local_dir):
        (tmp_path / ".env").write_text(f"DOCSTORE_LOCAL_DOCUMENTS_DIR={local_dir}\nDOCSTORE_EXTENSION=rtf\n")

        manager = initialize(identity=StaticIdentity(False), project_root=tmp_path)

        assert manager.extension == "rtf"
        assert manager.active_root().path == local_dir

    def test_failed_check_raises(self, tmp_path):
        config = StoreConfig(app_groups_dir=tmp_path, app_group="missing.group")

        with pytest.raises(PlatformCapabilityError):
            initialize(config=config, identity=StaticIdentity(False))

    def test_each_call_builds_new_manager(self, store_config):
        first = initialize(config=store_config, identity=StaticIdentity(False))
        second = initialize(config=store_config, identity=StaticIdentity(False))

        assert first is not second
