"""
Pytest fixtures and configuration for docstore tests.
Provides document folders on tmp_path and DocumentManager factories.
"""

import os

import pytest

from docstore.config import StoreConfig
from docstore.storage import DocumentManager, StaticIdentity

CONTAINER_ID = "iCloud.test.docstore"


@pytest.fixture(autouse=True)
def clean_docstore_env(monkeypatch):
    """Keep DOCSTORE_* variables from the developer's shell out of the tests.

    Variables a test loads from a .env file are dropped again afterwards.
    """
    for key in list(os.environ):
        if key.startswith("DOCSTORE_"):
            monkeypatch.delenv(key, raising=False)
    yield
    for key in [k for k in os.environ if k.startswith("DOCSTORE_")]:
        os.environ.pop(key, None)


@pytest.fixture
def local_dir(tmp_path):
    """Local sandbox documents directory."""
    path = tmp_path / "local" / "Documents"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def containers_dir(tmp_path):
    """Base directory for sync containers (no container inside yet)."""
    path = tmp_path / "containers"
    path.mkdir()
    return path


@pytest.fixture
def cloud_dir(containers_dir):
    """Cloud documents directory inside an existing sync container."""
    path = containers_dir / CONTAINER_ID / "Documents"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def store_config(local_dir, containers_dir, cache_dir):
    """StoreConfig pointing at the tmp_path directories."""
    return StoreConfig(
        extension="txt",
        local_documents_dir=local_dir,
        cloud_containers_dir=containers_dir,
        cloud_container_id=CONTAINER_ID,
        cache_dir=cache_dir,
    )


@pytest.fixture
def make_manager(store_config):
    """Factory for DocumentManager with a fixed cloud signal."""

    def _make(cloud: bool = False, config: StoreConfig = None) -> DocumentManager:
        return DocumentManager(config or store_config, identity=StaticIdentity(cloud))

    return _make


@pytest.fixture
def write_doc():
    """Write a file and optionally pin its modification time."""

    def _write(directory, file_name, content="hello", mtime=None):
        path = directory / file_name
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
