"""Configure the Kivy environment and shared store fixtures for tests."""

import os
import tempfile

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")
os.environ.setdefault("KIVY_HOME", tempfile.mkdtemp(prefix="yommy-kivy-"))

import pytest

from yommy.config import ShareConfig
from yommy.services.storage import MemoryNamespace, PendingStore


@pytest.fixture
def namespace():
    return MemoryNamespace()


@pytest.fixture
def store(namespace):
    return PendingStore(lambda: namespace)


@pytest.fixture
def share_config(tmp_path):
    return ShareConfig(shared_dir=str(tmp_path / "group"))


@pytest.fixture
def json_store(share_config):
    return PendingStore.from_config(share_config)
