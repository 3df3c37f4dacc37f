"""
Shared fixtures for utilkit tests.
"""

import os

import pytest

from utilkit.config import set_config
from utilkit.store import close_shared_storage


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test against default settings and a private storage file."""
    for key in list(os.environ):
        if key.startswith("UTILKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("UTILKIT_STORAGE_PATH", str(tmp_path / "local_storage.json"))
    set_config(None)
    yield
    close_shared_storage()
    set_config(None)
