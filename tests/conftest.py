"""Shared pytest fixtures for streamsha tests."""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from streamsha.core.config import Config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """
    Keep tests away from the user's real configuration.
    
    Points the global config into the temp dir, clears STREAMSHA_*
    environment overrides, and runs each test from inside temp_dir.
    """
    global_path = temp_dir / 'global.streamshaconfig'
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', global_path)
    for name in list(os.environ):
        if name.startswith('STREAMSHA_'):
            monkeypatch.delenv(name)
    monkeypatch.chdir(temp_dir)
    return global_path


@pytest.fixture
def sample_files(temp_dir):
    """Create a few files with known contents."""
    files = {
        'empty.txt': b'',
        'abc.txt': b'abc',
        'long.bin': bytes(range(256)) * 9,
    }
    paths = {}
    for name, data in files.items():
        path = temp_dir / name
        path.write_bytes(data)
        paths[name] = path
    return paths
