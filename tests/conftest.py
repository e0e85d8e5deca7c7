"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures and utilities for testing samplesync.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from samplesync.utils.path_constants import ENV_VARS
from samplesync.utils.paths import SyncPaths

# Fixed, well-in-the-past timestamp so comparisons never depend on the clock
OLD_MTIME = 1_000_000_000


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure SAMPLESYNC_* variables from the calling shell don't leak into tests."""
    for name in ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def set_mtime() -> Callable[[Path, int], None]:
    """
    Return a helper that sets a file's access and modification time.

    Returns:
        Callable[[Path, int], None]: set_mtime(path, seconds)
    """

    def _set_mtime(path: Path, seconds: int) -> None:
        os.utime(path, (seconds, seconds))

    return _set_mtime


@pytest.fixture
def source_tree(tmp_path: Path, set_mtime) -> Path:
    """
    Create a small source tree with nested directories.

    Layout::

        source/
            readme.txt
            Scenes/
                Demo.unity
                Prefabs/
                    Cube.prefab
            Empty/

    Every file gets OLD_MTIME as its modification time.
    """
    root = tmp_path / "source"
    files = {
        "readme.txt": "Sample readme",
        "Scenes/Demo.unity": "scene data",
        "Scenes/Prefabs/Cube.prefab": "prefab data",
    }
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        set_mtime(path, OLD_MTIME)
    (root / "Empty").mkdir()
    return root


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Destination path that does not exist yet."""
    return tmp_path / "Packages" / "core" / "Samples~"


@pytest.fixture
def sync_paths(tmp_path: Path, source_tree: Path, destination: Path) -> SyncPaths:
    """SyncPaths pointing at the source_tree and destination fixtures."""
    return SyncPaths(root_dir=tmp_path, source_dir=source_tree, destination_dir=destination)
