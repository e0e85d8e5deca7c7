"""
Sync Path Configuration
=======================

Resolves the source and destination trees for a synchronization pass.

Values come from explicit arguments first, then ``SAMPLESYNC_*`` environment
variables, then a ``.env`` file in the project root, then the defaults in
:mod:`samplesync.utils.path_constants`.
"""

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field

from samplesync.utils.path_constants import (
    DEFAULT_DESTINATION_DIR,
    DEFAULT_SOURCE_DIR,
    ENV_FILE_NAME,
    ENV_VARS,
)


class SyncPaths(BaseModel):
    """Paths used by a synchronization pass."""

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(default_factory=lambda: Path.cwd())
    source_dir: Path = Path(DEFAULT_SOURCE_DIR)
    destination_dir: Path = Path(DEFAULT_DESTINATION_DIR)
    refresh_command: str | None = None

    @property
    def source_path(self) -> Path:
        """Source tree, resolved against the root when relative."""
        return self._resolve(self.source_dir)

    @property
    def destination_path(self) -> Path:
        """Destination tree, resolved against the root when relative."""
        return self._resolve(self.destination_dir)

    def source_exists(self) -> bool:
        return self.source_path.is_dir()

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.root_dir / path

    def as_rows(self) -> list[list[str]]:
        """Rows for a two-column (setting, value) table."""
        return [
            ["Root", str(self.root_dir)],
            ["Source", str(self.source_path)],
            ["Destination", str(self.destination_path)],
            ["Refresh command", self.refresh_command or "(none)"],
        ]


def _first_set(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def load_sync_paths(
    root_dir: str | Path | None = None,
    source: str | Path | None = None,
    destination: str | Path | None = None,
    refresh_command: str | None = None,
) -> SyncPaths:
    """Build a SyncPaths from arguments, environment and the project's .env file.

    Args:
        root_dir: Project root; relative source/destination paths hang off it
        source: Source tree override
        destination: Destination tree override
        refresh_command: Command to run after a successful pass

    Returns:
        SyncPaths: The resolved configuration
    """
    root = _first_set(str(root_dir) if root_dir else None, os.getenv(ENV_VARS["root"]))
    root_path = Path(root) if root else Path.cwd()

    env_file = root_path / ENV_FILE_NAME
    file_values = dotenv_values(env_file) if env_file.is_file() else {}

    def lookup(key: str, explicit: str | Path | None) -> str | None:
        name = ENV_VARS[key]
        return _first_set(
            str(explicit) if explicit else None,
            os.getenv(name),
            file_values.get(name),
        )

    return SyncPaths(
        root_dir=root_path,
        source_dir=Path(lookup("source", source) or DEFAULT_SOURCE_DIR),
        destination_dir=Path(lookup("destination", destination) or DEFAULT_DESTINATION_DIR),
        refresh_command=lookup("refresh_command", refresh_command),
    )
