"""
Directory Synchronization Module
================================

This module mirrors a source directory into a destination directory,
copying only files that are missing from the destination or strictly older
there than in the source. Nothing is ever deleted from the destination.
"""

import os
import shutil
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from samplesync.utils.logging import log_pass_duration


class SyncError(Exception):
    """Base exception for synchronization errors."""


class SourceMissingError(SyncError):
    """Raised when the source directory of a pass does not exist."""

    def __init__(self, source: Path):
        super().__init__(f"Source path does not exist: {source}")
        self.source = source


class SyncReport(BaseModel):
    """What a single synchronization pass did."""

    source: Path
    destination: Path
    copied_files: list[str] = Field(default_factory=list)
    skipped_files: list[str] = Field(default_factory=list)
    created_directories: list[str] = Field(default_factory=list)

    @property
    def copied_count(self) -> int:
        return len(self.copied_files)


class PendingCopy(BaseModel):
    """A file the next pass would copy."""

    relative_path: str
    reason: Literal["missing", "newer"]


def needs_copy(source_file: Path, destination_file: Path) -> bool:
    """Check whether a source file should be copied over its destination.

    Equal timestamps count as up to date.

    Args:
        source_file: Existing file in the source tree
        destination_file: Corresponding path in the destination tree

    Returns:
        bool: True if the destination is absent or strictly older
    """
    if not destination_file.is_file():
        return True
    return source_file.stat().st_mtime_ns > destination_file.stat().st_mtime_ns


def _stamp_not_older(source_file: Path, target_file: Path) -> None:
    """Raise the copy's mtime to the source's when the source is stamped in the future."""
    source_stat = source_file.stat()
    target_stat = target_file.stat()
    if target_stat.st_mtime_ns < source_stat.st_mtime_ns:
        os.utime(target_file, ns=(target_stat.st_atime_ns, source_stat.st_mtime_ns))


def _relative(path: Path, base: Path) -> str:
    return path.relative_to(base).as_posix()


def _split_entries(directory: Path) -> tuple[list[Path], list[Path]]:
    """Return (files, subdirectories) of a directory in name order."""
    files: list[Path] = []
    subdirs: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_file():
            files.append(entry)
        elif entry.is_dir():
            subdirs.append(entry)
    return files, subdirs


class DirectorySynchronizer:
    """Copies new or updated files from a source tree into a destination tree.

    The synchronizer holds no state; every call reads the filesystem afresh.
    """

    @log_pass_duration
    def synchronize(self, source: str | Path, destination: str | Path) -> SyncReport:
        """Copy every new or updated file from source into destination.

        Args:
            source: Existing directory to copy from
            destination: Directory to copy into, created if missing

        Returns:
            SyncReport: Files copied and skipped and directories created

        Raises:
            SourceMissingError: If source is not an existing directory
            OSError: If a directory cannot be created or a file cannot be copied
        """
        source = Path(source)
        destination = Path(destination)
        if not source.is_dir():
            raise SourceMissingError(source)

        report = SyncReport(source=source, destination=destination)
        self._copy_new_or_updated(source, destination, report)
        return report

    def _copy_new_or_updated(self, source: Path, target: Path, report: SyncReport) -> None:
        if not target.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            report.created_directories.append(_relative(target, report.destination))

        files, subdirs = _split_entries(source)

        for source_file in files:
            target_file = target / source_file.name
            relative_path = _relative(source_file, report.source)
            if needs_copy(source_file, target_file):
                # copyfile leaves the copy's mtime at the time of writing
                shutil.copyfile(source_file, target_file)
                _stamp_not_older(source_file, target_file)
                report.copied_files.append(relative_path)
            else:
                report.skipped_files.append(relative_path)

        for source_subdir in subdirs:
            self._copy_new_or_updated(source_subdir, target / source_subdir.name, report)

    def pending(self, source: str | Path, destination: str | Path) -> list[PendingCopy]:
        """List the files the next pass would copy, without touching anything.

        Args:
            source: Existing directory to copy from
            destination: Directory that would be copied into

        Returns:
            list[PendingCopy]: Files to copy, in walk order

        Raises:
            SourceMissingError: If source is not an existing directory
        """
        source = Path(source)
        destination = Path(destination)
        if not source.is_dir():
            raise SourceMissingError(source)

        pending: list[PendingCopy] = []
        self._collect_pending(source, destination, source, pending)
        return pending

    def _collect_pending(
        self, source: Path, target: Path, root: Path, pending: list[PendingCopy]
    ) -> None:
        files, subdirs = _split_entries(source)
        for source_file in files:
            target_file = target / source_file.name
            if needs_copy(source_file, target_file):
                reason = "newer" if target_file.is_file() else "missing"
                pending.append(PendingCopy(relative_path=_relative(source_file, root), reason=reason))
        for source_subdir in subdirs:
            self._collect_pending(source_subdir, target / source_subdir.name, root, pending)
