"""
Directory synchronization package for mirroring a source tree into a destination tree.
"""

from .directory_sync import (
    DirectorySynchronizer,
    PendingCopy,
    SourceMissingError,
    SyncError,
    SyncReport,
    needs_copy,
)

__all__ = [
    'DirectorySynchronizer',
    'PendingCopy',
    'SourceMissingError',
    'SyncError',
    'SyncReport',
    'needs_copy',
]
