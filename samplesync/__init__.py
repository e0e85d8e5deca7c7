"""
samplesync - Incremental sample folder synchronization
"""

from samplesync.runner import SyncOutcome, SyncRunner, SyncStatus, Trigger
from samplesync.session import SyncSession
from samplesync.sync import DirectorySynchronizer, SourceMissingError, SyncError, SyncReport
from samplesync.utils.paths import SyncPaths, load_sync_paths

__version__ = "0.1.0"
__all__ = [
    "DirectorySynchronizer",
    "SourceMissingError",
    "SyncError",
    "SyncOutcome",
    "SyncPaths",
    "SyncReport",
    "SyncRunner",
    "SyncSession",
    "SyncStatus",
    "Trigger",
    "load_sync_paths",
]
