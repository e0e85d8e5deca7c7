"""
Sync Runner
===========

Runs one synchronization pass on behalf of a trigger: checks the source tree
exists, copies new or updated files, asks the refresh hook to re-scan the
destination and reports the result as a :class:`SyncOutcome`.
"""

import shlex
import subprocess
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from samplesync.sync import DirectorySynchronizer, SyncReport
from samplesync.utils.paths import SyncPaths
from samplesync.utils.rich_console import get_console_logger

logger = get_console_logger()

RefreshHook = Callable[[Path], None]


class Trigger(str, Enum):
    """Why a pass was started."""

    MANUAL = "manual"
    PROJECT_LOAD = "project_load"
    PROJECT_CLOSE = "project_close"


class SyncStatus(str, Enum):
    """Terminal state of a pass."""

    SUCCESS = "success"
    SOURCE_MISSING = "source_missing"
    FAILED = "failed"


class SyncOutcome(BaseModel):
    """Result of a pass as seen by the trigger that started it."""

    trigger: Trigger
    status: SyncStatus
    report: SyncReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == SyncStatus.SUCCESS


def command_refresh_hook(command: str) -> RefreshHook:
    """Build a refresh hook that runs a command with the destination as last argument.

    Args:
        command: Shell-style command line, split with shlex

    Returns:
        RefreshHook: Callable raising CalledProcessError when the command fails
    """
    args = shlex.split(command)
    if not args:
        raise ValueError("Refresh command is empty")

    def refresh(destination: Path) -> None:
        result = subprocess.run(
            [*args, str(destination)],
            capture_output=True,
            text=True,
            check=True,
        )
        if result.stdout:
            logger.debug(result.stdout.strip())

    return refresh


class SyncRunner:
    """Runs synchronization passes for a fixed pair of paths."""

    def __init__(
        self,
        paths: SyncPaths,
        synchronizer: DirectorySynchronizer | None = None,
        refresh: RefreshHook | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            paths: Source and destination configuration
            synchronizer: Synchronizer to use, a fresh one by default
            refresh: Called with the destination after every successful pass.
                Defaults to running ``paths.refresh_command`` when one is set.
        """
        self.paths = paths
        self.synchronizer = synchronizer or DirectorySynchronizer()
        if refresh is None and paths.refresh_command:
            refresh = command_refresh_hook(paths.refresh_command)
        self.refresh = refresh

    def run(self, trigger: Trigger = Trigger.MANUAL) -> SyncOutcome:
        """Run one pass.

        A missing source is logged and reported, never raised. I/O errors
        abort the pass and come back as a failed outcome; files copied before
        the error stay copied.

        Args:
            trigger: What started this pass

        Returns:
            SyncOutcome: Status, report and error message of the pass
        """
        source = self.paths.source_path
        destination = self.paths.destination_path

        if not source.is_dir():
            logger.error(f"Source path does not exist: {source}")
            return SyncOutcome(trigger=trigger, status=SyncStatus.SOURCE_MISSING)

        logger.info(f"Starting samples synchronization ({trigger.value}).")
        try:
            report = self.synchronizer.synchronize(source, destination)
            if self.refresh is not None:
                self.refresh(destination)
        except (OSError, subprocess.CalledProcessError) as error:
            logger.error(f"Samples synchronization failed: {error}")
            return SyncOutcome(trigger=trigger, status=SyncStatus.FAILED, error=str(error))

        for relative_path in report.copied_files:
            logger.debug(f"Copied {relative_path}")
        logger.success(f"Samples synchronized successfully ({report.copied_count} file(s) copied).")
        return SyncOutcome(trigger=trigger, status=SyncStatus.SUCCESS, report=report)
