"""
Sync Session
============

Ties synchronization passes to a project's lifetime: one pass when the
project opens and another when it closes, so work done in between is
captured in the destination tree.
"""

from samplesync.runner import SyncOutcome, SyncRunner, Trigger
from samplesync.utils.rich_console import get_console_logger

logger = get_console_logger()


class SyncSession:
    """Runs a project-load pass on start and a project-close pass on stop."""

    def __init__(self, runner: SyncRunner) -> None:
        self.runner = runner
        self.outcomes: list[SyncOutcome] = []
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    def start(self) -> SyncOutcome | None:
        """Synchronize on project open and mark the session active.

        Returns:
            SyncOutcome | None: Outcome of the opening pass, None if the
            session was already active
        """
        if self._is_active:
            logger.warning("Sync session is already active")
            return None
        logger.info("Samples synchronizing on project open.")
        outcome = self.runner.run(Trigger.PROJECT_LOAD)
        self.outcomes.append(outcome)
        self._is_active = True
        return outcome

    def stop(self) -> SyncOutcome | None:
        """Synchronize on project close.

        Returns:
            SyncOutcome | None: Outcome of the closing pass, None if the
            session was not active
        """
        if not self._is_active:
            logger.warning("Sync session is not active")
            return None

        outcome = self.runner.run(Trigger.PROJECT_CLOSE)
        self.outcomes.append(outcome)
        self._is_active = False
        if outcome.ok:
            logger.info("Samples synchronized on project close.")
        return outcome

    def __enter__(self) -> "SyncSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
