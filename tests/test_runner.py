"""Tests for running synchronization passes on behalf of triggers."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from samplesync.runner import SyncRunner, SyncStatus, Trigger, command_refresh_hook
from samplesync.sync import SyncReport
from samplesync.utils.paths import SyncPaths


def test_successful_pass(sync_paths, destination):
    outcome = SyncRunner(sync_paths).run()

    assert outcome.ok
    assert outcome.status == SyncStatus.SUCCESS
    assert outcome.trigger == Trigger.MANUAL
    assert outcome.report.copied_count == 3
    assert outcome.error is None
    assert (destination / "Scenes" / "Prefabs" / "Cube.prefab").exists()


def test_trigger_is_recorded(sync_paths):
    outcome = SyncRunner(sync_paths).run(Trigger.PROJECT_LOAD)

    assert outcome.trigger == Trigger.PROJECT_LOAD


def test_repeated_runs_are_not_deduplicated(sync_paths):
    synchronizer = MagicMock()
    synchronizer.synchronize.return_value = SyncReport(
        source=sync_paths.source_path, destination=sync_paths.destination_path
    )
    runner = SyncRunner(sync_paths, synchronizer=synchronizer)

    runner.run()
    runner.run()

    assert synchronizer.synchronize.call_count == 2


def test_missing_source_is_reported_not_raised(tmp_path, destination):
    paths = SyncPaths(root_dir=tmp_path, source_dir=tmp_path / "missing", destination_dir=destination)
    refresh = MagicMock()

    outcome = SyncRunner(paths, refresh=refresh).run()

    assert outcome.status == SyncStatus.SOURCE_MISSING
    assert not outcome.ok
    assert outcome.report is None
    assert not destination.exists()
    refresh.assert_not_called()


def test_relative_paths_resolve_against_root(tmp_path, source_tree):
    paths = SyncPaths(root_dir=tmp_path, source_dir="source", destination_dir="out/Samples~")

    outcome = SyncRunner(paths).run()

    assert outcome.ok
    assert (tmp_path / "out" / "Samples~" / "readme.txt").exists()


def test_refresh_hook_called_with_destination(sync_paths, destination):
    refresh = MagicMock()

    SyncRunner(sync_paths, refresh=refresh).run()

    refresh.assert_called_once_with(destination)


def test_io_error_becomes_failed_outcome(sync_paths, destination):
    destination.mkdir(parents=True)
    (destination / "Scenes").write_text("not a directory")
    refresh = MagicMock()

    outcome = SyncRunner(sync_paths, refresh=refresh).run()

    assert outcome.status == SyncStatus.FAILED
    assert outcome.error
    assert outcome.report is None
    refresh.assert_not_called()


def test_refresh_failure_becomes_failed_outcome(sync_paths):
    refresh = MagicMock(side_effect=subprocess.CalledProcessError(2, ["refresh"]))

    outcome = SyncRunner(sync_paths, refresh=refresh).run()

    assert outcome.status == SyncStatus.FAILED
    assert "refresh" in outcome.error


def test_unexpected_errors_propagate(sync_paths):
    synchronizer = MagicMock()
    synchronizer.synchronize.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        SyncRunner(sync_paths, synchronizer=synchronizer).run()


def test_command_refresh_hook_runs_command(tmp_path):
    hook = command_refresh_hook("touch-index --quiet")

    with patch("samplesync.runner.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
        hook(tmp_path)

    mock_run.assert_called_once_with(
        ["touch-index", "--quiet", str(tmp_path)],
        capture_output=True,
        text=True,
        check=True,
    )


def test_command_refresh_hook_rejects_empty_command():
    with pytest.raises(ValueError):
        command_refresh_hook("   ")


def test_refresh_command_from_config_is_used(tmp_path, source_tree, destination):
    paths = SyncPaths(
        root_dir=tmp_path,
        source_dir=source_tree,
        destination_dir=destination,
        refresh_command="reindex",
    )

    with patch("samplesync.runner.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess([], 0, stdout="done", stderr="")
        outcome = SyncRunner(paths).run()

    assert outcome.ok
    assert mock_run.call_args.args[0] == ["reindex", str(destination)]
