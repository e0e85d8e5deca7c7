"""
Main CLI entry point for samplesync.
"""

# Standard library imports
import importlib.metadata
import signal
import time

# Third-party imports
import typer

# Local imports
from samplesync.runner import SyncOutcome, SyncRunner, SyncStatus, Trigger
from samplesync.session import SyncSession
from samplesync.sync import DirectorySynchronizer
from samplesync.utils.paths import SyncPaths, load_sync_paths
from samplesync.utils.rich_console import get_console, get_console_logger, print_panel, print_table


console = get_console()
logger = get_console_logger()


app = typer.Typer(
    help="samplesync - Incremental sample folder synchronization\n\nCopies new or updated files from a development folder into a package's samples folder."
)


ROOT_OPTION = typer.Option(None, "--root", help="Project root that relative paths are resolved against")
SOURCE_OPTION = typer.Option(None, "--source", "-s", help="Folder the samples are authored in")
DESTINATION_OPTION = typer.Option(None, "--destination", "-d", help="Folder the samples are copied to")
REFRESH_OPTION = typer.Option(None, "--refresh-command", help="Command run with the destination after each successful pass")


def print_main_help_and_exit():
    typer.echo("\n samplesync - Incremental sample folder synchronization\n")
    command_rows = [
        ["sync", "Copy new or updated samples now"],
        ["status", "Show which files the next sync would copy"],
        ["session", "Sync on start and again on exit"],
        ["config", "Show the resolved configuration"],
        ["version", "Show samplesync version"],
    ]
    print_table(["Subcommand", "Description"], command_rows, title="Available samplesync Subcommands")
    typer.echo("\nFor more information about a subcommand, run:")
    typer.echo("  samplesync <subcommand> --help")
    raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    samplesync - Incremental sample folder synchronization
    """
    if ctx.invoked_subcommand is None:
        print_main_help_and_exit()


def _report_outcome(outcome: SyncOutcome, paths: SyncPaths) -> None:
    """Print an outcome and exit non-zero unless it succeeded."""
    if outcome.status == SyncStatus.SOURCE_MISSING:
        typer.echo(f"Source path does not exist: {paths.source_path} ({outcome.trigger.value} sync skipped)")
        raise typer.Exit(1)
    if outcome.status == SyncStatus.FAILED:
        typer.echo(f"Error: {outcome.error}")
        raise typer.Exit(1)
    typer.echo(f"Synchronized {outcome.report.copied_count} file(s) ({outcome.trigger.value})")


def _wait_for_shutdown() -> None:  # pragma: no cover
    """Block until Ctrl+C or SIGTERM."""

    def _interrupt(signum, frame):
        raise KeyboardInterrupt

    signal.signal(signal.SIGTERM, _interrupt)
    if hasattr(signal, "pause"):
        signal.pause()
    else:
        while True:
            time.sleep(1)


@app.command()
def sync(
    root: str = ROOT_OPTION,
    source: str = SOURCE_OPTION,
    destination: str = DESTINATION_OPTION,
    refresh_command: str = REFRESH_OPTION,
):
    """Copy new or updated files from the source folder to the destination folder."""
    paths = load_sync_paths(root, source, destination, refresh_command)
    outcome = SyncRunner(paths).run(Trigger.MANUAL)
    _report_outcome(outcome, paths)


@app.command()
def status(
    root: str = ROOT_OPTION,
    source: str = SOURCE_OPTION,
    destination: str = DESTINATION_OPTION,
):
    """Show the files the next sync would copy. Nothing is written."""
    paths = load_sync_paths(root, source, destination)
    if not paths.source_exists():
        logger.error(f"Source path does not exist: {paths.source_path}")
        raise typer.Exit(1)

    pending = DirectorySynchronizer().pending(paths.source_path, paths.destination_path)
    if not pending:
        print_panel("Destination is up to date", title="samplesync status", style="bold green")
        return
    print_table(
        ["File", "Reason"],
        [[item.relative_path, item.reason] for item in pending],
        title=f"{len(pending)} file(s) pending",
    )


@app.command()
def session(
    root: str = ROOT_OPTION,
    source: str = SOURCE_OPTION,
    destination: str = DESTINATION_OPTION,
    refresh_command: str = REFRESH_OPTION,
):
    """Sync when the project opens and again when it closes.

    Press Ctrl+C to close the session.
    """
    paths = load_sync_paths(root, source, destination, refresh_command)
    sync_session = SyncSession(SyncRunner(paths))

    with sync_session:
        typer.echo(f"Session open for {paths.source_path} (Ctrl+C to close)...")
        try:
            _wait_for_shutdown()
        except KeyboardInterrupt:
            typer.echo("\nClosing session.")

    failed = [outcome for outcome in sync_session.outcomes if not outcome.ok]
    for outcome in failed:
        typer.echo(f"{outcome.trigger.value} sync did not succeed: {outcome.error or outcome.status.value}")
    if failed:
        raise typer.Exit(1)


@app.command()
def config(
    root: str = ROOT_OPTION,
    source: str = SOURCE_OPTION,
    destination: str = DESTINATION_OPTION,
    refresh_command: str = REFRESH_OPTION,
):
    """Show the resolved configuration."""
    paths: SyncPaths = load_sync_paths(root, source, destination, refresh_command)
    print_table(["Setting", "Value"], paths.as_rows(), title="samplesync Configuration")


@app.command()
def version():
    """Show the samplesync version."""
    typer.echo(f"samplesync version: {importlib.metadata.version('samplesync')}")
