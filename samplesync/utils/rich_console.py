from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from typing import Any
from rich.logging import RichHandler
import logging
import os


LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# Singleton Console instance
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console()
    return get_console._console


def get_log_level_name() -> str:
    """Read SAMPLESYNC_LOG_LEVEL, falling back to INFO for unknown values."""
    log_level = os.getenv("SAMPLESYNC_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        get_console().print(f"Invalid log level: {log_level}. Using INFO.", style="bold yellow")
        return "INFO"
    return log_level


def is_debug_enabled() -> bool:
    return os.getenv("SAMPLESYNC_DEBUG", "").lower() in ["true", "1", "yes"]


def print_panel(content: str, title: str | None = None, style: str = "bold blue", border_style: str | None = None):
    """Print a styled panel with optional title using Rich library.

    Args:
        content (str): The text content to display in the panel.
        title (str | None, optional): Title of the panel. Defaults to None.
        style (str, optional): Rich styling for the panel's content. Defaults to "bold blue".
        border_style (str | None, optional): Styling for the panel's border. Defaults to None.
    """
    console = get_console()
    border_style = border_style or style
    panel = Panel(content, title=title, style=style, border_style=border_style)
    console.print(panel)


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
    """
    console = get_console()
    table = Table(title=title)
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    console.print(table)


class RichConsoleLogger(logging.Logger):
    def __init__(self, name: str):
        super().__init__(name)

        self.log_level_str = get_log_level_name()
        self.log_level = LOG_LEVELS[self.log_level_str]
        self.setLevel(self.log_level)

        handler = RichHandler(console=get_console(), rich_tracebacks=True, level=self.log_level)
        self.addHandler(handler)

        # File logging only in debug mode
        if is_debug_enabled():
            log_file = os.getenv("SAMPLESYNC_LOG_FILE", "samplesync.log")
            try:
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(self.log_level)
                file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
                file_handler.setFormatter(file_formatter)
                self.addHandler(file_handler)
            except OSError as e:
                self.error(f"Failed to set up file logging: {e}")

    def success(self, message: str, *args, **kwargs):
        """Log a success message at INFO level with a check mark prefix.

        Args:
            message (str): Success message to display.
        """
        if args:
            message = message % args
        super().info(f"✔ {message}", **kwargs)


# Singleton logger instance
_console_logger = None

def get_console_logger() -> RichConsoleLogger:
    """Get a singleton instance of RichConsoleLogger with log level from environment variables.

    Environment variables:
        SAMPLESYNC_LOG_LEVEL: Set the log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        SAMPLESYNC_DEBUG: Enable debug mode with file logging (true, 1, yes)
        SAMPLESYNC_LOG_FILE: Specify the log file path (default: samplesync.log)

    Returns:
        RichConsoleLogger: Configured logger instance
    """
    global _console_logger
    if _console_logger is None:
        _console_logger = RichConsoleLogger("samplesync")
    return _console_logger
