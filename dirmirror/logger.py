"""Logging collaborator for mirror runs.

Every message goes to a rich console and, when a log directory is given, to
``log.txt`` in that directory, rotated at midnight.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

LOG_FILE_NAME = "log.txt"
FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class SyncLogger:
    """Console and rotating-file logger injected into scanner, executor and engine."""

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        log_dir: Optional[Path] = None,
        verbose: bool = False,
        backup_count: int = 30,
    ):
        """Initialize logger.

        Args:
            console: Rich Console instance
            log_dir: Directory for the rotating log file; created if missing
            verbose: Also show debug messages
            backup_count: Number of rotated daily files to keep
        """
        self.console = console or Console()
        self.verbose = verbose
        self.log_path: Optional[Path] = None
        self._file_logger: Optional[logging.Logger] = None

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_path = log_dir / LOG_FILE_NAME
            self._file_logger = _build_file_logger(self.log_path, backup_count, verbose)

    @classmethod
    def null(cls) -> "SyncLogger":
        """Logger that discards everything."""
        return cls(Console(quiet=True))

    def debug(self, message: str) -> None:
        """Dim debug message, shown only when verbose."""
        if self.verbose:
            self.console.print(f"[dim]· {escape(message)}[/dim]")
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        """Blue info message."""
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")
        self._log(logging.INFO, message)

    def success(self, message: str) -> None:
        """Green success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
        self._log(logging.WARNING, message)

    def error(self, message: str) -> None:
        """Red error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")
        self._log(logging.ERROR, message)

    def close(self) -> None:
        """Flush and detach the file handler."""
        if self._file_logger is None:
            return
        for handler in list(self._file_logger.handlers):
            handler.close()
            self._file_logger.removeHandler(handler)
        self._file_logger = None

    def _log(self, level: int, message: str) -> None:
        if self._file_logger is not None:
            self._file_logger.log(level, message)


def _build_file_logger(log_path: Path, backup_count: int, verbose: bool) -> logging.Logger:
    """Return a non-propagating logger writing to a midnight-rotated file."""
    logger = logging.getLogger(f"dirmirror.{log_path.resolve()}")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    if not logger.handlers:
        handler = TimedRotatingFileHandler(log_path, when="midnight", backupCount=backup_count, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(handler)

    return logger
