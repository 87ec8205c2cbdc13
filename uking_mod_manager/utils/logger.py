"""Logging utilities for U-King Mod Manager."""
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from queue import Queue
from typing import Optional

from ..core.mod import LogRecord


class StreamRedirector:
    """Redirect stdout/stderr to logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO):
        """Initialize stream redirector.

        Args:
            logger: Logger to send output to
            level: Logging level for redirected output
        """
        self.logger = logger
        self.level = level

    def write(self, message: str) -> None:
        """Write message to logger."""
        if message and message.strip():
            self.logger.log(self.level, message.strip())

    def flush(self) -> None:
        """Flush operation (no-op)."""
        pass


class QueueHandler(logging.Handler):
    """Handler that puts activity log records into a queue for UI consumption."""

    def __init__(self, log_queue: Queue):
        """Initialize queue handler."""
        super().__init__()
        self.log_queue = log_queue

    def emit(self, record: logging.LogRecord) -> None:
        """Put an activity log record into the queue."""
        try:
            self.log_queue.put(to_activity_record(record, self.format(record)))
        except Exception:
            self.handleError(record)


def to_activity_record(record: logging.LogRecord, message: Optional[str] = None) -> LogRecord:
    """Convert a stdlib log record into an activity log entry."""
    return LogRecord(
        timestamp=datetime.fromtimestamp(record.created).strftime("%H:%M:%S"),
        level=record.levelname,
        message=message if message is not None else record.getMessage(),
    )


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    path = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == path
        for h in logger.handlers
    )


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_queue: Optional[Queue] = None,
    log_file: Optional[Path] = None,
    redirect_stdout: bool = False
) -> logging.Logger:
    """Set up a logger with console and optional file and UI handlers.

    Args:
        name: Logger name
        level: Logging level
        log_queue: Optional queue for UI logging
        log_file: Optional file to also write the log to
        redirect_stdout: Whether to redirect stdout/stderr to logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Add handler if not already present
    if not logger.handlers:
        logger.addHandler(console_handler)

    if log_file and not _has_file_handler(logger, log_file):
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # UI handler (if queue provided). The UI shows its own timestamp and level.
    if log_queue is not None:
        ui_handler = QueueHandler(log_queue)
        ui_handler.setLevel(level)
        ui_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(ui_handler)

    # Redirect stdout/stderr to logger
    if redirect_stdout:
        sys.stdout = StreamRedirector(logger, logging.INFO)
        sys.stderr = StreamRedirector(logger, logging.ERROR)

    return logger
