"""Console and file handlers for the installer's logs.

The console handler writes to stdout next to the installer's own ``❌`` and
``✅`` lines. The file handler keeps a short rotating history of runs in
~/.config/aoe4-overlay-desktop/logs so a failed registration can be
diagnosed after the fact. Both are owned by a QueueListener.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from aoe4_overlay_desktop.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROOT_LOGGER_NAME,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from aoe4_overlay_desktop.logger.formatters import HybridConsoleFormatter

if TYPE_CHECKING:
    from aoe4_overlay_desktop.logger.state import _LoggerState


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the stdout handler with hybrid formatting."""
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    return console_handler


def _create_file_handler(
    log_file: Path, file_level: str, logger_name: str
) -> RotatingFileHandler:
    """Create the rotating file handler, rotating an oversized log first.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")
        logger_name: Logger name recorded in the handler's name

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file is unusable

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        oversized = (
            log_file.exists()
            and log_file.stat().st_size >= LOG_ROTATION_THRESHOLD_BYTES
        )

        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        if oversized:
            # Start each run in a fresh file once the limit is reached
            file_handler.doRollover()
    except OSError as e:
        msg = f"Cannot write log file {log_file}: {e}"
        raise ConfigurationError(msg) from e

    file_handler.set_name(f"{logger_name}.file")
    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    return file_handler


def setup_root_logger(
    state: "_LoggerState",
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Initialize the root logger with a QueueListener.

    Called exactly once; every child logger propagates here. An unusable
    log directory disables file logging with a console warning instead of
    aborting, so registering the desktop entry never depends on
    ~/.config being writable.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    """
    root_logger = logging.getLogger(LOG_ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    # Remove any existing handlers (for test isolation)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    state.console_handler = _create_console_handler(console_level)
    state.file_handler = None
    state.log_file = None
    file_error: ConfigurationError | None = None

    if enable_file_logging:
        try:
            state.file_handler = _create_file_handler(
                log_file, file_level, LOG_ROOT_LOGGER_NAME
            )
            state.log_file = log_file
        except ConfigurationError as e:
            file_error = e

    handlers: list[logging.Handler] = [state.console_handler]
    if state.file_handler is not None:
        handlers.append(state.file_handler)

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True

    if file_error is not None:
        root_logger.warning("File logging disabled: %s", file_error)
