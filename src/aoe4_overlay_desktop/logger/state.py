"""Logger state shared by the logger package.

One install run configures logging once. The state keeps direct references
to the console and file handlers so ``--verbose`` and settings.conf can
retune them without searching the listener's handler list.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging
    import queue
    from logging.handlers import QueueListener, RotatingFileHandler
    from pathlib import Path


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        queue_listener: Background thread processing log records
        log_queue: Queue feeding the listener
        console_handler: stdout handler owned by the listener
        file_handler: Rotating file handler, None when file logging is off
            or the log directory is unusable
        log_file: Log file actually written, None without a file handler

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None
        self.console_handler: logging.StreamHandler | None = None
        self.file_handler: RotatingFileHandler | None = None
        self.log_file: Path | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
