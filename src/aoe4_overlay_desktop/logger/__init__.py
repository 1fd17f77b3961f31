"""Logging utilities for aoe4-overlay-desktop.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from aoe4_overlay_desktop.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Installing %s", desktop_file)  # Use %-style formatting

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are ONLY attached to the root 'aoe4_overlay_desktop' logger
    4. Use %-formatting in log calls, never f-strings

Environment Variables:
    AOE4_OVERLAY_DESKTOP_LOG_DIR: Override the log directory (tests).
"""

from typing import TYPE_CHECKING

from aoe4_overlay_desktop.logger.config import (
    update_logger_from_config as _update_config,
)
from aoe4_overlay_desktop.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from aoe4_overlay_desktop.logger.handlers import ConfigurationError
from aoe4_overlay_desktop.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from aoe4_overlay_desktop.logger.state import _state, get_state

if TYPE_CHECKING:
    from aoe4_overlay_desktop.types import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings: "Settings | None" = None) -> None:
    """Update logger handler levels from settings.conf.

    Args:
        settings: Already loaded settings, read from disk when None

    """
    _update_config(get_state(), settings)
