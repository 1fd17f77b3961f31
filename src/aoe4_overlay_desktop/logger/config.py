"""Configuration loading and updating for logging system.

The logger is imported by the config package, so settings are read here
through a late import once both are initialized.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from aoe4_overlay_desktop.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from aoe4_overlay_desktop.logger.state import _LoggerState
    from aoe4_overlay_desktop.types import Settings


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns bootstrap defaults; update_logger_from_config() applies the
    levels from settings.conf afterwards.

    Environment Variable Override:
        AOE4_OVERLAY_DESKTOP_LOG_DIR: Overrides the log directory. Used by
        the test suite so test runs never write to the user's log file.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_handler_levels(
    state: "_LoggerState",
    console_level: int | None = None,
    file_level: int | None = None,
) -> None:
    """Set levels on the console and file handlers.

    Args:
        state: Logger state object
        console_level: New console level, or None to leave unchanged
        file_level: New file level, or None to leave unchanged

    """
    if console_level is not None and state.console_handler is not None:
        state.console_handler.setLevel(console_level)
    if file_level is not None and state.file_handler is not None:
        state.file_handler.setLevel(file_level)


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings | None" = None
) -> None:
    """Update logger handler levels from settings.conf.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)
        settings: Already loaded settings, read from disk when None

    Note:
        Errors while loading settings leave the bootstrap levels in place,
        so a broken settings file never prevents logging.

    """
    try:
        from aoe4_overlay_desktop.config import (  # noqa: PLC0415
            SettingsManager,
        )

        if settings is None:
            settings = SettingsManager().load_settings()

        console_level = getattr(
            logging, settings["console_log_level"], logging.INFO
        )
        file_level = getattr(logging, settings["log_level"], logging.INFO)

        apply_handler_levels(state, console_level, file_level)

    except (ImportError, KeyError, OSError):
        pass
