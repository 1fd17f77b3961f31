"""Centralized constants module for aoe4-overlay-desktop.

This module serves as the single source of truth for all shared constants
across the aoe4-overlay-desktop codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from aoe4_overlay_desktop.constants import DESKTOP_FILE_NAME
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Config lives under ~/.config/<DEFAULT_CONFIG_SUBDIR>
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "aoe4-overlay-desktop"

INSTALL_RECORD_FILE_NAME: Final[str] = "installed.json"
INSTALL_RECORD_VERSION: Final[str] = "1.0.0"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_KEEP_WORKING_COPY: Final[bool] = True

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_INSTALL: Final[str] = "install"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_PROJECT_DIR: Final[str] = "project_dir"
KEY_KEEP_WORKING_COPY: Final[str] = "keep_working_copy"

DIRECTORY_KEYS: Final[tuple[str, ...]] = ("applications",)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "aoe4-overlay-desktop.log"
LOG_DIR_ENV_VAR: Final[str] = "AOE4_OVERLAY_DESKTOP_LOG_DIR"
LOG_ROOT_LOGGER_NAME: Final[str] = "aoe4_overlay_desktop"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Desktop (.desktop) entry constants
# =============================================================================

DESKTOP_FILE_NAME: Final[str] = "org.aoe4_overlay.desktop"

# Path parts joined onto Path.home()
DESKTOP_USER_APPLICATIONS_SUBPATH: Final[tuple[str, ...]] = (
    ".local",
    "share",
    "applications",
)

DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"
DESKTOP_FILE_TYPE: Final[str] = "Application"

DESKTOP_APP_NAME: Final[str] = "AOE4 Overlay"
DESKTOP_APP_COMMENT: Final[str] = "An overlay for Age of Empires IV"
DESKTOP_APP_CATEGORIES: Final[tuple[str, ...]] = ("Game",)

# Relative to the project directory
DESKTOP_ICON_SUBPATH: Final[tuple[str, ...]] = ("src", "logo.png")
DESKTOP_EXEC_SUBPATH: Final[tuple[str, ...]] = (
    "target",
    "release",
    "aoe4_overlay",
)

DESKTOP_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("Name", "Exec", "Type")
DESKTOP_PATH_FIELDS: Final[tuple[str, ...]] = ("Icon", "Exec")

# Exec arguments holding any of these are wrapped in double quotes
DESKTOP_EXEC_RESERVED_CHARS: Final[frozenset[str]] = frozenset(
    " \t\n\"'\\><~|&;$*?#()`"
)
# Would need backslash escaping inside quotes; such paths are rejected
DESKTOP_EXEC_UNSUPPORTED_CHARS: Final[frozenset[str]] = frozenset(
    "\"`$\\\n"
)

# =============================================================================
# External tool constants
# =============================================================================

TOOL_DESKTOP_FILE_EDIT: Final[str] = "desktop-file-edit"
TOOL_DESKTOP_FILE_INSTALL: Final[str] = "desktop-file-install"
TOOL_UPDATE_DESKTOP_DATABASE: Final[str] = "update-desktop-database"

# Shell convention for "command not found"
EXIT_TOOL_NOT_FOUND: Final[int] = 127

STEP_CREATE: Final[str] = "create"
STEP_POPULATE: Final[str] = "populate"
STEP_INSTALL: Final[str] = "install"
STEP_REFRESH: Final[str] = "refresh"
