"""INI parser utilities for aoe4-overlay-desktop configuration.

Helpers for parsing settings.conf with inline comment support and for
writing it back with user-friendly documentation.
"""

import configparser
from datetime import UTC, datetime
from typing import Any

from aoe4_overlay_desktop.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    KEY_PROJECT_DIR,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_INSTALL,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')
    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class CommentAwareConfigParser(configparser.ConfigParser):
    """ConfigParser that strips inline comments when reading values."""

    def __init__(self, **kwargs: Any) -> None:  # noqa: ANN401
        kwargs.setdefault("inline_comment_prefixes", ("#", ";"))
        kwargs.setdefault("interpolation", None)
        super().__init__(**kwargs)

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        """Get a configuration value with inline comments stripped."""
        value = super().get(section, option, **kwargs)
        return _strip_inline_comment(value)


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp.

        Returns:
            Header comment string for the configuration file
        """
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# AOE4 Overlay Desktop Entry Installer Configuration
# Settings for registering the AOE4 Overlay with your desktop environment.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section.

        Returns:
            Dictionary mapping section names to their comment strings
        """
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)

""",
            SECTION_INSTALL: """
# ========================================
# INSTALL
# ========================================
# project_dir: AOE4 Overlay checkout holding src/logo.png and
#   target/release/aoe4_overlay. Leave empty to use the current directory.
# keep_working_copy: Keep org.aoe4_overlay.desktop in the working
#   directory after installing (true/false)

""",
            SECTION_DIRECTORY: """
# ========================================
# DIRECTORY PATHS
# ========================================
# applications: Per-user desktop entry directory

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys.

        Returns:
            Nested dictionary mapping section -> key -> comment
        """
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_INSTALL: {
                KEY_PROJECT_DIR: "# empty means current directory",
            },
            SECTION_DIRECTORY: {},
        }
