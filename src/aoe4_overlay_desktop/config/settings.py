"""Settings manager for the settings.conf INI file."""

import configparser
import logging
from pathlib import Path

from aoe4_overlay_desktop.config.parser import (
    CommentAwareConfigParser,
    ConfigCommentManager,
    _strip_inline_comment,
)
from aoe4_overlay_desktop.config.paths import Paths
from aoe4_overlay_desktop.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_KEEP_WORKING_COPY,
    DEFAULT_LOG_LEVEL,
    DIRECTORY_KEYS,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_KEEP_WORKING_COPY,
    KEY_LOG_LEVEL,
    KEY_PROJECT_DIR,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_INSTALL,
)
from aoe4_overlay_desktop.types import DirectoryConfig, InstallConfig, Settings

logger = logging.getLogger(__name__)

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsManager:
    """Manages the settings.conf INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_settings(self) -> RawConfigDict:
        """Get default settings values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_INSTALL: {
                KEY_PROJECT_DIR: "",
                KEY_KEEP_WORKING_COPY: str(DEFAULT_KEEP_WORKING_COPY).lower(),
            },
            SECTION_DIRECTORY: {
                "applications": str(Paths.user_applications_dir()),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser from defaults dictionary.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = CommentAwareConfigParser()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_settings(self) -> Settings:
        """Load settings from the INI file, creating it on first use.

        Returns:
            Loaded settings

        """
        defaults = self.get_default_settings()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            config.read(self.settings_file, encoding="utf-8")
        else:
            self.save_settings(self._convert_to_settings(config))

        return self._convert_to_settings(config)

    def save_settings(self, settings: Settings) -> None:
        """Save settings to the INI file with user-friendly comments.

        Args:
            settings: Settings to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        project_dir = settings["install"]["project_dir"]
        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: settings["config_version"],
                KEY_LOG_LEVEL: settings["log_level"],
                KEY_CONSOLE_LOG_LEVEL: settings["console_log_level"],
            },
            SECTION_INSTALL: {
                KEY_PROJECT_DIR: str(project_dir) if project_dir else "",
                KEY_KEEP_WORKING_COPY: str(
                    settings["install"]["keep_working_copy"]
                ).lower(),
            },
            SECTION_DIRECTORY: {
                key: str(path) for key, path in settings["directory"].items()
            },
        }

        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())

            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_settings(
        self, config: configparser.ConfigParser
    ) -> Settings:
        """Convert configparser to typed Settings.

        Args:
            config: Parsed configuration

        Returns:
            Typed settings

        """

        def get_level(key: str, default: str) -> str:
            value = _strip_inline_comment(
                config.get(SECTION_DEFAULT, key, fallback=default)
            ).upper()
            if value not in _VALID_LEVELS:
                logger.warning(
                    "Invalid %s '%s' in %s, using %s",
                    key,
                    value,
                    self.settings_file,
                    default,
                )
                return default
            return value

        try:
            keep_working_copy = config.getboolean(
                SECTION_INSTALL,
                KEY_KEEP_WORKING_COPY,
                fallback=DEFAULT_KEEP_WORKING_COPY,
            )
        except ValueError:
            logger.warning(
                "Invalid %s value in %s, using %s",
                KEY_KEEP_WORKING_COPY,
                self.settings_file,
                DEFAULT_KEEP_WORKING_COPY,
            )
            keep_working_copy = DEFAULT_KEEP_WORKING_COPY

        raw_project_dir = _strip_inline_comment(
            config.get(SECTION_INSTALL, KEY_PROJECT_DIR, fallback="")
        ).strip()
        project_dir = (
            Paths.expand_path(raw_project_dir) if raw_project_dir else None
        )

        directories: dict[str, Path] = {}
        for key in DIRECTORY_KEYS:
            raw_value = config.get(SECTION_DIRECTORY, key, fallback="")
            cleaned = _strip_inline_comment(raw_value).strip()
            if cleaned:
                directories[key] = Paths.expand_path(cleaned)

        return Settings(
            config_version=config.get(
                SECTION_DEFAULT, KEY_CONFIG_VERSION, fallback=CONFIG_VERSION
            ),
            log_level=get_level(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            console_log_level=get_level(
                KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            install=InstallConfig(
                project_dir=project_dir,
                keep_working_copy=keep_working_copy,
            ),
            directory=DirectoryConfig(
                applications=directories.get(
                    "applications", Paths.user_applications_dir()
                ),
            ),
        )
