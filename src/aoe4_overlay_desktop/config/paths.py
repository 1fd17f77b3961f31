"""Path constants and utilities for aoe4-overlay-desktop configuration."""

from pathlib import Path

from aoe4_overlay_desktop.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DESKTOP_USER_APPLICATIONS_SUBPATH,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_BASE_DIR = HOME_DIR / CONFIG_DIR_NAME
    CONFIG_DIR = CONFIG_BASE_DIR / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def user_applications_dir(cls) -> Path:
        """Get the per-user application entries directory.

        Resolved from the current home directory on each call.

        Returns:
            Path to ~/.local/share/applications
        """
        return Path.home().joinpath(*DESKTOP_USER_APPLICATIONS_SUBPATH)

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Args:
            path_str: Path string to expand (e.g., "~/my-path" or "./relative")

        Returns:
            Expanded and resolved Path object

        Example:
            >>> Paths.expand_path("~/Games/aoe4_overlay")
            Path('/home/user/Games/aoe4_overlay')
        """
        return Path(path_str).expanduser().resolve(strict=False)
