"""Configuration management - settings, install record and paths.

This package provides:
- SettingsManager: settings.conf INI configuration (from settings.py)
- InstallRecordManager: installed.json summary (from record.py)
- Paths: Path constants and utilities (from paths.py)
- Parser utilities: INI parser helpers (from parser.py)
"""

from aoe4_overlay_desktop.config.parser import (
    CommentAwareConfigParser,
    ConfigCommentManager,
)
from aoe4_overlay_desktop.config.paths import Paths
from aoe4_overlay_desktop.config.record import InstallRecordManager
from aoe4_overlay_desktop.config.settings import SettingsManager
from aoe4_overlay_desktop.types import InstallRecord, Settings

__all__ = [
    "CommentAwareConfigParser",
    "ConfigCommentManager",
    "InstallRecord",
    "InstallRecordManager",
    "Paths",
    "Settings",
    "SettingsManager",
]
