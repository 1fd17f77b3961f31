"""Centralized type definitions for aoe4-overlay-desktop.

This module contains the TypedDict definitions shared between the config
layer, the installer and the CLI.
"""

from pathlib import Path
from typing import TypedDict


class InstallConfig(TypedDict):
    """Install behavior options."""

    project_dir: Path | None
    keep_working_copy: bool


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    applications: Path


class Settings(TypedDict):
    """Global application settings loaded from settings.conf."""

    config_version: str
    log_level: str
    console_log_level: str
    install: InstallConfig
    directory: DirectoryConfig


class InstallRecord(TypedDict):
    """Summary of the last successful install, stored as JSON."""

    record_version: str
    desktop_file: str
    working_copy: str | None
    project_dir: str
    exec: str
    icon: str
    installed_at: str
