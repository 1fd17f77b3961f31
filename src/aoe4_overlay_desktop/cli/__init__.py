"""Command-line interface for aoe4-overlay-desktop."""

from aoe4_overlay_desktop.cli.parser import CLIParser
from aoe4_overlay_desktop.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
