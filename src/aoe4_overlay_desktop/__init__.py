"""Top-level package for aoe4-overlay-desktop.

Registers the AoE4 overlay as a freedesktop.org desktop application.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("aoe4-overlay-desktop")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
