"""Allow ``python -m aoe4_overlay_desktop``."""

from aoe4_overlay_desktop.main import main

main()
