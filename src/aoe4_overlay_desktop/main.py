"""Main CLI entry point for aoe4-overlay-desktop.

Minimal entry point delegating to CLIRunner.
"""

import sys

from aoe4_overlay_desktop.cli import CLIRunner
from aoe4_overlay_desktop.logger import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run the CLI application and exit with its status.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    """
    logger.debug("CLI started")
    try:
        exit_code = CLIRunner().run(argv)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
