"""CLI argument parser for aoe4-overlay-desktop.

Running the command without arguments performs the full install; every
option is optional.
"""

import argparse
from argparse import Namespace
from pathlib import Path


class CLIParser:
    """Command-line argument parser for aoe4-overlay-desktop."""

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_install_options(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="aoe4-overlay-desktop",
            description=(
                "Register the AOE4 Overlay as a desktop application "
                "(org.aoe4_overlay.desktop)"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Install from the overlay checkout
  %(prog)s

  # Install from anywhere, pointing at the checkout
  %(prog)s --project-dir ~/src/aoe4_overlay

  # Install without leaving org.aoe4_overlay.desktop behind
  %(prog)s --remove-working-copy

  # Inspect the installed entry
  %(prog)s --check
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --verbose."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show aoe4-overlay-desktop version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output, including the tool command lines",
        )

    def _add_install_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the install and inspection options."""
        parser.add_argument(
            "--project-dir",
            type=Path,
            default=None,
            metavar="DIR",
            help=(
                "Overlay checkout containing src/logo.png and "
                "target/release/aoe4_overlay (default: settings.conf, "
                "then the current directory)"
            ),
        )
        parser.add_argument(
            "--remove-working-copy",
            action="store_true",
            help="Delete the working copy after a successful install",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Validate the installed entry instead of installing",
        )
