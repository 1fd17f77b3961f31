"""Desktop entry descriptor for the AOE4 Overlay application.

The descriptor holds the fixed metadata of org.aoe4_overlay.desktop and
knows how to express it as desktop-file-edit arguments. Icon and Exec are
resolved against the project directory so the entry works no matter which
directory a desktop environment reads it from.
"""

from dataclasses import dataclass
from pathlib import Path

from aoe4_overlay_desktop.constants import (
    DESKTOP_APP_CATEGORIES,
    DESKTOP_APP_COMMENT,
    DESKTOP_APP_NAME,
    DESKTOP_EXEC_RESERVED_CHARS,
    DESKTOP_EXEC_UNSUPPORTED_CHARS,
    DESKTOP_EXEC_SUBPATH,
    DESKTOP_FILE_NAME,
    DESKTOP_FILE_TYPE,
    DESKTOP_ICON_SUBPATH,
)


def format_category_list(categories: tuple[str, ...]) -> str:
    """Join categories in the freedesktop list format.

    Args:
        categories: Category names without separators

    Returns:
        Semicolon-separated list with the trailing semicolon, e.g. "Game;"

    """
    return "".join(f"{category};" for category in categories)


def quote_exec_argument(argument: str) -> str:
    """Quote one Exec argument following the Desktop Entry Specification.

    No field codes are used, so a literal percent sign is doubled. An
    argument holding a reserved character such as a space is wrapped in
    double quotes.

    Raises:
        ValueError: If the argument holds a character that would need
            escaping inside the quotes (double quote, backtick, dollar
            sign, backslash) or a newline

    """
    unsupported = sorted(set(argument) & DESKTOP_EXEC_UNSUPPORTED_CHARS)
    if unsupported:
        msg = (
            f"Exec argument contains unsupported characters "
            f"{''.join(unsupported)!r}: {argument}"
        )
        raise ValueError(msg)

    argument = argument.replace("%", "%%")
    if any(char in DESKTOP_EXEC_RESERVED_CHARS for char in argument):
        return f'"{argument}"'
    return argument


def exec_program(value: str) -> str:
    """Return the program of an Exec value with quoting removed."""
    value = value.strip()
    if value.startswith('"'):
        program = value[1:].split('"', 1)[0]
    else:
        program = value.split(maxsplit=1)[0] if value else ""
    return program.replace("%%", "%")


@dataclass(frozen=True)
class DesktopEntryDescriptor:
    """Metadata written into the desktop entry file."""

    icon: Path
    exec_path: Path
    name: str = DESKTOP_APP_NAME
    comment: str = DESKTOP_APP_COMMENT
    categories: tuple[str, ...] = DESKTOP_APP_CATEGORIES
    entry_type: str = DESKTOP_FILE_TYPE
    filename: str = DESKTOP_FILE_NAME
    project_dir: Path | None = None

    def __post_init__(self) -> None:
        for label, path in (("Icon", self.icon), ("Exec", self.exec_path)):
            if not path.is_absolute():
                msg = f"{label} path must be absolute: {path}"
                raise ValueError(msg)
        quote_exec_argument(str(self.exec_path))

    @classmethod
    def from_project_dir(cls, project_dir: Path) -> "DesktopEntryDescriptor":
        """Build the descriptor for a checkout of the overlay project.

        Args:
            project_dir: Project root, relative paths are resolved against
                the current working directory

        Returns:
            Descriptor with absolute Icon and Exec paths

        """
        root = project_dir.expanduser().resolve()
        return cls(
            icon=root.joinpath(*DESKTOP_ICON_SUBPATH),
            exec_path=root.joinpath(*DESKTOP_EXEC_SUBPATH),
            project_dir=root,
        )

    @property
    def exec_value(self) -> str:
        """Exec line: the binary path, quoted when it needs to be."""
        return quote_exec_argument(str(self.exec_path))

    @property
    def categories_value(self) -> str:
        """Categories in desktop-entry list format."""
        return format_category_list(self.categories)

    def fields(self) -> dict[str, str]:
        """Key/value pairs the installed entry is expected to contain."""
        return {
            "Name": self.name,
            "Comment": self.comment,
            "Icon": str(self.icon),
            "Categories": self.categories_value,
            "Exec": self.exec_value,
            "Type": self.entry_type,
        }

    def edit_arguments(self, working_file: Path) -> list[str]:
        """Build the desktop-file-edit arguments for this descriptor.

        Every option sets a value rather than appending one, so running the
        same arguments twice against the same file yields the same content.

        Args:
            working_file: Desktop file to edit in place

        Returns:
            Argument list (without the executable name)

        """
        return [
            f"--set-name={self.name}",
            f"--set-comment={self.comment}",
            f"--set-icon={self.icon}",
            f"--add-category={self.categories_value}",
            "--set-key=Exec",
            f"--set-value={self.exec_value}",
            "--set-key=Type",
            f"--set-value={self.entry_type}",
            str(working_file),
        ]
