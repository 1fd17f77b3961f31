"""Desktop entry module for the org.aoe4_overlay.desktop descriptor."""

from aoe4_overlay_desktop.desktop_entry.descriptor import (
    DesktopEntryDescriptor,
    exec_program,
    format_category_list,
    quote_exec_argument,
)
from aoe4_overlay_desktop.desktop_entry.validation import (
    parse_desktop_fields,
    validate_desktop_file,
)

__all__ = [
    "DesktopEntryDescriptor",
    "exec_program",
    "format_category_list",
    "parse_desktop_fields",
    "quote_exec_argument",
    "validate_desktop_file",
]
