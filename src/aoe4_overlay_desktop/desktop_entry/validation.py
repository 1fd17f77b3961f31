"""Desktop entry file inspection utilities."""

from collections.abc import Mapping
from pathlib import Path

from aoe4_overlay_desktop.constants import (
    DESKTOP_PATH_FIELDS,
    DESKTOP_REQUIRED_FIELDS,
    DESKTOP_SECTION_HEADER,
)
from aoe4_overlay_desktop.desktop_entry.descriptor import exec_program
from aoe4_overlay_desktop.logger import get_logger

logger = get_logger(__name__)


def parse_desktop_fields(content: str) -> dict[str, str]:
    """Parse the key/value pairs of the [Desktop Entry] group.

    Comments, blank lines and any other groups (e.g. desktop actions) are
    ignored. Localized keys such as ``Name[de]`` are kept verbatim.

    Args:
        content: Desktop file content

    Returns:
        Mapping of key to value

    """
    fields: dict[str, str] = {}
    in_entry_group = False
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            in_entry_group = line == DESKTOP_SECTION_HEADER
            continue
        if in_entry_group and "=" in line:
            key, value = line.split("=", 1)
            fields[key.strip()] = value.strip()
    return fields


def validate_desktop_file(
    desktop_file: Path, expected: Mapping[str, str] | None = None
) -> list[str]:
    """Validate desktop file format and content.

    Args:
        desktop_file: Path to desktop file to validate
        expected: Optional key/value pairs the file must contain

    Returns:
        List of validation errors (empty if valid)

    """
    errors: list[str] = []

    if not desktop_file.exists():
        errors.append(f"Desktop file does not exist: {desktop_file}")
        return errors

    try:
        content = desktop_file.read_text(encoding="utf-8")
    except OSError as e:
        errors.append(f"Failed to read desktop file: {e}")
        return errors

    first_group = next(
        (
            line.strip()
            for line in content.splitlines()
            if line.strip() and not line.lstrip().startswith("#")
        ),
        "",
    )
    if first_group != DESKTOP_SECTION_HEADER:
        errors.append("Missing or invalid [Desktop Entry] header")

    fields = parse_desktop_fields(content)

    errors.extend(
        f"Missing required field: {name}"
        for name in DESKTOP_REQUIRED_FIELDS
        if name not in fields
    )

    for name in DESKTOP_PATH_FIELDS:
        value = fields.get(name)
        if value and name == "Exec":
            value = exec_program(value)
        if value and not Path(value).is_absolute():
            errors.append(f"{name} is not an absolute path: {value}")

    categories = fields.get("Categories")
    if categories is not None and not categories.endswith(";"):
        errors.append(f"Categories must end with ';': {categories}")

    if expected:
        for name, value in expected.items():
            actual = fields.get(name)
            if actual != value:
                logger.debug(
                    "Field %s differs: expected %r, found %r",
                    name,
                    value,
                    actual,
                )
                errors.append(
                    f"Field {name} is {actual!r}, expected {value!r}"
                )

    return errors
