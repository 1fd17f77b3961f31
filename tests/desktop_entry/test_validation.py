"""Tests for desktop entry validation."""

from pathlib import Path

from aoe4_overlay_desktop.desktop_entry import (
    parse_desktop_fields,
    validate_desktop_file,
)

VALID_ENTRY = """[Desktop Entry]
Name=AOE4 Overlay
Comment=An overlay for Age of Empires IV
Icon=/opt/overlay/src/logo.png
Categories=Game;
Exec=/opt/overlay/target/release/aoe4_overlay
Type=Application
"""


def _write(tmp_path: Path, content: str) -> Path:
    desktop_file = tmp_path / "org.aoe4_overlay.desktop"
    desktop_file.write_text(content)
    return desktop_file


class TestParseDesktopFields:
    """Test parse_desktop_fields."""

    def test_parses_entry_group(self):
        fields = parse_desktop_fields(VALID_ENTRY)

        assert fields["Name"] == "AOE4 Overlay"
        assert fields["Categories"] == "Game;"
        assert fields["Type"] == "Application"

    def test_ignores_comments_and_other_groups(self):
        content = (
            "# generated\n"
            "[Desktop Entry]\n"
            "Name=AOE4 Overlay\n"
            "\n"
            "[Desktop Action Settings]\n"
            "Name=Settings\n"
        )

        assert parse_desktop_fields(content) == {"Name": "AOE4 Overlay"}

    def test_keeps_localized_keys_and_equals_in_values(self):
        content = "[Desktop Entry]\nName[de]=Overlay\nExec=run --a=b\n"

        fields = parse_desktop_fields(content)

        assert fields["Name[de]"] == "Overlay"
        assert fields["Exec"] == "run --a=b"


class TestValidateDesktopFile:
    """Test validate_desktop_file."""

    def test_valid_file(self, tmp_path):
        desktop_file = _write(tmp_path, VALID_ENTRY)

        assert validate_desktop_file(desktop_file) == []

    def test_missing_file(self, tmp_path):
        errors = validate_desktop_file(tmp_path / "missing.desktop")

        assert len(errors) == 1
        assert "does not exist" in errors[0]

    def test_missing_header(self, tmp_path):
        desktop_file = _write(tmp_path, "Name=AOE4 Overlay\n")

        errors = validate_desktop_file(desktop_file)

        assert "Missing or invalid [Desktop Entry] header" in errors

    def test_empty_file_reports_header_and_required_fields(self, tmp_path):
        desktop_file = _write(tmp_path, "")

        errors = validate_desktop_file(desktop_file)

        assert "Missing or invalid [Desktop Entry] header" in errors
        assert "Missing required field: Name" in errors
        assert "Missing required field: Exec" in errors
        assert "Missing required field: Type" in errors

    def test_relative_exec_is_reported(self, tmp_path):
        content = VALID_ENTRY.replace(
            "Exec=/opt/overlay/target/release/aoe4_overlay",
            "Exec=target/release/aoe4_overlay",
        )
        desktop_file = _write(tmp_path, content)

        errors = validate_desktop_file(desktop_file)

        assert errors == [
            "Exec is not an absolute path: target/release/aoe4_overlay"
        ]

    def test_categories_without_trailing_semicolon(self, tmp_path):
        content = VALID_ENTRY.replace("Categories=Game;", "Categories=Game")
        desktop_file = _write(tmp_path, content)

        errors = validate_desktop_file(desktop_file)

        assert errors == ["Categories must end with ';': Game"]

    def test_expected_fields_mismatch(self, tmp_path):
        desktop_file = _write(tmp_path, VALID_ENTRY)

        errors = validate_desktop_file(
            desktop_file, {"Name": "AOE4 Overlay", "Icon": "/other/logo.png"}
        )

        assert errors == [
            "Field Icon is '/opt/overlay/src/logo.png', "
            "expected '/other/logo.png'"
        ]

    def test_expected_field_missing(self, tmp_path):
        desktop_file = _write(tmp_path, VALID_ENTRY)

        errors = validate_desktop_file(desktop_file, {"Terminal": "false"})

        assert errors == ["Field Terminal is None, expected 'false'"]

    def test_quoted_exec_with_space_is_absolute(self, tmp_path):
        content = VALID_ENTRY.replace(
            "Exec=/opt/overlay/target/release/aoe4_overlay",
            'Exec="/home/user/My Games/aoe4_overlay"',
        )
        desktop_file = _write(tmp_path, content)

        assert validate_desktop_file(desktop_file) == []

    def test_quoted_relative_exec_is_reported(self, tmp_path):
        content = VALID_ENTRY.replace(
            "Exec=/opt/overlay/target/release/aoe4_overlay",
            'Exec="My Games/aoe4_overlay"',
        )
        desktop_file = _write(tmp_path, content)

        assert validate_desktop_file(desktop_file) == [
            "Exec is not an absolute path: My Games/aoe4_overlay"
        ]
