"""Tests for SettingsManager and the settings.conf format."""

import logging
from pathlib import Path

from aoe4_overlay_desktop.config import (
    CommentAwareConfigParser,
    Paths,
    SettingsManager,
)


def write_settings(config_dir: Path, content: str) -> SettingsManager:
    (config_dir / "settings.conf").write_text(content)
    return SettingsManager(config_dir)


class TestLoadSettings:
    """Test loading settings.conf."""

    def test_creates_file_with_defaults(self, config_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(config_dir / "home"))
        manager = SettingsManager(config_dir)

        settings = manager.load_settings()

        assert manager.settings_file.exists()
        assert settings["config_version"] == "1.0.0"
        assert settings["log_level"] == "INFO"
        assert settings["console_log_level"] == "INFO"
        assert settings["install"]["project_dir"] is None
        assert settings["install"]["keep_working_copy"] is True
        assert settings["directory"]["applications"] == (
            (config_dir / "home" / ".local/share/applications").resolve()
        )

    def test_created_file_is_commented(self, config_dir):
        manager = SettingsManager(config_dir)

        manager.load_settings()

        content = manager.settings_file.read_text()
        assert content.startswith("# AOE4 Overlay Desktop Entry Installer")
        assert "[install]" in content
        assert "[directory]" in content
        assert "project_dir =   # empty means current directory" in content

    def test_reads_user_values(self, config_dir, tmp_path):
        manager = write_settings(
            config_dir,
            "[DEFAULT]\n"
            "log_level = DEBUG\n"
            "console_log_level = warning\n"
            "[install]\n"
            f"project_dir = {tmp_path / 'overlay'}  # checkout\n"
            "keep_working_copy = false\n"
            "[directory]\n"
            f"applications = {tmp_path / 'apps'}\n",
        )

        settings = manager.load_settings()

        assert settings["log_level"] == "DEBUG"
        assert settings["console_log_level"] == "WARNING"
        assert settings["install"]["project_dir"] == (
            (tmp_path / "overlay").resolve()
        )
        assert settings["install"]["keep_working_copy"] is False
        assert settings["directory"]["applications"] == (
            (tmp_path / "apps").resolve()
        )

    def test_expands_home_in_paths(self, config_dir, monkeypatch):
        home = config_dir / "home"
        monkeypatch.setenv("HOME", str(home))
        manager = write_settings(
            config_dir, "[install]\nproject_dir = ~/src/aoe4_overlay\n"
        )

        settings = manager.load_settings()

        assert settings["install"]["project_dir"] == (
            (home / "src" / "aoe4_overlay").resolve()
        )

    def test_invalid_log_level_falls_back(self, config_dir, caplog):
        manager = write_settings(config_dir, "[DEFAULT]\nlog_level = LOUD\n")

        with caplog.at_level(logging.WARNING):
            settings = manager.load_settings()

        assert settings["log_level"] == "INFO"
        assert "Invalid log_level 'LOUD'" in caplog.text

    def test_invalid_boolean_falls_back(self, config_dir, caplog):
        manager = write_settings(
            config_dir, "[install]\nkeep_working_copy = sometimes\n"
        )

        with caplog.at_level(logging.WARNING):
            settings = manager.load_settings()

        assert settings["install"]["keep_working_copy"] is True
        assert "Invalid keep_working_copy value" in caplog.text

    def test_existing_file_is_not_rewritten(self, config_dir):
        content = "[install]\nkeep_working_copy = no\n"
        manager = write_settings(config_dir, content)

        manager.load_settings()

        assert manager.settings_file.read_text() == content


class TestSaveSettings:
    """Test writing settings.conf."""

    def test_save_then_load(self, config_dir, tmp_path):
        manager = SettingsManager(config_dir)
        settings = manager.load_settings()
        settings["install"]["project_dir"] = tmp_path / "overlay"
        settings["install"]["keep_working_copy"] = False
        settings["directory"]["applications"] = tmp_path / "apps"

        manager.save_settings(settings)
        loaded = manager.load_settings()

        assert loaded["install"]["project_dir"] == (
            (tmp_path / "overlay").resolve()
        )
        assert loaded["install"]["keep_working_copy"] is False
        assert loaded["directory"]["applications"] == (
            (tmp_path / "apps").resolve()
        )

    def test_creates_config_dir(self, tmp_path):
        config_dir = tmp_path / "nested" / "config"
        manager = SettingsManager(config_dir)

        manager.load_settings()

        assert (config_dir / "settings.conf").exists()


class TestCommentAwareConfigParser:
    """Test inline comment handling."""

    def test_strips_inline_comments(self):
        parser = CommentAwareConfigParser()
        parser.read_string("[install]\nproject_dir = /opt/overlay  # here\n")

        assert parser.get("install", "project_dir") == "/opt/overlay"

    def test_no_interpolation(self):
        parser = CommentAwareConfigParser()
        parser.read_string("[install]\nproject_dir = /opt/%(name)s\n")

        assert parser.get("install", "project_dir") == "/opt/%(name)s"


class TestPaths:
    """Test Paths helpers."""

    def test_user_applications_dir_follows_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert Paths.user_applications_dir() == (
            tmp_path / ".local" / "share" / "applications"
        )

    def test_expand_path_makes_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert Paths.expand_path("overlay") == (tmp_path / "overlay").resolve()
