"""Tests for logger configuration loading."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from aoe4_overlay_desktop.logger.config import (
    apply_handler_levels,
    load_log_settings,
    update_logger_from_config,
)
from aoe4_overlay_desktop.logger.state import _LoggerState


@pytest.fixture
def state(tmp_path):
    """Logger state holding a console and a file handler at INFO."""
    logger_state = _LoggerState()
    logger_state.console_handler = logging.StreamHandler()
    logger_state.console_handler.setLevel(logging.INFO)
    file_handler = RotatingFileHandler(tmp_path / "test.log")
    file_handler.setLevel(logging.INFO)
    logger_state.file_handler = file_handler
    yield logger_state
    file_handler.close()


def handler_levels(logger_state):
    return (
        logger_state.console_handler.level,
        logger_state.file_handler.level,
    )


class TestLoadLogSettings:
    """Test load_log_settings."""

    def test_env_var_overrides_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AOE4_OVERLAY_DESKTOP_LOG_DIR", str(tmp_path))

        console, file_level, path = load_log_settings()

        assert console == "INFO"
        assert file_level == "INFO"
        assert path == tmp_path / "aoe4-overlay-desktop.log"

    def test_default_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("AOE4_OVERLAY_DESKTOP_LOG_DIR", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        _, _, path = load_log_settings()

        assert path == (
            tmp_path
            / ".config"
            / "aoe4-overlay-desktop"
            / "logs"
            / "aoe4-overlay-desktop.log"
        )


class TestApplyHandlerLevels:
    """Test apply_handler_levels."""

    def test_sets_console_and_file_levels(self, state):
        apply_handler_levels(state, logging.DEBUG, logging.WARNING)

        assert handler_levels(state) == (logging.DEBUG, logging.WARNING)

    def test_none_leaves_level_unchanged(self, state):
        apply_handler_levels(state, console_level=logging.ERROR)

        assert handler_levels(state) == (logging.ERROR, logging.INFO)

    def test_without_handlers(self):
        apply_handler_levels(_LoggerState(), logging.DEBUG, logging.DEBUG)

    def test_console_only(self, state):
        state.file_handler.close()
        state.file_handler = None

        apply_handler_levels(state, logging.WARNING, logging.DEBUG)

        assert state.console_handler.level == logging.WARNING


class TestUpdateLoggerFromConfig:
    """Test update_logger_from_config."""

    def test_applies_settings_levels(self, state):
        settings = {"console_log_level": "WARNING", "log_level": "DEBUG"}

        update_logger_from_config(state, settings)

        assert handler_levels(state) == (logging.WARNING, logging.DEBUG)
    def test_incomplete_settings_keep_bootstrap_levels(self, state):
        update_logger_from_config(state, {"log_level": "DEBUG"})

        assert handler_levels(state) == (logging.INFO, logging.INFO)
    def test_reads_settings_file_when_not_given(
        self, state, tmp_path, monkeypatch
    ):
        config_dir = tmp_path / ".config" / "aoe4-overlay-desktop"
        config_dir.mkdir(parents=True)
        (config_dir / "settings.conf").write_text(
            "[DEFAULT]\nlog_level = ERROR\nconsole_log_level = DEBUG\n"
        )
        monkeypatch.setattr(
            "aoe4_overlay_desktop.config.settings.Paths.CONFIG_DIR",
            config_dir,
        )

        update_logger_from_config(state)

        assert handler_levels(state) == (logging.DEBUG, logging.ERROR)
