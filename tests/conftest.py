"""Pytest configuration and fixtures for aoe4-overlay-desktop tests."""

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of ~/.config before any package module starts logging
os.environ.setdefault(
    "AOE4_OVERLAY_DESKTOP_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "aoe4-overlay-desktop-test-logs"),
)

from aoe4_overlay_desktop.config import SettingsManager  # noqa: E402
from aoe4_overlay_desktop.desktop_entry import (  # noqa: E402
    parse_desktop_fields,
)

TOOL_NAMES = (
    "desktop-file-edit",
    "desktop-file-install",
    "update-desktop-database",
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("aoe4_overlay_desktop"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


class FakeDesktopUtils:
    """In-process stand-in for desktop-file-utils.

    Emulates the observable file effects of desktop-file-edit,
    desktop-file-install and update-desktop-database, and records every
    command it receives.
    """

    def __init__(self) -> None:
        self.available = set(TOOL_NAMES)
        self.failures: dict[str, tuple[int, str]] = {}
        self.calls: list[list[str]] = []

    def which(self, tool: str) -> str | None:
        name = Path(tool).name
        if name in self.available:
            return f"/usr/bin/{name}"
        return None

    def fail(self, tool: str, returncode: int = 1, stderr: str = "") -> None:
        self.failures[tool] = (returncode, stderr)

    def tools_called(self) -> list[str]:
        return [Path(call[0]).name for call in self.calls]

    def run(self, command, **kwargs):  # noqa: ARG002
        command = list(command)
        self.calls.append(command)
        tool = Path(command[0]).name
        args = command[1:]

        if tool in self.failures:
            returncode, stderr = self.failures[tool]
            return subprocess.CompletedProcess(command, returncode, "", stderr)

        if tool == "desktop-file-edit":
            self._edit(args)
        elif tool == "desktop-file-install":
            self._install(args)
        elif tool == "update-desktop-database":
            Path(args[0], "mimeinfo.cache").write_text("[MIME Cache]\n")
        return subprocess.CompletedProcess(command, 0, "", "")

    @staticmethod
    def _edit(args: list[str]) -> None:
        target = Path(args[-1])
        fields = parse_desktop_fields(target.read_text())
        pending_key = None
        simple = {
            "--set-name": "Name",
            "--set-comment": "Comment",
            "--set-icon": "Icon",
        }
        for arg in args[:-1]:
            option, _, value = arg.partition("=")
            if option in simple:
                fields[simple[option]] = value
            elif option == "--add-category":
                current = [
                    c for c in fields.get("Categories", "").split(";") if c
                ]
                for category in value.split(";"):
                    if category and category not in current:
                        current.append(category)
                fields["Categories"] = "".join(f"{c};" for c in current)
            elif option == "--set-key":
                pending_key = value
            elif option == "--set-value" and pending_key:
                fields[pending_key] = value
                pending_key = None
        lines = ["[Desktop Entry]"]
        lines.extend(f"{key}={value}" for key, value in fields.items())
        target.write_text("\n".join(lines) + "\n")

    @staticmethod
    def _install(args: list[str]) -> None:
        target_dir = Path(args[0].removeprefix("--dir="))
        source = Path(args[1])
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target_dir / source.name)


@pytest.fixture
def fake_utils(monkeypatch: pytest.MonkeyPatch) -> FakeDesktopUtils:
    """Route shutil.which and subprocess.run to FakeDesktopUtils."""
    utils = FakeDesktopUtils()
    monkeypatch.setattr("aoe4_overlay_desktop.tools.shutil.which", utils.which)
    monkeypatch.setattr("aoe4_overlay_desktop.tools.subprocess.run", utils.run)
    return utils


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Overlay checkout with a logo and a release binary."""
    root = tmp_path / "aoe4_overlay"
    (root / "src").mkdir(parents=True)
    (root / "src" / "logo.png").write_bytes(b"\x89PNG")
    release = root / "target" / "release"
    release.mkdir(parents=True)
    (release / "aoe4_overlay").write_text("#!/bin/sh\n")
    return root


@pytest.fixture
def applications_dir(tmp_path: Path) -> Path:
    """Per-user applications directory that does not exist yet."""
    return tmp_path / "home" / ".local" / "share" / "applications"


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary configuration directory."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def settings_manager(
    config_dir: Path, applications_dir: Path
) -> SettingsManager:
    """SettingsManager pointing its applications directory into tmp_path."""
    (config_dir / "settings.conf").write_text(
        f"[directory]\napplications = {applications_dir}\n"
    )
    return SettingsManager(config_dir)
