"""Wrappers around the desktop-file-utils command line tools.

Each wrapper resolves its executable on PATH, runs it synchronously with
captured output and turns a nonzero exit status into StepFailedError.
No retries and no timeouts: a step either completes or stops the install.
"""

import shutil
import subprocess
from pathlib import Path

from aoe4_overlay_desktop.constants import (
    STEP_INSTALL,
    STEP_POPULATE,
    STEP_REFRESH,
    TOOL_DESKTOP_FILE_EDIT,
    TOOL_DESKTOP_FILE_INSTALL,
    TOOL_UPDATE_DESKTOP_DATABASE,
)
from aoe4_overlay_desktop.exceptions import StepFailedError, ToolNotFoundError
from aoe4_overlay_desktop.logger import get_logger

logger = get_logger(__name__)


def resolve_tool(step: str, tool: str) -> str:
    """Return the full path of tool, or raise ToolNotFoundError."""
    executable = shutil.which(tool)
    if executable is None:
        raise ToolNotFoundError(tool, step=step)
    return executable


def run_tool(step: str, tool: str, args: list[str]) -> str:
    """Run an external tool and fail fast on error.

    Args:
        step: Install step the tool belongs to, used in errors
        tool: Executable name or path
        args: Arguments passed to the tool

    Returns:
        Captured standard output

    Raises:
        ToolNotFoundError: If the tool cannot be found on PATH
        StepFailedError: If the tool exits with a nonzero status

    """
    command = [resolve_tool(step, tool), *args]
    logger.debug("Running %s step: %s", step, " ".join(command))

    try:
        result = subprocess.run(  # noqa: S603
            command,
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        msg = f"Could not execute {tool}: {e}"
        raise StepFailedError(step, msg, command=command) from e

    if result.stdout:
        logger.debug("%s stdout: %s", tool, result.stdout.strip())

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        msg = f"{tool} exited with status {result.returncode}"
        if stderr:
            msg = f"{msg}: {stderr}"
        raise StepFailedError(
            step,
            msg,
            command=command,
            returncode=result.returncode,
            stderr=stderr,
        )

    return result.stdout or ""


class DesktopFileTools:
    """The three desktop-file utilities used by the installer."""

    def __init__(
        self,
        edit_tool: str = TOOL_DESKTOP_FILE_EDIT,
        install_tool: str = TOOL_DESKTOP_FILE_INSTALL,
        database_tool: str = TOOL_UPDATE_DESKTOP_DATABASE,
    ) -> None:
        """Initialize tool wrappers.

        Args:
            edit_tool: desktop-file-edit executable
            install_tool: desktop-file-install executable
            database_tool: update-desktop-database executable

        """
        self.edit_tool = edit_tool
        self.install_tool = install_tool
        self.database_tool = database_tool

    def missing_tools(self) -> list[str]:
        """Return the tools that are not available on PATH."""
        return [
            tool
            for tool in (self.edit_tool, self.install_tool, self.database_tool)
            if shutil.which(tool) is None
        ]

    def edit(self, edit_args: list[str]) -> None:
        """Populate a desktop file in place with desktop-file-edit."""
        run_tool(STEP_POPULATE, self.edit_tool, edit_args)

    def install(self, desktop_file: Path, target_dir: Path) -> None:
        """Install a desktop file into target_dir with desktop-file-install.

        target_dir is created only once the tool is known to be available,
        so a missing desktop-file-install leaves the home directory as is.
        """
        resolve_tool(STEP_INSTALL, self.install_tool)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create {target_dir}: {e}"
            raise StepFailedError(STEP_INSTALL, msg) from e

        run_tool(
            STEP_INSTALL,
            self.install_tool,
            [f"--dir={target_dir}", str(desktop_file)],
        )

    def refresh_database(self, applications_dir: Path) -> None:
        """Rebuild the desktop database cache for applications_dir."""
        run_tool(STEP_REFRESH, self.database_tool, [str(applications_dir)])
