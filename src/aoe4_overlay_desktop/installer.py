"""Desktop entry installer for the AOE4 Overlay.

Install sequence, each step only runs if the previous one succeeded:

1. create:   touch org.aoe4_overlay.desktop in the working directory
2. populate: write Name, Comment, Icon, Categories, Exec and Type with
             desktop-file-edit
3. install:  copy it into ~/.local/share/applications with
             desktop-file-install
4. refresh:  rebuild the desktop database with update-desktop-database

A failing step raises and stops the sequence. Nothing is rolled back, so a
failed run may leave the working copy behind, but an entry is never
installed unless it was populated first.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from aoe4_overlay_desktop.config import InstallRecordManager, Paths
from aoe4_overlay_desktop.constants import (
    INSTALL_RECORD_VERSION,
    STEP_CREATE,
)
from aoe4_overlay_desktop.desktop_entry import DesktopEntryDescriptor
from aoe4_overlay_desktop.exceptions import StepFailedError
from aoe4_overlay_desktop.logger import get_logger
from aoe4_overlay_desktop.tools import DesktopFileTools
from aoe4_overlay_desktop.types import InstallRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install run."""

    descriptor: DesktopEntryDescriptor
    installed_file: Path
    working_copy: Path
    working_copy_kept: bool


class DesktopEntryInstaller:
    """Creates, installs and registers org.aoe4_overlay.desktop."""

    def __init__(
        self,
        descriptor: DesktopEntryDescriptor,
        applications_dir: Path | None = None,
        working_dir: Path | None = None,
        tools: DesktopFileTools | None = None,
        record_manager: InstallRecordManager | None = None,
        keep_working_copy: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize the installer.

        Args:
            descriptor: Entry metadata with absolute Icon and Exec paths
            applications_dir: Per-user entry directory
                (defaults to ~/.local/share/applications)
            working_dir: Where the working copy is created
                (defaults to the current working directory)
            tools: desktop-file utility wrappers
            record_manager: Writer for the install record, None to skip it
            keep_working_copy: Leave the working copy in working_dir after a
                successful install

        """
        self.descriptor = descriptor
        self.applications_dir = (
            applications_dir or Paths.user_applications_dir()
        )
        self.working_dir = working_dir or Path.cwd()
        self.tools = tools or DesktopFileTools()
        self.record_manager = record_manager
        self.keep_working_copy = keep_working_copy

    @property
    def working_file(self) -> Path:
        """Working copy path in the working directory."""
        return self.working_dir / self.descriptor.filename

    @property
    def installed_file(self) -> Path:
        """Installed entry path in the applications directory."""
        return self.applications_dir / self.descriptor.filename

    def create_working_file(self) -> Path:
        """Create the working copy if it does not exist yet.

        An existing file is left untouched (never truncated).

        Raises:
            StepFailedError: If the file cannot be created

        """
        try:
            self.working_file.touch(exist_ok=True)
        except OSError as e:
            msg = f"Cannot create {self.working_file}: {e}"
            raise StepFailedError(STEP_CREATE, msg) from e

        logger.debug("Working copy ready: %s", self.working_file)
        return self.working_file

    def populate_fields(self) -> None:
        """Write the descriptor fields into the working copy."""
        for label, path in (
            ("Icon", self.descriptor.icon),
            ("Exec", self.descriptor.exec_path),
        ):
            if not path.exists():
                logger.warning(
                    "%s target does not exist yet: %s", label, path
                )

        self.tools.edit(self.descriptor.edit_arguments(self.working_file))
        logger.debug("Populated desktop entry fields: %s", self.working_file)

    def install(self) -> Path:
        """Install the working copy into the applications directory."""
        self.tools.install(self.working_file, self.applications_dir)
        logger.info("🖥️  Installed desktop entry: %s", self.installed_file)
        return self.installed_file

    def refresh_database(self) -> None:
        """Refresh the desktop database for the applications directory."""
        self.tools.refresh_database(self.applications_dir)
        logger.debug("Desktop database refreshed: %s", self.applications_dir)

    def run(self) -> InstallResult:
        """Run the full install sequence.

        Returns:
            Result describing the installed entry

        Raises:
            StepFailedError: If any step fails
            ToolNotFoundError: If a desktop-file utility is missing

        """
        logger.info("Registering %s", self.descriptor.name)

        self.create_working_file()
        self.populate_fields()
        installed_file = self.install()
        self.refresh_database()

        kept = self._finish_working_copy()
        self._save_record(kept)

        logger.info(
            "✅ %s is registered with the desktop", self.descriptor.name
        )
        return InstallResult(
            descriptor=self.descriptor,
            installed_file=installed_file,
            working_copy=self.working_file,
            working_copy_kept=kept,
        )

    def _finish_working_copy(self) -> bool:
        """Remove the working copy unless it should be kept.

        Returns:
            True if the working copy remains on disk

        """
        if self.keep_working_copy:
            return True

        try:
            self.working_file.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                "Could not remove working copy %s: %s", self.working_file, e
            )
            return True

        logger.debug("Removed working copy: %s", self.working_file)
        return False

    def _save_record(self, working_copy_kept: bool) -> None:  # noqa: FBT001
        """Write the install record, warning instead of failing."""
        if self.record_manager is None:
            return

        record = InstallRecord(
            record_version=INSTALL_RECORD_VERSION,
            desktop_file=str(self.installed_file),
            working_copy=str(self.working_file) if working_copy_kept else None,
            project_dir=str(self.descriptor.project_dir or self.working_dir),
            exec=str(self.descriptor.exec_path),
            icon=str(self.descriptor.icon),
            installed_at=datetime.now(tz=UTC).isoformat(),
        )
        try:
            self.record_manager.save_record(record)
        except ValueError as e:
            logger.warning("Install record not saved: %s", e)
