"""CLI runner for aoe4-overlay-desktop.

Loads settings, resolves the project directory and either runs the install
sequence or inspects the installed entry. Returns a process exit code.
"""

from argparse import Namespace
from pathlib import Path

from aoe4_overlay_desktop import __version__
from aoe4_overlay_desktop.cli.parser import CLIParser
from aoe4_overlay_desktop.config import (
    InstallRecordManager,
    Paths,
    SettingsManager,
)
from aoe4_overlay_desktop.constants import EXIT_TOOL_NOT_FOUND
from aoe4_overlay_desktop.desktop_entry import (
    DesktopEntryDescriptor,
    validate_desktop_file,
)
from aoe4_overlay_desktop.exceptions import (
    StepFailedError,
    ToolNotFoundError,
    ValidationError,
)
from aoe4_overlay_desktop.installer import DesktopEntryInstaller
from aoe4_overlay_desktop.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)
from aoe4_overlay_desktop.tools import DesktopFileTools
from aoe4_overlay_desktop.types import InstallRecord

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        settings_manager: SettingsManager | None = None,
        tools: DesktopFileTools | None = None,
        working_dir: Path | None = None,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            settings_manager: settings.conf manager
            tools: desktop-file utility wrappers
            working_dir: Directory for the working copy (defaults to cwd)

        """
        self.settings_manager = settings_manager or SettingsManager()
        self.settings = self.settings_manager.load_settings()
        self.record_manager = InstallRecordManager(
            self.settings_manager.config_dir
        )
        self.tools = tools or DesktopFileTools()
        self.working_dir = working_dir

        update_logger_from_config(self.settings)

    def run(self, argv: list[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if args.verbose:
            set_console_level("DEBUG")

        if args.check:
            try:
                self._check(args)
            except ValidationError as e:
                logger.error("%s", e)
                for problem in e.problems:
                    print(f"❌ {problem}")
                return 1
            return 0

        try:
            descriptor = DesktopEntryDescriptor.from_project_dir(
                self.resolve_project_dir(args)
            )
        except ValueError as e:
            logger.error("%s", e)
            print(f"❌ {e}")
            return 1
        return self._install(args, descriptor)

    def resolve_project_dir(
        self, args: Namespace, record: InstallRecord | None = None
    ) -> Path:
        """Pick the project directory.

        Order: --project-dir, settings.conf, the project directory of the
        last install (when a record is given), then the working directory.
        """
        if args.project_dir is not None:
            return Paths.expand_path(str(args.project_dir))

        configured = self.settings["install"]["project_dir"]
        if configured is not None:
            return configured

        if record is not None:
            return Path(record["project_dir"])

        return (self.working_dir or Path.cwd()).resolve()

    def _install(
        self, args: Namespace, descriptor: DesktopEntryDescriptor
    ) -> int:
        """Run the install sequence and map failures to exit codes."""
        keep_working_copy = (
            self.settings["install"]["keep_working_copy"]
            and not args.remove_working_copy
        )
        installer = DesktopEntryInstaller(
            descriptor,
            applications_dir=self.settings["directory"]["applications"],
            working_dir=self.working_dir,
            tools=self.tools,
            record_manager=self.record_manager,
            keep_working_copy=keep_working_copy,
        )

        try:
            installer.run()
        except ToolNotFoundError as e:
            logger.error("%s", e)
            print(f"❌ {e}")
            return EXIT_TOOL_NOT_FOUND
        except StepFailedError as e:
            logger.error("%s", e)
            print(f"❌ {e}")
            return step_exit_code(e.returncode)

        return 0

    def _check(self, args: Namespace) -> None:
        """Validate the installed entry and show the install record.

        Without --project-dir or a configured project_dir, the expected
        Icon and Exec come from the recorded install, so the check gives
        the same answer from any working directory.

        Raises:
            ValidationError: With every problem found

        """
        try:
            record = self.record_manager.load_record()
        except ValueError as e:
            logger.warning("%s", e)
            record = None

        if record is not None:
            print(f"Last install: {record['installed_at']}")
            print(f"  desktop file: {record['desktop_file']}")
            print(f"  project dir:  {record['project_dir']}")

        try:
            descriptor = DesktopEntryDescriptor.from_project_dir(
                self.resolve_project_dir(args, record)
            )
        except ValueError as e:
            raise ValidationError(str(e), problems=[str(e)]) from e

        installed_file = (
            self.settings["directory"]["applications"] / descriptor.filename
        )
        problems = validate_desktop_file(installed_file, descriptor.fields())
        problems.extend(
            f"Tool not found on PATH: {tool}"
            for tool in self.tools.missing_tools()
        )

        if problems:
            raise ValidationError(
                f"{len(problems)} problem(s) found",
                target=str(installed_file),
                problems=problems,
            )

        print(f"✅ {installed_file} is valid")


def step_exit_code(returncode: int) -> int:
    """Map a failed tool's return code to this process's exit status.

    A tool killed by signal N reports -N; report it like a shell does
    (128 + N). A failure without a status maps to 1.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode or 1
