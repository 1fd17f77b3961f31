"""Exception classes for aoe4-overlay-desktop operations."""

from collections.abc import Sequence


class DesktopEntryError(Exception):
    """Base exception for desktop entry operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class StepFailedError(DesktopEntryError):
    """Raised when one step of the install sequence fails."""

    error_prefix = "Step failed"

    def __init__(
        self,
        step: str,
        message: str,
        command: Sequence[str] | None = None,
        returncode: int = 1,
        stderr: str = "",
    ) -> None:
        """Initialize step failure.

        Args:
            step: Name of the failing step (create, populate, ...).
            message: Error message describing the failure.
            command: Command line of the external tool, if any.
            returncode: Exit status of the external tool.
            stderr: Captured standard error of the external tool.

        """
        super().__init__(message, target=step)
        self.step = step
        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr


class ToolNotFoundError(DesktopEntryError):
    """Raised when a required desktop-file utility is not on PATH."""

    error_prefix = "Tool not found"

    def __init__(self, tool: str, step: str | None = None) -> None:
        """Initialize missing tool error.

        Args:
            tool: Executable name that could not be resolved.
            step: Step that needed the tool.

        """
        super().__init__(
            f"'{tool}' is not installed or not on PATH", target=step
        )
        self.tool = tool
        self.step = step


class ValidationError(DesktopEntryError):
    """Raised when an installed desktop entry fails inspection."""

    error_prefix = "Validation failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        problems: Sequence[str] | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Summary of the failure.
            target: Desktop file that was inspected.
            problems: Individual problems, one line each.

        """
        super().__init__(message, target=target)
        self.problems = list(problems) if problems else []
