"""Custom exceptions and exit codes for ELZA.

This module defines the exit codes and exception hierarchy used throughout
the application. Components raise these exceptions; the CLI entry point is
the only place that turns them into a message and a process exit.
"""

from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Every fatal condition maps to GENERAL_ERROR so calling scripts only
    need to distinguish success from failure. A cancelled prompt keeps its
    own code.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 4


class ElzaError(Exception):
    """Base exception for ELZA errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class UnsupportedOptionError(ElzaError):
    """A selected option or option combination is not supported.

    Raised when:
    - The user picks a listed choice that has no template (e.g. "vue")
    - Two resolved options cannot be combined (e.g. element-plus with React)
    """

    def __init__(self, axis: str, value: str, reason: str = "") -> None:
        self.axis = axis
        self.value = value
        message = f"Unsupported {axis}: {value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingOptionError(ElzaError):
    """Required options were not supplied in non-interactive mode."""

    def __init__(self, flags: Iterable[str]) -> None:
        self.flags = list(flags)
        super().__init__(
            "Missing required options in --cli mode: " + ", ".join(self.flags)
        )


class ProjectExistsError(ElzaError):
    """The target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot create project: {path} already exists")


class TemplateNotFoundError(ElzaError):
    """A template path was requested that the template set does not contain."""

    def __init__(self, template_set: str, path: str) -> None:
        self.template_set = template_set
        self.path = path
        super().__init__(f"Template file not found in '{template_set}': {path}")


class FileSystemError(ElzaError):
    """Creating, reading or writing a file of the new project failed."""


class ManifestError(ElzaError):
    """package.json is missing, malformed, or lacks an expected section."""


class GitOperationError(ElzaError):
    """Git operation failed.

    Raised when:
    - The git executable cannot be started
    - git init / add / commit exits with a non-zero status
    """


class DependencyInstallError(ElzaError):
    """The package manager install command failed."""


class UserCancelledError(ElzaError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User dismisses a selection prompt
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
    "ExitCode",
    "ElzaError",
    "UnsupportedOptionError",
    "MissingOptionError",
    "ProjectExistsError",
    "TemplateNotFoundError",
    "FileSystemError",
    "ManifestError",
    "GitOperationError",
    "DependencyInstallError",
    "UserCancelledError",
]
