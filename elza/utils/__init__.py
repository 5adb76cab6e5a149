"""Utility modules for ELZA.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from elza.utils.console import (
    console,
    print_error,
    print_event,
    print_info,
    print_pick,
    print_ready,
    print_success,
    print_warning,
    show_banner,
)
from elza.utils.errors import (
    DependencyInstallError,
    ElzaError,
    ExitCode,
    FileSystemError,
    GitOperationError,
    ManifestError,
    MissingOptionError,
    ProjectExistsError,
    TemplateNotFoundError,
    UnsupportedOptionError,
    UserCancelledError,
)
from elza.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_event",
    "print_success",
    "print_warning",
    "print_info",
    "print_pick",
    "print_ready",
    "show_banner",
    # Errors
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
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
