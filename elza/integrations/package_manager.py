"""Dependency installation with the user's package manager."""

import subprocess
from enum import Enum
from pathlib import Path

from elza.utils.console import print_event
from elza.utils.errors import DependencyInstallError
from elza.utils.logging import log_command


class PackageManager(str, Enum):
    """Package managers that can install the generated project."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    CNPM = "cnpm"

    @property
    def install_command(self) -> list[str]:
        return [self.value, "install"]

    @property
    def run_command(self) -> str:
        """How the user starts the dev server with this manager."""
        if self is PackageManager.NPM or self is PackageManager.CNPM:
            return f"{self.value} run start"
        return f"{self.value} start"


def install_dependencies(project_dir: Path, manager: PackageManager) -> None:
    """Run ``<manager> install`` in ``project_dir``.

    Output is not captured so the user sees the package manager's progress.

    Raises:
        DependencyInstallError: If the command cannot be started or fails
    """
    command = " ".join(manager.install_command)
    print_event(f"Installing dependencies with {manager.value}...")
    try:
        result = subprocess.run(manager.install_command, cwd=project_dir)
    except OSError as e:
        log_command(command, -1)
        raise DependencyInstallError(f"Failed to run '{command}': {e}") from e

    log_command(command, result.returncode)
    if result.returncode != 0:
        raise DependencyInstallError(f"'{command}' failed with exit code {result.returncode}")


__all__ = [
    "PackageManager",
    "install_dependencies",
]
