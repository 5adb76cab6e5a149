"""Git repository initialization for new projects."""

import subprocess
from pathlib import Path

from elza.utils.errors import GitOperationError
from elza.utils.logging import log_command

INITIAL_COMMIT_MESSAGE = "initial commit"


def _run_git(args: list[str], cwd: Path) -> None:
    """Run one git command in ``cwd``.

    Raises:
        GitOperationError: If git cannot be started or exits non-zero.
    """
    command = " ".join(["git", *args])
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        log_command(command, -1)
        raise GitOperationError(f"Failed to run '{command}': {e}") from e

    log_command(command, result.returncode)
    if result.returncode != 0:
        detail = result.stderr.strip() or result.stdout.strip()
        raise GitOperationError(f"'{command}' failed with exit code {result.returncode}: {detail}")


def git_init(project_dir: Path, commit: bool = False) -> None:
    """Initialize a repository in ``project_dir``.

    Args:
        project_dir: Root of the new project
        commit: Also stage every file and create the initial commit

    Raises:
        GitOperationError: If any git command fails
    """
    _run_git(["init"], project_dir)
    if commit:
        _run_git(["add", "-A"], project_dir)
        _run_git(["commit", "-m", INITIAL_COMMIT_MESSAGE], project_dir)


__all__ = [
    "INITIAL_COMMIT_MESSAGE",
    "git_init",
]
