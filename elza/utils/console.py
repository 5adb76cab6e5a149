"""Rich-based console output utilities.

This module provides the colored terminal output used by every step of
project creation. Each helper also writes the message to the log file.
"""

from rich.console import Console
from rich.theme import Theme

from elza import SCRIPT_NAME, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold cyan",
        "event": "bold magenta",
        "ready": "bold green",
        "pick": "bold blue",
        "highlight": "bold white",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red."""
    from elza.utils.logging import log_message

    console_err.print(f"[error]error[/error]  - [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    from elza.utils.logging import log_message

    console.print(f"[success]success[/success] - [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    from elza.utils.logging import log_message

    console.print(f"[warning]warn[/warning]   - [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in cyan."""
    from elza.utils.logging import log_message

    console.print(f"[info]info[/info]   - {message}")
    log_message(f"INFO: {message}")


def print_event(message: str) -> None:
    """Print a progress event (file written, command started)."""
    from elza.utils.logging import log_message

    console.print(f"[event]event[/event]  - {message}")
    log_message(f"EVENT: {message}")


def print_ready(message: str) -> None:
    """Print the final ready message."""
    from elza.utils.logging import log_message

    console.print(f"[ready]ready[/ready]  - {message}")
    log_message(f"READY: {message}")


def print_pick(message: str) -> None:
    """Echo an option value that was given as a command-line flag.

    Prompted choices are shown by questionary itself, so this only runs for
    values that skipped the prompt.
    """
    console.print(f"[pick]select[/pick] - {message}")


def show_banner() -> None:
    """Display the tool name and version."""
    console.print(f"[success]{SCRIPT_NAME} v{__version__}[/success]")


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_event",
    "print_ready",
    "print_pick",
    "show_banner",
    "show_version",
]
