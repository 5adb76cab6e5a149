"""Run log for ELZA.

Console messages and external commands (git, package managers) of a run
can be appended to a log file. Whether the file is written, and where, is
read from the loaded configuration: the LOG and LOG_FILE keys, set in
~/.elza-config or as ELZA_LOG / ELZA_LOG_FILE. Until the configuration is
applied, and whenever LOG is off, records go to a NullHandler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from elza.utils.errors import FileSystemError

if TYPE_CHECKING:
    from elza.config.settings import Settings

LOGGER_NAME = "elza"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: logging.Logger | None = None


def _file_handler(log_file: Path) -> logging.Handler:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Cannot open log file {log_file}: {e}") from e
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Point the ``elza`` logger at the configured run log.

    Handlers from an earlier call are closed and replaced, so the CLI can
    call this once the configuration is loaded.

    Args:
        settings: Loaded configuration; None keeps the log off

    Returns:
        The ``elza`` logger

    Raises:
        FileSystemError: The log file cannot be created
    """
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings is not None and settings.log_enabled:
        logger.addHandler(_file_handler(Path(settings.log_file).expanduser()))
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """The ``elza`` logger, with the log off if nothing configured it yet."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    get_logger().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Record an external command and the status it exited with.

    Args:
        command: The command line as run
        exit_code: Its exit status
    """
    get_logger().info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


__all__ = [
    "get_logger",
    "log_command",
    "log_message",
    "setup_logging",
]
