"""Settings dataclass for ELZA configuration.

This module defines the Settings dataclass that holds all configuration
values read from ~/.elza-config and the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    """Configuration settings for ELZA.

    All settings have sensible defaults and can be overridden from the
    configuration file (~/.elza-config) or ELZA_-prefixed environment
    variables.

    Attributes:
        npm_registry: Registry base URL; empty means read it from .npmrc
        npmrc_path: Path of the npm user config holding the registry line
        check_updates: Look up the latest published version on each run
        version_check_timeout: HTTP timeout for the version lookup (seconds)
        git_init: Run git init in the new project
        initial_commit: Also stage everything and create an initial commit
        default_package_manager: Install dependencies with this tool
            (npm, yarn, pnpm, cnpm); empty skips the install step
        log_enabled: Append console messages and external commands to log_file
        log_file: Path of the run log
    """

    npm_registry: str = ""
    npmrc_path: str = field(default_factory=lambda: str(Path.home() / ".npmrc"))
    check_updates: bool = True
    version_check_timeout: float = 5.0
    git_init: bool = True
    initial_commit: bool = False
    default_package_manager: str = ""
    log_enabled: bool = False
    log_file: str = field(default_factory=lambda: str(Path.home() / ".elza.log"))

    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "NPM_REGISTRY": "npm_registry",
            "NPMRC_PATH": "npmrc_path",
            "CHECK_UPDATES": "check_updates",
            "VERSION_CHECK_TIMEOUT": "version_check_timeout",
            "GIT_INIT": "git_init",
            "INITIAL_COMMIT": "initial_commit",
            "DEFAULT_PACKAGE_MANAGER": "default_package_manager",
            "LOG": "log_enabled",
            "LOG_FILE": "log_file",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "CHECK_UPDATES")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())


# Default configuration file path
CONFIG_FILE = Path.home() / ".elza-config"

# Prefix of environment variables that override config keys
ENV_PREFIX = "ELZA_"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "ENV_PREFIX",
]
