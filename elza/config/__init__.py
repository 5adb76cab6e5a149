"""Configuration management for ELZA."""

from elza.config.manager import ConfigManager
from elza.config.settings import CONFIG_FILE, Settings

__all__ = [
    "ConfigManager",
    "Settings",
    "CONFIG_FILE",
]
