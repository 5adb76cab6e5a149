"""Configuration manager for ELZA.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables, ELZA_ prefixed (highest priority)
    2. Global Config (~/.elza-config)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from elza.config.settings import CONFIG_FILE, ENV_PREFIX, Settings
from elza.utils.logging import log_message

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads configuration with cascading precedence.

    Parsing is line based (KEY=VALUE or KEY="VALUE"); nothing in the file
    is evaluated.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to the global ~/.elza-config file
    """

    def __init__(self, global_config_path: Path | None = None) -> None:
        self.global_config_path = global_config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources.

        Each call starts from clean defaults so repeated loads are
        idempotent.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.warning(f"Could not read config file {path}: {e}")
            return

        for line in lines:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            match = pattern.match(line)
            if match:
                key, value = match.groups()
                value = value.strip()

                if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
                    value = value[1:-1]

                self._raw_values[key] = value
                self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with ELZA_-prefixed environment variables.

        Only known config keys are read so unrelated variables never leak
        into the settings.
        """
        for key in Settings.get_config_keys():
            env_value = os.environ.get(f"{ENV_PREFIX}{key}")
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return
        log_message(f"Config key {key} set from {self.get_config_source(key)}")

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        elif isinstance(current_value, float):
            try:
                setattr(self.settings, attr, float(value))
            except ValueError:
                logger.warning(f"Invalid {key} value '{value}', keeping default")
        else:
            setattr(self.settings, attr, value)

    def get_config_source(self, key: str) -> str:
        """Return where a key's effective value came from ("default" if unset)."""
        return self._config_sources.get(key, "default")


__all__ = ["ConfigManager"]
