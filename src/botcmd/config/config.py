"""
Configuration management for botcmd.

Provides a configuration file at ~/.botcmd/config.json for default settings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# Default values - single source of truth
DEFAULTS = {
    "command_prefix": "!",
    "commands_dir": None,
    "owner": None,
    "log_level": "WARNING",
}


class Config(BaseModel):
    """Configuration settings for a command client.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    command_prefix: Optional[str] = Field(
        default=None,
        description="Prefix for prefixed command invocations (e.g. '!')"
    )
    commands_dir: Optional[str] = Field(
        default=None,
        description="Directory holding <group>/<member>.py command modules"
    )
    owner: Optional[str] = Field(
        default=None,
        description="User ID of the bot owner"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Logging level for botcmd loggers"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        value = DEFAULTS.get(key)
        return default if value is None else value


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".botcmd"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file.

        Returns:
            Config object with loaded settings, or defaults if the file
            doesn't exist or is invalid.
        """
        if not self.CONFIG_FILE.exists():
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Invalid config file {self.CONFIG_FILE} ({e}), using defaults")
            return Config()

    def save(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file, preserving unknown keys.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        if config is not None:
            self._config = config
        if self._config is None:
            self._config = Config()

        existing_data = {}
        if self.CONFIG_FILE.exists():
            try:
                existing_data = json.loads(self.CONFIG_FILE.read_text())
            except json.JSONDecodeError:
                logger.warning(f"Overwriting unreadable config file {self.CONFIG_FILE}")

        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")
        return self.CONFIG_FILE

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save."""
        self._config = self.load()
        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")
        setattr(self._config, key, value)
        self.save()

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
