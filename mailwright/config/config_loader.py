"""Configuration loader for rendering settings."""

import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .app_config import AppConfig

CONFIG_ENV_VAR = "MAILWRIGHT_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""

    pass


class ConfigLoader:
    """
    Locate, parse and cache the application configuration.

    Lookup order: the explicit path, then ``$MAILWRIGHT_CONFIG``, then the
    per-user and per-project default files. The first existing file wins;
    without any, the built-in defaults apply.
    """

    DEFAULT_CONFIG_PATHS = [
        Path("~/.mailwright/app_config.json"),
        Path("config/app_config.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def candidate_paths(self) -> list[Path]:
        """Config files to try, in lookup order."""
        if self.config_path:
            return [self.config_path]

        paths = list(self.DEFAULT_CONFIG_PATHS)
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            paths.insert(0, Path(env_path))
        return paths

    def find_config_file(self) -> Optional[Path]:
        """Return the first existing config file, or None."""
        for path in self.candidate_paths():
            path = path.expanduser()
            if path.is_file():
                return path
        return None

    def load_app_config(self) -> AppConfig:
        """
        Load application configuration.

        Returns:
            AppConfig instance, with defaults if no config file exists

        Raises:
            ConfigError: If the config file is unreadable, not valid JSON or
                fails validation
        """
        if self._config is None:
            config_file = self.find_config_file()
            self._config = self._parse(config_file) if config_file else AppConfig()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load_app_config()

    @staticmethod
    def _parse(config_file: Path) -> AppConfig:
        try:
            return AppConfig.model_validate_json(config_file.read_bytes())
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Invalid config in {config_file}: {e}") from e
