"""Configuration management"""

from .app_config import AppConfig, RenderingConfig, StorageConfig
from .config_loader import ConfigError, ConfigLoader

__all__ = ["AppConfig", "RenderingConfig", "StorageConfig", "ConfigError", "ConfigLoader"]
