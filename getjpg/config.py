"""
load the config from config/config.json and .env
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE = "config/config.json"


@dataclass(frozen=True)
class Settings:
    """Image request parameters, read once at startup."""
    scheme: str
    server: str
    prefix: str
    region: str
    size: str
    rotation: str
    quality: str
    format: str
    image_info: str
    pid_file: str
    delay_in_ms: int
    image_dir: str


class Config:
    """Configuration loader that reads config/config.json and environment variables."""

    def __init__(self, config_path: str = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to the config file. If None, uses config/config.json
                        relative to the working directory.
        """
        if config_path is None:
            config_path = CONFIG_FILE

        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from the JSON (or YAML) file and override with environment variables."""
        try:
            with open(self.config_path, 'r') as f:
                if self.config_path.suffix == '.json':
                    config = json.load(f)
                else:
                    config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {self.config_path}: {e}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {self.config_path}: {e}")

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain an object")

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'GETJPG_SERVER': ('server',),
            'GETJPG_PID_FILE': ('pid_file',),
            'GETJPG_IMAGE_DIR': ('image_dir',),
            'GETJPG_DELAY_IN_MS': ('delay_in_ms',),
            'GETJPG_FETCHER_TIMEOUT': ('fetcher', 'timeout'),
            'GETJPG_FETCHER_USER_AGENT': ('fetcher', 'user_agent'),
            'GETJPG_LOG_LEVEL': ('logging', 'level'),
            'GETJPG_LOG_DIR': ('logging', 'dir'),
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                current = config
                for key in config_path[:-1]:
                    if not isinstance(current.get(key), dict):
                        current[key] = {}
                    current = current[key]

                final_key = config_path[-1]
                # top-level settings stay strings, except the delay
                if len(config_path) == 1 and final_key != 'delay_in_ms':
                    current[final_key] = env_value
                else:
                    current[final_key] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str):
        """Convert environment variable string to appropriate Python type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, *keys, default=None):
        """Get configuration value by nested keys.

        Args:
            *keys: Configuration keys (e.g., 'fetcher', 'timeout')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def settings(self) -> Settings:
        """Build the immutable Settings record from the loaded document."""
        values = {}
        for field in fields(Settings):
            if field.name not in self._config:
                raise ValueError(f"Missing setting '{field.name}' in {self.config_path}")
            value = self._config[field.name]
            if field.type is int:
                try:
                    values[field.name] = int(value)
                except (TypeError, ValueError):
                    raise ValueError(f"Setting '{field.name}' must be an integer, got {value!r}")
            else:
                values[field.name] = "" if value is None else str(value)
        return Settings(**values)

    @property
    def fetcher(self) -> Dict[str, Any]:
        """Get HTTP fetcher configuration."""
        return self.get('fetcher', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get('logging', default={})


def log_settings(settings: Settings):
    """Write every setting to the log, one per line."""
    logger.info("Here are the settings (i.e. constants in code):")
    logger.info(f"Scheme: {settings.scheme}")
    logger.info(f"Server: {settings.server}")
    logger.info(f"Prefix: {settings.prefix}")
    logger.info(f"Region: {settings.region}")
    logger.info(f"Size: {settings.size}")
    logger.info(f"Rotation: {settings.rotation}")
    logger.info(f"Quality: {settings.quality}")
    logger.info(f"Format: {settings.format}")
    logger.info(f"ImageInfo: {settings.image_info}")
    logger.info(f"PidFile: {settings.pid_file}")
    logger.info(f"DelayInMs: {settings.delay_in_ms}")
    logger.info(f"ImageDir: {settings.image_dir}")
