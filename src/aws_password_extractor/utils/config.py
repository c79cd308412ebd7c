#!/usr/bin/env python3
"""
utils/config.py

Simple configuration management utilities.
Provides settings loading for the extractor with environment overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from aws_password_extractor.core.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_VERBOSITY,
)
from aws_password_extractor.utils.exceptions import ConfigurationError
from aws_password_extractor.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize ConfigManager.

        Args:
            config_file: Explicit settings file. When omitted the file named by
                AWS_PASSWORD_EXTRACTOR_CONFIG is used, then configs/settings.yaml
                (or .yml) under the working directory.
        """
        env_file = os.environ.get(CONFIG_ENV_VAR)
        if config_file is not None:
            self.settings_file = Path(config_file)
            self.explicit = True
        elif env_file:
            self.settings_file = Path(env_file)
            self.explicit = True
        else:
            config_dir = Path.cwd() / "configs"
            yml_file = config_dir / "settings.yml"
            yaml_file = config_dir / "settings.yaml"
            self.settings_file = yml_file if yml_file.exists() else yaml_file
            self.explicit = False

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file safely.

        A missing default file yields built-in defaults; a missing or broken
        file that was asked for by name is a configuration error.
        """
        if not file_path.exists():
            if self.explicit:
                raise ConfigurationError(f"Config file not found: {file_path}")
            logger.debug("No settings file, using defaults", extra={"path": str(file_path)})
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading {file_path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                f"Config file {file_path} must contain a mapping at the top level"
            )
        return content

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        # Check environment variable first
        if env_var and env_var in os.environ:
            return os.environ[env_var]

        # Navigate through nested dictionary
        keys = key_path.split(".")
        current = self.config

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def _get_positive_int(self, key_path: str, default: int) -> int:
        value = self.get_value(key_path, default)
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{key_path} must be an integer, got {value!r}") from None
        if number <= 0:
            raise ConfigurationError(f"{key_path} must be positive, got {number}")
        return number

    def get_page_size(self) -> int:
        """Number of instances requested per DescribeInstances call."""
        return self._get_positive_int("extraction.page_size", DEFAULT_PAGE_SIZE)

    def get_max_pages(self) -> int:
        """Upper bound on DescribeInstances pages for one run."""
        return self._get_positive_int("extraction.max_pages", DEFAULT_MAX_PAGES)

    def get_timeout_seconds(self) -> int:
        """Wall-clock deadline for the whole enumeration."""
        return self._get_positive_int("extraction.timeout_seconds", DEFAULT_TIMEOUT_SECONDS)

    def get_connect_timeout(self) -> int:
        return self._get_positive_int("aws.connect_timeout", DEFAULT_CONNECT_TIMEOUT)

    def get_read_timeout(self) -> int:
        return self._get_positive_int("aws.read_timeout", DEFAULT_READ_TIMEOUT)

    def get_logging_level(self) -> str:
        """Get logging level."""
        return str(self.get_value("logging.level", DEFAULT_VERBOSITY, env_var="LOG_LEVEL"))

    def get_logging_file(self) -> Optional[str]:
        """Get logging file path, if file logging is enabled."""
        return self.get_value("logging.file", None, env_var="LOG_FILE") or None

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

    def reload_config(self) -> None:
        """Force reload of configuration from file."""
        if hasattr(self, "_cached_config"):
            delattr(self, "_cached_config")
