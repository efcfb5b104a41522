"""Configuration service for managing spec-cli configuration.

This module provides centralized configuration management for repositories
using spec-cli, handling spec.config.yaml reading, writing, and validation.

Key Classes:
    ConfigService: Main service for configuration load/save operations

Dependencies:
    - Pydantic model (SpecConfig)
    - YAML for serialization

Configuration Hierarchy:
    1. Built-in defaults (in config/paths.py)
    2. Repository config (spec.config.yaml)
    3. Environment variables (generator settings, see config/settings.py)

Typical Usage:
    >>> service = ConfigService(repo_root=Path.cwd())
    >>> config = service.load_config()
    >>> config.branch_name("add-dark-mode")
    'feature-add-dark-mode'
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.config.paths import CONFIG_FILE
from spec_cli.exceptions import ConfigurationError
from spec_cli.models.config import SpecConfig
from spec_cli.utils.file_utils import file_exists

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        message = item["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return ", ".join(parts)


class ConfigService:
    """Service for managing configuration."""

    def __init__(self, repo_root: Path | None = None):
        """Initialize config service.

        Args:
            repo_root: Repository root directory (defaults to current directory)
        """
        self.repo_root = repo_root or Path.cwd()
        self.config_path = self.repo_root / CONFIG_FILE

    def config_exists(self) -> bool:
        """Check if configuration file exists.

        Returns:
            True if config file exists, False otherwise
        """
        return file_exists(self.config_path)

    def load_config(self) -> SpecConfig:
        """Load and validate configuration from file.

        Returns:
            SpecConfig object

        Raises:
            ConfigurationError: If the file is missing, not valid YAML, or
                fails validation
        """
        if not self.config_exists():
            raise ConfigurationError(
                ERROR_MESSAGES["config_not_found"].format(config_file=CONFIG_FILE)
            )

        try:
            config = SpecConfig.load(self.config_path)
        except ValidationError as e:
            raise ConfigurationError(
                ERROR_MESSAGES["config_invalid"].format(details=_format_validation_error(e)),
                config_file=self.config_path,
            ) from e
        except (yaml.YAMLError, ValueError, TypeError, OSError) as e:
            raise ConfigurationError(
                ERROR_MESSAGES["config_invalid"].format(details=e),
                config_file=self.config_path,
            ) from e

        logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    def build_config(self, **values: Any) -> SpecConfig:
        """Validate configuration values gathered outside of a file.

        Raises:
            ConfigurationError: If any value fails validation
        """
        try:
            return SpecConfig(**values)
        except ValidationError as e:
            raise ConfigurationError(
                ERROR_MESSAGES["config_invalid"].format(details=_format_validation_error(e))
            ) from e

    def save_config(self, config: SpecConfig) -> Path:
        """Save configuration to file.

        Args:
            config: SpecConfig object to save

        Returns:
            Path the configuration was written to
        """
        config.save(self.config_path)
        logger.debug(f"Saved configuration to {self.config_path}")
        return self.config_path

    def get_docs_dir(self, config: SpecConfig | None = None) -> Path:
        """Get the documentation directory from config.

        Args:
            config: Already loaded config (loaded from disk if omitted)

        Returns:
            Absolute path to the documentation directory
        """
        config = config or self.load_config()
        return self.repo_root / config.docs_dir


def get_config_service(repo_root: Path | None = None) -> ConfigService:
    """Get a ConfigService instance.

    Args:
        repo_root: Repository root directory (defaults to current directory)

    Returns:
        ConfigService instance
    """
    return ConfigService(repo_root)
