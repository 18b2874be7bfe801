"""Configuration manager - defaults, file overrides, environment overrides, validation."""
import copy
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from pattern_catalogue.config.schemas import AppConfig
from pattern_catalogue.config.utils.env_expansion import expand_config_env_vars
from pattern_catalogue.domain.base.exceptions import ConfigurationError


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides (YAML or JSON)
    - Applying environment variable overrides
    - Variable interpolation
    - Validation into the typed AppConfig
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a YAML or JSON configuration file. If not
                         provided, PATTERN_CATALOGUE_CONFIG is consulted.
        """
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get("PATTERN_CATALOGUE_CONFIG")
        if config_file:
            self._load_config_file(config_file)

        # Environment variables have the highest priority
        self._load_env_vars()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                user_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
        self.update_config(user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return expand_config_env_vars(self._config)

    def get_typed(self) -> AppConfig:
        """
        Validate the configuration and return it as an AppConfig.

        Raises:
            ConfigurationError: If any value fails validation
        """
        try:
            return AppConfig.model_validate(self.get_config())
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", fields) from e


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """Load and validate configuration in one step."""
    return ConfigurationManager(config_file).get_typed()
