"""
Configuration Manager

Handles hierarchical configuration loading and validation with support for
CLI args → environment variables → config files → defaults.
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from cardfilter.core.config.models import AppConfig
from cardfilter.core.exceptions import ConfigurationError, ErrorCode, ErrorContext


class ConfigManager:
    """
    Manages application configuration with hierarchical loading and validation.

    Configuration sources in order of precedence:
    1. CLI arguments (highest priority)
    2. Environment variables
    3. Configuration files
    4. Default values (lowest priority)
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to configuration file
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[AppConfig] = None
        self._config_paths = self._get_default_config_paths()

    def _get_default_config_paths(self) -> List[Path]:
        """Get default configuration file search paths."""
        search_paths = [
            Path.cwd() / "cardfilter.yaml",
            Path.cwd() / "cardfilter.yml",
            Path.cwd() / ".cardfilter.yaml",
            Path.home() / ".config" / "cardfilter" / "config.yaml",
        ]

        xdg_config = os.environ.get('XDG_CONFIG_HOME')
        if xdg_config:
            search_paths.append(Path(xdg_config) / "cardfilter" / "config.yaml")

        return search_paths

    def load_config(
        self,
        cli_args: Optional[Dict[str, Any]] = None,
        env_prefix: str = "CARDFILTER_"
    ) -> AppConfig:
        """
        Load and validate configuration from all sources.

        Args:
            cli_args: Dictionary of CLI arguments
            env_prefix: Prefix for environment variables

        Returns:
            Validated AppConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_config_file()
        if file_config:
            config_data.update(file_config)

        env_config = self._load_env_config(env_prefix)
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        if cli_args:
            cli_config = self._normalize_cli_args(cli_args)
            config_data = self._deep_merge(config_data, cli_config)

        try:
            self._config = AppConfig(**config_data)
            return self._config
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                error_code=ErrorCode.CONFIG_SCHEMA_VALIDATION,
                context=ErrorContext(operation="validate_config"),
                cause=e
            ) from e

    def _load_config_file(self) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        config_file = self.config_file

        if config_file is not None and not config_file.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                error_code=ErrorCode.CONFIG_FILE_NOT_FOUND,
                context=ErrorContext(operation="load_config_file", file_path=str(config_file)),
                config_key="config_file",
                config_value=str(config_file)
            )

        # If no specific file provided, search default locations
        if not config_file:
            for path in self._config_paths:
                if path.is_file():
                    config_file = path
                    break

        if not config_file:
            return None

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}
        except (IOError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_file}: {e}",
                context=ErrorContext(operation="load_config_file", file_path=str(config_file)),
                cause=e
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping at the top level",
                error_code=ErrorCode.CONFIG_INVALID_FORMAT,
                context=ErrorContext(operation="load_config_file", file_path=str(config_file))
            )
        return data

    def _load_env_config(self, prefix: str) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        env_mappings: Dict[str, Tuple[str, Optional[str], Callable[[str], Any]]] = {
            f"{prefix}MIN_COST": ("filters", "min_cost", float),
            f"{prefix}MAX_COST": ("filters", "max_cost", float),
            f"{prefix}VERSIONS": ("filters", "versions", self._parse_int_list),
            f"{prefix}LEADERS": ("filters", "leaders", self._parse_int_list),
            f"{prefix}VERBOSE": ("verbose", None, self._parse_bool),
            f"{prefix}DEBUG": ("debug", None, self._parse_bool),
        }

        for env_var, (section, key, parser) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            try:
                parsed_value = parser(value)
            except (ValueError, TypeError) as e:
                raise ConfigurationError(
                    f"Invalid value for {env_var}: {value} ({e})",
                    error_code=ErrorCode.CONFIG_INVALID_VALUE,
                    config_key=env_var,
                    config_value=value,
                    cause=e
                ) from e

            if key is None:
                env_config[section] = parsed_value
            else:
                env_config.setdefault(section, {})[key] = parsed_value

        return env_config

    def _normalize_cli_args(self, cli_args: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize CLI arguments to configuration structure."""
        normalized: Dict[str, Any] = {}

        cli_mappings: Dict[str, Union[str, Tuple[str, str]]] = {
            'verbose': 'verbose',
            'debug': 'debug',
            'min_cost': ('filters', 'min_cost'),
            'max_cost': ('filters', 'max_cost'),
            'versions': ('filters', 'versions'),
            'leaders': ('filters', 'leaders'),
        }

        for cli_key, value in cli_args.items():
            # Unset options and empty repeatable options leave lower layers alone
            if value is None or value == []:
                continue

            mapping = cli_mappings.get(cli_key)
            if isinstance(mapping, tuple):
                section, key = mapping
                normalized.setdefault(section, {})[key] = value
            elif mapping:
                normalized[mapping] = value

        return normalized

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def _parse_bool(value: Union[str, bool]) -> bool:
        """Parse boolean value from string."""
        if isinstance(value, bool):
            return value
        return value.lower() in {'true', '1', 'yes', 'on', 'enabled'}

    @staticmethod
    def _parse_int_list(value: str) -> List[int]:
        """Parse a comma-separated list of integers."""
        return [int(item.strip()) for item in value.split(',') if item.strip()]

    def validate_config(self, config: Optional[AppConfig] = None) -> List[str]:
        """
        Validate configuration and return list of warnings.

        Nothing reported here is fatal: inverted bounds and empty accepted
        lists are legal and simply match no cards.

        Args:
            config: Configuration to validate (uses loaded config if None)

        Returns:
            List of validation warnings
        """
        config = config or self._config
        if not config:
            return ["No configuration loaded"]

        warnings = []
        filters = config.filters

        if filters.max_cost is not None and filters.min_cost >= filters.max_cost:
            warnings.append(
                f"min_cost ({filters.min_cost:g}) is not below max_cost ({filters.max_cost:g}); no card will match"
            )
        if filters.versions == []:
            warnings.append("versions is empty; no card will match")
        if filters.leaders == []:
            warnings.append("leaders is empty; no card will match")

        card_ids = [card.id for card in config.cards]
        if len(card_ids) != len(set(card_ids)):
            warnings.append("Duplicate card ids in configuration")
        if not config.cards:
            warnings.append("No cards configured")

        return warnings

    def generate_schema(self) -> Dict[str, Any]:
        """JSON schema of the configuration file format."""
        return AppConfig.model_json_schema()

    @property
    def config(self) -> Optional[AppConfig]:
        """Get the currently loaded configuration."""
        return self._config
