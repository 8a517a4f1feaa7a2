"""
Configuration Service - loads accessortracker settings from a JSON file and
environment variables.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Set, Type, TypeVar

from ..accessor.config import AccessorFilterConfig
from ..exceptions import ConfigurationError

T = TypeVar('T')

ENV_PREFIX = "ACCESSORTRACKER_"


@dataclass
class ScanConfig:
    """File scanning configuration."""
    pattern: str = "*.java"
    encoding: str = "utf-8"
    exclude_dirs: Set[str] = None

    def __post_init__(self):
        if self.exclude_dirs is None:
            self.exclude_dirs = {
                '.git', '.svn', '.hg', '.idea', '.vscode',
                'build', 'target', 'out', '.gradle', 'node_modules',
            }
        self.exclude_dirs = set(self.exclude_dirs)


@dataclass
class UnifiedConfig:
    """Master configuration combining all settings."""
    accessor: AccessorFilterConfig = field(default_factory=AccessorFilterConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.scan.pattern:
            raise ConfigurationError("scan.pattern must not be empty")
        if not (self.accessor.getter_prefixes or self.accessor.setter_prefixes):
            raise ConfigurationError("at least one accessor prefix is required")


class ConfigurationService:
    """
    Configuration management service.

    Settings are layered: dataclass defaults, then the JSON file, then
    ``ACCESSORTRACKER_ACCESSOR_*`` / ``ACCESSORTRACKER_SCAN_*`` environment
    variables.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[UnifiedConfig] = None

    def get_config(self) -> UnifiedConfig:
        """Get the current configuration, loading it if needed."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self, config_path: Optional[str] = None) -> UnifiedConfig:
        """
        Load configuration from file and environment variables.

        Args:
            config_path: Optional path to a JSON configuration file

        Returns:
            UnifiedConfig instance

        Raises:
            ConfigurationError: if the file is missing or not valid JSON
        """
        config_file = Path(config_path) if config_path else self.config_path

        data: Dict[str, Any] = {}
        if config_file:
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"Config file {config_file} must contain a JSON object")
            self.logger.info(f"Loaded configuration from {config_file}")

        accessor_config = self._dict_to_dataclass(data.get('accessor', {}), AccessorFilterConfig)
        scan_config = self._dict_to_dataclass(data.get('scan', {}), ScanConfig)

        accessor_config = self._apply_env_overrides(accessor_config, f"{ENV_PREFIX}ACCESSOR_")
        scan_config = self._apply_env_overrides(scan_config, f"{ENV_PREFIX}SCAN_")

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", data.get('log_level', 'WARNING'))
        if not isinstance(log_level, str):
            raise ConfigurationError(f"log_level must be a string, got {log_level!r}")

        return UnifiedConfig(accessor=accessor_config, scan=scan_config, log_level=log_level.upper())

    def save_config(self, config: UnifiedConfig, config_path: Optional[str] = None) -> None:
        """Save configuration to a JSON file."""
        config_file = Path(config_path) if config_path else self.config_path

        if not config_file:
            raise ConfigurationError("No config path specified")

        data = {
            'accessor': self._to_json_dict(config.accessor),
            'scan': self._to_json_dict(config.scan),
            'log_level': config.log_level,
        }

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Failed to save config to {config_file}: {e}") from e

        self.logger.info(f"Saved configuration to {config_file}")

    def _to_json_dict(self, config) -> Dict[str, Any]:
        data = asdict(config)
        for key, value in data.items():
            if isinstance(value, (set, tuple)):
                data[key] = sorted(value) if isinstance(value, set) else list(value)
        return data

    def _dict_to_dataclass(self, data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """Convert dictionary to dataclass, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Section for {dataclass_type.__name__} must be a JSON object")

        field_names = {f.name for f in fields(dataclass_type)}
        unknown = set(data) - field_names
        if unknown:
            self.logger.warning(f"Ignoring unknown {dataclass_type.__name__} keys: {sorted(unknown)}")

        filtered_data = {k: v for k, v in data.items() if k in field_names}
        for f in fields(dataclass_type):
            if f.name in filtered_data:
                self._check_value(dataclass_type.__name__, f, filtered_data[f.name])
        return dataclass_type(**filtered_data)

    def _check_value(self, section: str, f, value: Any) -> None:
        """Reject JSON values whose type does not match the dataclass field."""
        origin = getattr(f.type, '__origin__', None)
        if origin in (tuple, set):
            valid = isinstance(value, list) and all(isinstance(item, str) for item in value)
            expected = "a list of strings"
        elif f.type == bool:
            valid = isinstance(value, bool)
            expected = "a boolean"
        elif f.type == int:
            valid = isinstance(value, int) and not isinstance(value, bool)
            expected = "an integer"
        elif f.type == str:
            valid = isinstance(value, str)
            expected = "a string"
        else:
            return

        if not valid:
            raise ConfigurationError(f"{section}.{f.name} must be {expected}, got {value!r}")

    def _apply_env_overrides(self, config: T, prefix: str) -> T:
        """Apply environment variable overrides to configuration."""
        config_dict = asdict(config)

        for f in fields(config):
            env_key = f"{prefix}{f.name.upper()}"
            env_value = os.getenv(env_key)
            if env_value is None:
                continue

            origin = getattr(f.type, '__origin__', None)
            try:
                if f.type == bool:
                    config_dict[f.name] = env_value.lower() in ('true', '1', 'yes', 'on')
                elif f.type == int:
                    config_dict[f.name] = int(env_value)
                elif origin in (tuple, set):
                    items = [item.strip() for item in env_value.split(',') if item.strip()]
                    config_dict[f.name] = origin(items)
                else:
                    config_dict[f.name] = env_value
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for {env_key}: {env_value}") from e

            self.logger.debug(f"Applied env override: {env_key}={env_value}")

        return type(config)(**config_dict)
