"""Configuration management for Contract Sizer."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from contract_sizer.exceptions import ConfigError
from contract_sizer.models.config import AppConfig

DEFAULT_CONFIG_FILENAME = "contract-sizer.yaml"

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "CONTRACT_SIZER_BUILD_DIR": ("build", "contracts_build_directory"),
    "CONTRACT_SIZER_CONTRACTS_DIR": ("build", "contracts_directory"),
    "CONTRACT_SIZER_WORKING_DIR": ("build", "working_directory"),
    "CONTRACT_SIZER_LOG_LEVEL": ("logging", "level"),
}


class ConfigManager:
    """Manages configuration with YAML file, environment variable and override support."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. If None, uses CONTRACT_SIZER_CONFIG_PATH
                        environment variable or defaults to contract-sizer.yaml in the cwd
        """
        if config_path is None:
            env_path = os.getenv("CONTRACT_SIZER_CONFIG_PATH")
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self.config_path = config_path

    def load(self, overrides: dict[str, dict[str, Any]] | None = None) -> AppConfig:
        """Load configuration from file, then apply environment and explicit overrides.

        Overrides are merged into the raw data before validation, so paths derived
        from working_directory follow an overridden working directory.

        Args:
            overrides: Section -> key -> value, typically built from CLI flags.
                       None values are ignored.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file cannot be parsed or the merged data is invalid
        """
        config_data: dict[str, Any] = {}

        # 1. Load from YAML file if it exists
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(self.config_path, str(e)) from e
            if not isinstance(config_data, dict):
                raise ConfigError(self.config_path, "top level must be a mapping")

        # 2. Apply environment variable overrides
        self._merge(config_data, self._env_overrides())

        # 3. Apply explicit overrides
        if overrides:
            self._merge(config_data, overrides)

        # 4. Create config object (applies defaults)
        try:
            return AppConfig(**config_data)
        except ValidationError as e:
            raise ConfigError(self.config_path, str(e)) from e

    def _env_overrides(self) -> dict[str, dict[str, Any]]:
        """Collect CONTRACT_SIZER_<...> environment variables.

        Examples:
            - CONTRACT_SIZER_BUILD_DIR=out/contracts
            - CONTRACT_SIZER_LOG_LEVEL=DEBUG
        """
        result: dict[str, dict[str, Any]] = {}
        for env_name, (section, key) in ENV_OVERRIDES.items():
            if value := os.getenv(env_name):
                if key == "level":
                    value = value.upper()
                result.setdefault(section, {})[key] = value
        return result

    @staticmethod
    def _merge(config_data: dict[str, Any], overrides: dict[str, dict[str, Any]]) -> None:
        for section, values in overrides.items():
            target = config_data.get(section)
            if not isinstance(target, dict):
                target = {}
                config_data[section] = target
            for key, value in values.items():
                if value is not None:
                    target[key] = value
