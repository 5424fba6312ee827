"""
Configuration loader for wirekit widget trees
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from wirekit.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Maximum config file size (1MB should be plenty for YAML configs)
MAX_CONFIG_SIZE = 1024 * 1024


class ConfigLoader:
    """Loads and validates YAML widget tree configurations"""

    def load(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Validated configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If config file is invalid or too large
        """
        resolved_path = Path(config_path).expanduser().resolve()

        self._validate_config_path(resolved_path)

        if not resolved_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {resolved_path}")

        file_size = resolved_path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise ConfigurationError(
                f"Configuration file too large: {file_size} bytes "
                f"(maximum {MAX_CONFIG_SIZE} bytes)"
            )

        try:
            with open(resolved_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Configuration file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}") from e

        self._validate(config)
        config = self._apply_defaults(config)

        logger.info(f"Loaded configuration from {resolved_path}")
        return config

    def _validate_config_path(self, config_path: Path) -> None:
        """
        Validate that the configuration file path is loadable.

        Raises:
            ConfigurationError: If path is a directory
        """
        if config_path.is_dir():
            raise ConfigurationError(f"Path is a directory, not a file: {config_path}")

        if config_path.suffix.lower() not in [".yaml", ".yml"]:
            logger.warning(
                f"Configuration file has unexpected extension: {config_path.suffix}. "
                f"Expected .yaml or .yml"
            )

        logger.debug(f"Configuration path validated: {config_path}")

    def _validate(self, config: Any) -> None:
        """Validate configuration structure"""
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a dictionary")

        if "widgets" not in config:
            raise ConfigurationError("Configuration must have 'widgets' section")

        widgets = config["widgets"]
        if not isinstance(widgets, list) or not widgets:
            raise ConfigurationError("'widgets' must be a non-empty list")

        for index, entry in enumerate(widgets, start=1):
            if not isinstance(entry, dict):
                raise ConfigurationError(f"Widget #{index} must be a dictionary")
            for key in ("type", "name"):
                if not isinstance(entry.get(key), str) or not entry[key]:
                    raise ConfigurationError(f"Widget #{index} requires a string '{key}'")

        settings = config.get("settings", {})
        if settings is not None and not isinstance(settings, dict):
            raise ConfigurationError("'settings' must be a dictionary")

        if settings and "fail_fast" in settings and not isinstance(settings["fail_fast"], bool):
            raise ConfigurationError("'settings.fail_fast' must be a boolean")

    def _apply_defaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply default values to configuration"""
        if not config.get("settings"):
            config["settings"] = {}
        if "fail_fast" not in config["settings"]:
            config["settings"]["fail_fast"] = False

        return config
