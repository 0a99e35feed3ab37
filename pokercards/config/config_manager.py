"""
Configuration manager for pokercards.

This module provides a centralized configuration system that loads settings
from configuration files, environment variables and command-line arguments,
layered over built-in defaults.
"""

import argparse
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from pokercards.utils.logging import setup_logging

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager for pokercards.

    Attributes:
        config (Dict[str, Any]): Current configuration.
        config_paths (List[str]): Directories searched for config.yaml / config.json.
    """

    def __init__(self, config_paths: Optional[List[str]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_paths (Optional[List[str]], optional): Directories to search for
                configuration files. Defaults to ./config and ~/.pokercards.
        """
        self.config = {}

        if config_paths is None:
            self.config_paths = ["./config", "~/.pokercards"]
        else:
            self.config_paths = list(config_paths)

        env_config_path = os.environ.get("POKERCARDS_CONFIG_PATH")
        if env_config_path:
            self.config_paths.append(env_config_path)

        self._load_defaults()

    def _load_defaults(self):
        """Load default configuration values."""
        self.config["general"] = {
            "log_level": "INFO",  # Logging level
            "log_file": None,     # Log file path (None = stdout only)
        }

    def load_from_file(self, filepath: str) -> bool:
        """
        Load configuration from a YAML or JSON file.

        Args:
            filepath (str): Path to the configuration file.

        Returns:
            bool: Whether the file was successfully loaded.
        """
        path = Path(filepath).expanduser().resolve()

        if not path.exists():
            logger.warning(f"Configuration file not found: {filepath}")
            return False

        ext = path.suffix.lower()
        try:
            if ext in ['.yaml', '.yml']:
                with open(path, 'r') as f:
                    config_data = yaml.safe_load(f)
            elif ext in ['.json']:
                with open(path, 'r') as f:
                    config_data = json.load(f)
            else:
                logger.error(f"Unsupported configuration file format: {ext}")
                return False
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading configuration from {filepath}: {e}")
            return False

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            logger.error(f"Configuration in {filepath} must be a mapping, got {type(config_data).__name__}")
            return False

        self._update_config(config_data)
        logger.info(f"Loaded configuration from {filepath}")
        return True

    def load_from_env(self, prefix: str = "POKERCARDS_"):
        """
        Load configuration from environment variables.

        ``POKERCARDS_GENERAL__LOG_LEVEL=DEBUG`` sets ``general.log_level``.
        Values are decoded as JSON where possible.

        Args:
            prefix (str, optional): Variable name prefix. Defaults to "POKERCARDS_".
        """
        for key, value in os.environ.items():
            if not key.startswith(prefix) or key == "POKERCARDS_CONFIG_PATH":
                continue
            config_key = key[len(prefix):].lower()
            parts = config_key.split("__")
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                if value.lower() == "true":
                    parsed_value = True
                elif value.lower() == "false":
                    parsed_value = False
                elif value.isdigit():
                    parsed_value = int(value)
                elif value.replace(".", "", 1).isdigit():
                    parsed_value = float(value)
                else:
                    parsed_value = value
            self._set_config_value(parts, parsed_value)

        logger.debug(f"Loaded configuration from environment variables with prefix {prefix}")

    def load_from_args(self, args: Optional[List[str]] = None):
        """
        Load configuration from command-line arguments.

        Arguments this manager does not know are left alone for the caller.

        Args:
            args (Optional[List[str]], optional): Command-line arguments. Defaults to None.
        """
        parser = argparse.ArgumentParser(description="PokerCards Configuration", add_help=False)
        parser.add_argument("--config", "-c", help="Path to configuration file")
        parser.add_argument("--log-level", help="Logging level")
        parser.add_argument("--log-file", help="Log file path")

        parsed_args, _ = parser.parse_known_args(args)

        if parsed_args.config:
            self.load_from_file(parsed_args.config)

        if parsed_args.log_level:
            self.set("general.log_level", parsed_args.log_level)

        if parsed_args.log_file:
            self.set("general.log_file", parsed_args.log_file)

        logger.debug("Loaded configuration from command-line arguments")

    def load(self):
        """
        Load configuration from files and environment variables.

        Later sources override earlier ones: ./config, then ~/.pokercards, then
        the directory named by POKERCARDS_CONFIG_PATH, then the environment.
        Command-line arguments are only read through an explicit call to
        :meth:`load_from_args`.
        """
        for path in self.config_paths:
            expanded_path = os.path.expanduser(path)

            yaml_path = os.path.join(expanded_path, "config.yaml")
            if os.path.exists(yaml_path):
                self.load_from_file(yaml_path)

            json_path = os.path.join(expanded_path, "config.json")
            if os.path.exists(json_path):
                self.load_from_file(json_path)

        self.load_from_env()

    def apply_logging(self) -> logging.Logger:
        """
        Configure the package logger from ``general.log_level`` and ``general.log_file``.

        Returns:
            logging.Logger: The configured logger.
        """
        level = self.get("general.log_level", "INFO")
        if isinstance(level, int) and not isinstance(level, bool):
            return setup_logging(self.get("general.log_file"), level)

        level_name = str(level).upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            logger.warning(f"Unknown log level {level_name!r}, using INFO")
            level = logging.INFO
        return setup_logging(self.get("general.log_file"), level)

    def _update_config(self, config_data: Dict[str, Any]):
        """
        Merge new data into the configuration.

        Args:
            config_data (Dict[str, Any]): New configuration data.
        """
        def update_dict(target, source):
            for key, value in source.items():
                if isinstance(value, dict) and key in target and isinstance(target[key], dict):
                    update_dict(target[key], value)
                else:
                    target[key] = value

        update_dict(self.config, config_data)

    def _set_config_value(self, keys: List[str], value: Any):
        current = self.config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value by key path.

        Args:
            key_path (str): Path to the configuration value, using dots for hierarchy.
            default (Any, optional): Default value if key not found. Defaults to None.

        Returns:
            Any: Configuration value.
        """
        current = self.config

        for key in key_path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def set(self, key_path: str, value: Any):
        """Set a configuration value by dotted key path."""
        self._set_config_value(key_path.split('.'), value)

    def save_to_file(self, filepath: str, format: str = "yaml") -> bool:
        """
        Save current configuration to a file.

        Args:
            filepath (str): Path to the output file.
            format (str, optional): Output format ('yaml' or 'json'). Defaults to "yaml".

        Returns:
            bool: Whether the file was successfully saved.
        """
        if format.lower() not in ("yaml", "json"):
            logger.error(f"Unsupported output format: {format}")
            return False

        path = Path(filepath).expanduser().resolve()
        try:
            os.makedirs(path.parent, exist_ok=True)
            with open(path, 'w') as f:
                if format.lower() == "yaml":
                    yaml.safe_dump(self.config, f, default_flow_style=False)
                else:
                    json.dump(self.config, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving configuration to {filepath}: {e}")
            return False

        logger.info(f"Saved configuration to {filepath}")
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the configuration."""
        return copy.deepcopy(self.config)


# Singleton instance
_instance = None


def get_config() -> ConfigManager:
    """
    Get the shared configuration manager, loading it on first use.

    Returns:
        ConfigManager: Configuration manager instance.
    """
    global _instance
    if _instance is None:
        _instance = ConfigManager()
        _instance.load()
    return _instance
