"""
Configuration package for pokercards.

This package loads settings from configuration files and environment
variables, with optional command-line overrides.
"""

from pokercards.config.config_manager import ConfigManager, get_config

__all__ = ["ConfigManager", "get_config"]
