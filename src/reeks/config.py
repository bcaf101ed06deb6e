"""
Configuration loading and management.

This module provides tools for loading YAML configuration files and accessing
their contents in a structured way. Pipelines use it to resolve
``ConfigValue`` placeholders in stage arguments at run time.
"""

from typing import Any, Dict, Optional
import os

import yaml


class Config:
    """
    A wrapper around a dictionary for managing configuration.

    It provides a `get` method that allows accessing nested values using
    dot-notation (e.g., 'batch.size').
    """

    def __init__(self, config_data: Optional[Dict[str, Any]]):
        self._config = config_data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Access a config value using dot notation.

        Example:
            >>> config = Config({'batch': {'size': 50}})
            >>> config.get('batch.size')
            50
            >>> config.get('batch.limit', 'default_value')
            'default_value'

        :param key: The dot-separated key for the desired value.
        :param default: The value to return if the key is not found.
        :return: The configuration value or the default.
        """
        value = self._config
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    def __contains__(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def __repr__(self) -> str:
        return f"Config(config_data={self._config})"


def load_config(path: Optional[str]) -> Config:
    """
    Loads a YAML configuration file from the given path.

    If the path is None or does not exist, it returns an empty Config object.
    Malformed YAML raises ``yaml.YAMLError``.

    :param path: The path to the YAML configuration file.
    :return: A Config object with the loaded data.
    """
    if not path or not os.path.exists(path):
        return Config({})

    with open(path, "r") as f:
        config_data = yaml.safe_load(f)

    return Config(config_data)
