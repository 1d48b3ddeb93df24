# file: src/module4_symbol/config.py

"""
Configuration loading for command-line use.

The symbol builder itself is configured through its setters; this module
only reads YAML files into the dictionary accepted by PDF417.from_config().
"""

import copy
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "symbol": {
            "columns": 6,
            "security_level": 2,
        },
        "output": {
            "format": "json",
            "encoding": None,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Values missing from the file are taken from the defaults.

    Args:
        config_path: Path to config file. If None, uses the packaged
                     default_config.yaml.

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file cannot be read or is not a YAML mapping
    """
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return get_default_config()
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}"
        )

    return _merge(get_default_config(), config)
