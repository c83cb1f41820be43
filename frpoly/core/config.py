"""YAML settings for the operator-construction stage.

The evaluators themselves take plain arguments; this module only reads the
settings file a caller uses to decide which scheme, order and filter to
build tables for.

Example file::

    fr:
      scheme: HU
      order: 3
    filter:
      exponent: 8
"""
import os

import yaml


def load_config(config_path):
    """Load configuration from YAML file.

    Args:
        config_path: Path to a YAML file.

    Returns:
        Parsed configuration as a dict. An empty file gives an empty dict.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def get_parameter(config, parameter_path, default=None):
    """
    Get a parameter from the config using dot notation.
    Example: get_parameter(config, "fr.order", 3)
    """
    parts = parameter_path.split('.')
    current = config

    try:
        for part in parts:
            current = current[part]
        return current
    except (KeyError, TypeError):
        return default
