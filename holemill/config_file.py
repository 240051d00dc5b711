"""Defaults file loading.

The defaults file holds one ``key = value`` pair per line. ``#`` starts a
comment and blank lines are ignored. Values seed the interactive prompts.
"""
import os
from typing import Dict, Optional, Sequence

from dotenv import dotenv_values


class ConfigError(Exception):
    """Raised when a configuration resource is missing, unreadable or invalid."""
    pass


def load_defaults(file_path: str) -> Dict[str, str]:
    """
    Read the defaults file.

    Args:
        file_path: Path to the defaults file

    Returns:
        Dict of key to raw string value (keys are lowercased)

    Raises:
        ConfigError: If the file does not exist or cannot be read
    """
    if not os.path.isfile(file_path):
        raise ConfigError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            raw = dotenv_values(stream=f)
    except OSError as e:
        raise ConfigError(f"Error reading configuration file {file_path}: {str(e)}")

    defaults = {}
    for key, value in raw.items():
        if value is None:
            continue
        defaults[key.lower()] = value.strip()
    return defaults


def get_float(defaults: Dict[str, str], key: str, fallback: Optional[float] = None) -> Optional[float]:
    """
    Read a float default.

    Raises:
        ConfigError: If the value is present but not a number
    """
    value = defaults.get(key)
    if value is None or value == '':
        return fallback
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"Configuration value '{key}' must be a number, got '{value}'")


def get_int(defaults: Dict[str, str], key: str, fallback: Optional[int] = None) -> Optional[int]:
    """
    Read an integer default.

    Raises:
        ConfigError: If the value is present but not an integer
    """
    value = defaults.get(key)
    if value is None or value == '':
        return fallback
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"Configuration value '{key}' must be an integer, got '{value}'")


def get_choice(
    defaults: Dict[str, str],
    key: str,
    choices: Sequence[str],
    fallback: Optional[str] = None
) -> Optional[str]:
    """
    Read a default restricted to a set of choices (case insensitive).

    Raises:
        ConfigError: If the value is not one of the choices
    """
    value = defaults.get(key)
    if value is None or value == '':
        return fallback
    value = value.lower()
    if value not in choices:
        raise ConfigError(
            f"Configuration value '{key}' must be one of {', '.join(choices)}, got '{value}'"
        )
    return value
