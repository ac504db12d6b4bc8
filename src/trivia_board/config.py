"""
Settings loading for the trivia board.

Settings come from an optional JSON file merged section by section over the
built-in defaults in ``constants.DEFAULT_SETTINGS``.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from .constants import DEFAULT_PATHS, DEFAULT_SETTINGS
from .errors import ConfigError

logger = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    """Return a fresh copy of the built-in settings."""
    return copy.deepcopy(DEFAULT_SETTINGS)


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file, falling back to defaults.

    Args:
        config_path: Path to the settings file. A missing file is not an error.

    Returns:
        Dictionary with 'catalog', 'board' and 'logging' sections

    Raises:
        ConfigError: If the file exists but cannot be read or parsed
    """
    settings = default_settings()
    path = Path(config_path or DEFAULT_PATHS['config_file'])

    if not path.exists():
        logger.debug(f"Settings file {path} not found, using defaults")
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")

    for section, values in overrides.items():
        if section not in settings:
            logger.warning(f"Ignoring unknown settings section '{section}' in {path}")
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Settings section '{section}' in {path} must be an object")
        settings[section].update(values)

    logger.debug(f"Loaded settings from {path}")
    return settings
