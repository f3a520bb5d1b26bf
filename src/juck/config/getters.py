"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from juck.modules.subdomains.models import ScanConfig

from .env_loader import load_global_config, load_local_config

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_config(key: str, directory: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Local .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        directory: Directory holding the .env file (current directory if omitted)
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    local_config = load_local_config(directory)
    if key in local_config:
        return local_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def get_bool(key: str, directory: Path | None = None, default: bool = False) -> bool:
    """Read a boolean setting, accepting 1/true/yes/on and 0/false/no/off."""
    value = get_config(key, directory)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean for %s: %r", key, value)
    return default


def get_float(key: str, directory: Path | None = None, default: float = 0.0) -> float:
    """Read a positive number, falling back to *default* when malformed."""
    value = get_config(key, directory)
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid number for %s: %r", key, value)
        return default
    if number <= 0:
        logger.warning("Ignoring non-positive value for %s: %r", key, value)
        return default
    return number


def is_verbose(directory: Path | None = None) -> bool:
    """Get verbose logging flag (default: off)."""
    return get_bool("JUCK_VERBOSE", directory)


def load_scan_config(directory: Path | None = None) -> ScanConfig:
    """Build a :class:`ScanConfig` from environment, .env and global config."""
    defaults = ScanConfig()
    return ScanConfig(
        request_timeout=get_float("JUCK_REQUEST_TIMEOUT", directory, defaults.request_timeout),
        scan_timeout=get_float("JUCK_SCAN_TIMEOUT", directory, defaults.scan_timeout),
        user_agent=str(get_config("JUCK_USER_AGENT", directory, defaults.user_agent)),
        require_all_sources=get_bool(
            "JUCK_REQUIRE_ALL_SOURCES", directory, defaults.require_all_sources
        ),
        dedupe=get_bool("JUCK_DEDUPE", directory, defaults.dedupe),
    )
