"""
Configuration management for juck.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Local .env file (current directory)
3. Global config file (~/.juck/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    global_config_path,
    load_env_file,
    load_global_config,
    load_local_config,
)
from .getters import (
    get_bool,
    get_config,
    get_float,
    is_verbose,
    load_scan_config,
)

__all__ = [
    # env_loader
    "global_config_path",
    "load_env_file",
    "load_global_config",
    "load_local_config",
    # getters
    "get_bool",
    "get_config",
    "get_float",
    "is_verbose",
    "load_scan_config",
]
