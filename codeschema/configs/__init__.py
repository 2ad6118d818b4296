"""
codeschema Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from codeschema.configs.logging import get_logger, setup_logging

# Paths
from codeschema.configs.paths import ensure_data_dir, get_data_path

# YAML config
from codeschema.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_language_overrides,
    load_yaml_config,
    save_yaml_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "load_language_overrides",
    "save_yaml_config",
    "create_default_config",
]
