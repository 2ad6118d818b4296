"""
codeschema YAML Configuration

Loading, saving, and defaults for ~/.codeschema/config.yaml.
"""

from pathlib import Path
from typing import Optional

import yaml

from codeschema.configs.logging import get_logger
from codeschema.configs.paths import ensure_data_dir, get_data_path
from codeschema.exceptions import ConfigurationError

logger = get_logger("configs.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# codeschema Configuration
# Edit this file to customize extraction behavior.

# Enable debug logging
debug: false

# Per-language overrides of the built-in node-type configuration.
# Keys are language ids (java, python, csharp, javascript, typescript);
# values override LanguageConfig fields. Lists replace the defaults.
languages:
  # java:
  #   field_types:
  #     - field_declaration
  #     - constant_declaration
  # typescript:
  #   class_types:
  #     - class_declaration
  #     - abstract_class_declaration
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config(path: Optional[Path] = None) -> dict:
    """
    Load configuration from ~/.codeschema/config.yaml.

    Args:
        path: Optional explicit config file path

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file exists but is not valid YAML
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}", {"error": str(e)}
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {config_path}",
            {"found": type(content).__name__},
        )
    return content


def load_language_overrides(path: Optional[Path] = None) -> dict[str, dict]:
    """
    Load per-language LanguageConfig overrides from the config file.

    Args:
        path: Optional explicit config file path

    Returns:
        Mapping of language id to field overrides (empty when none configured)
    """
    config = load_yaml_config(path)
    languages = config.get("languages") or {}
    if not isinstance(languages, dict):
        raise ConfigurationError(
            "'languages' must be a mapping of language id to overrides",
            {"found": type(languages).__name__},
        )

    overrides = {}
    for language, fields in languages.items():
        if fields is None:
            continue
        if not isinstance(fields, dict):
            raise ConfigurationError(
                f"Overrides for '{language}' must be a mapping",
                {"found": type(fields).__name__},
            )
        overrides[str(language).lower()] = fields

    logger.debug(f"Loaded overrides for {len(overrides)} language(s)")
    return overrides


def save_yaml_config(config: dict, path: Optional[Path] = None) -> Path:
    """
    Save configuration to ~/.codeschema/config.yaml.

    Args:
        config: Configuration dictionary to save
        path: Optional explicit config file path

    Returns:
        Path the configuration was written to
    """
    if path is None:
        ensure_data_dir()
        path = get_config_path()
    else:
        path.parent.mkdir(parents=True, exist_ok=True)

    content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
    path.write_text(content)
    return path


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
