# config.py
# Description: TOML configuration for the spark_therapy client
#
# Imports
import copy
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import toml
#
# Third-Party Imports
from loguru import logger
#
#######################################################################################################################
#
# Constants

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "spark_therapy" / "config.toml"

CONFIG_TOML_CONTENT = """
# Configuration for the SPARK Therapy client.
# Values here override the built-in defaults.

[general]
app_title = "SPARK Therapy"
# Role preselected on the demo login form
default_login_role = "parent"

[logging]
# Overridden by SPARK_LOG_LEVEL / SPARK_LOG_FILE / SPARK_LOG_CONSOLE
log_level = "INFO"
log_filename = "spark_therapy.log"
console = false
rotation = "10 MB"
retention = "7 days"

[navigation]
# Role used when the backend reports a role with no navigator
fallback_role = "parent"
# Route the tree starts on once it is ready
initial_route = "Auth"

[theme]
# Per-role accent colors (header bar and active tab)
admin = "#FF9500"
therapist = "#34C759"
parent = "#007AFF"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

_CONFIG_CACHE: Optional[Dict[str, Any]] = None

#
# Functions:

def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from ~/.config/spark_therapy/config.toml.
    If the file doesn't exist, it's created from CONFIG_TOML_CONTENT.
    User values are merged over the built-in defaults.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info(f"Config file not found at {config_path}. Creating with default values.")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(CONFIG_TOML_CONTENT, encoding="utf-8")
            loaded_config["_first_run"] = True
        except OSError as e:
            logger.error(f"Could not create default config file {config_path}: {e}. Using internal defaults.")
    else:
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config)
            logger.info(f"Loaded config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding config file {config_path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    return _CONFIG_CACHE


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def get_cli_section(section: str) -> Dict[str, Any]:
    """A whole section as a dict (empty if missing)."""
    section_data = load_cli_config_and_ensure_existence().get(section)
    return dict(section_data) if isinstance(section_data, dict) else {}


def save_setting_to_cli_config(section: str, key: str, value: Any) -> bool:
    """
    Saves a setting to the user's TOML configuration file.

    Reads the current file, updates ``[section].key`` (dotted sections are
    nested tables) and writes it back, then reloads the cache.

    Returns:
        True if the setting was saved successfully, False otherwise.
    """
    global _CONFIG_CACHE
    config_path = DEFAULT_CONFIG_PATH
    logger.info(f"Saving setting: [{section}].{key} = {value!r}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {config_path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {config_path}. Cannot save. Error: {e}")
            return False

    table = config_data
    for part in section.split("."):
        existing = table.get(part)
        if not isinstance(existing, dict):
            existing = {}
            table[part] = existing
        table = existing
    table[key] = value

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Could not write config file {config_path}: {e}")
        return False

    _CONFIG_CACHE = None
    load_cli_config_and_ensure_existence(force_reload=True)
    return True

#
# End of config.py
#######################################################################################################################
