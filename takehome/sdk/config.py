"""Configuration management for Take Home.

Configuration lives in a single settings.json file:

- tax_year: year of the tax rules to load (default "2025")
- tax_rules_dir: directory holding <year>.yaml rule files (optional)
- defaults: calculator fields the CLI starts from (state, filing_status, ...)

Config directory resolution:
1. TAKE_HOME_CONFIG_PATH environment variable (if set)
2. ~/.config/take-home/ (XDG_CONFIG_HOME fallback)

Tax rules directory resolution:
1. TAKE_HOME_TAX_RULES_DIR environment variable (if set)
2. settings.json "tax_rules_dir" key
3. tax_rules/ shipped inside the package
"""

import json
import os
from pathlib import Path
from typing import Any, Optional


APP_NAME = "take-home"
SETTINGS_FILENAME = "settings.json"
DEFAULT_TAX_YEAR = "2025"

KNOWN_SETTINGS = ("tax_year", "tax_rules_dir", "defaults")


class ConfigError(Exception):
    """Raised when settings.json cannot be read."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. TAKE_HOME_CONFIG_PATH environment variable
    2. ~/.config/take-home/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("TAKE_HOME_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {settings_file}: {e}")

    if not isinstance(settings, dict):
        raise ConfigError(f"Expected a JSON object in {settings_file}")
    return settings


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was present."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_tax_year() -> str:
    """Get the configured tax year (defaults to DEFAULT_TAX_YEAR)."""
    return str(get_setting("tax_year", DEFAULT_TAX_YEAR))


def get_tax_rules_dir() -> Path:
    """Get the directory holding <year>.yaml tax rule files."""
    env_path = os.environ.get("TAKE_HOME_TAX_RULES_DIR")
    if env_path:
        return Path(env_path)

    custom = get_setting("tax_rules_dir")
    if custom:
        return Path(custom).expanduser()

    return Path(__file__).parent.parent / "tax_rules"


def get_input_defaults(overrides: Optional[dict] = None) -> dict:
    """Get calculator input defaults from settings, with overrides applied.

    Overrides whose value is None are ignored so unset CLI options fall
    through to the configured defaults.
    """
    defaults = dict(get_setting("defaults", {}) or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            defaults[key] = value
    return defaults
