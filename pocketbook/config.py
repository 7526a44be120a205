"""Configuration file management for pocketbook."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_SYMBOL = "$"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pocketbook" / "config.toml"


def default_config() -> dict[str, Any]:
    return {"currency_symbol": DEFAULT_CURRENCY_SYMBOL}


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
    """
    config = default_config()
    try:
        config.update(load_config(config_path))
    except FileNotFoundError:
        logger.debug("No config file, using defaults")
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_currency_symbol(config: dict[str, Any]) -> str:
    return str(config.get("currency_symbol") or DEFAULT_CURRENCY_SYMBOL)


def get_database_path(config: dict[str, Any]) -> Path | None:
    """Database path override from config, if any."""
    raw = config.get("database_path")
    if not raw:
        return None
    return Path(raw).expanduser()
