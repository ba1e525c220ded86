"""Configuration management for plugin-query."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from plugin_query.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from plugin_query.marketplace import DEFAULT_MARKETPLACE_URL

LISTINGS: tuple[str, ...] = ("trending", "installed")


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "plugin-query" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        marketplace_url: Marketplace search endpoint that trending queries
            are appended to.
        default_listing: Listing used by ``parse`` when none is given
            (``trending`` or ``installed``).
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    marketplace_url: str = DEFAULT_MARKETPLACE_URL
    default_listing: str = "trending"
    colored_output: bool = True
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.

        Raises:
            ConfigValidationError: If a critical validation fails.
        """
        warnings: list[str] = []

        if self.default_listing not in LISTINGS:
            raise ConfigValidationError(
                "search.default_listing",
                self.default_listing,
                f"must be one of: {', '.join(LISTINGS)}",
            )

        if not self.marketplace_url.startswith(("http://", "https://")):
            warnings.append(f"Marketplace URL is not an http(s) URL: {self.marketplace_url}")

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax
            or cannot be read.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: plugin-query init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    # Load from file
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e
    except OSError as e:
        raise ConfigParseError(config_path, e.strerror or str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section, which must be a TOML table when present."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigValidationError(name, section, "must be a table")
    return section


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [marketplace] section
    marketplace = _section(data, "marketplace")
    if "base_url" in marketplace:
        value = marketplace["base_url"]
        if not isinstance(value, str) or not value:
            raise ConfigValidationError("marketplace.base_url", value, "must be a non-empty string")
        config.marketplace_url = value

    # Parse [search] section
    search = _section(data, "search")
    if "default_listing" in search:
        value = search["default_listing"]
        if not isinstance(value, str):
            raise ConfigValidationError("search.default_listing", value, "must be a string")
        config.default_listing = value

    # Parse [display] section
    display = _section(data, "display")
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    # Ensure directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "marketplace": {
            "base_url": config.marketplace_url,
        },
        "search": {
            "default_listing": config.default_listing,
        },
        "display": {
            "colored_output": config.colored_output,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
