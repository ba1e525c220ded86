"""Exception hierarchy for plugin-query.

The query parsing core never raises: malformed queries degrade to plain
search text. These exceptions cover the layers around it.
"""

from pathlib import Path


class PluginQueryError(Exception):
    """Base exception for all plugin-query errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all plugin-query errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(PluginQueryError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Inventory Errors
class InventoryError(PluginQueryError):
    """Installed-plugin inventory could not be read."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid plugin inventory at {path}: {detail}")
