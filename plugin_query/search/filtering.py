"""Filter an inventory of installed plugins with an InstalledQuery."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plugin_query.exceptions import InventoryError
from plugin_query.search.installed import FLAG_NAMES, InstalledQuery


@dataclass
class PluginState:
    """State of one installed plugin as shown in the installed listing."""

    id: str
    name: str
    vendor: str | None = None
    version: str | None = None
    enabled: bool = True
    bundled: bool = False
    invalid: bool = False
    need_update: bool = False
    deleted: bool = False
    need_restart: bool = False


def _text_matches(plugin: PluginState, text: str) -> bool:
    """Case-insensitive substring match against name, id and vendor."""
    needle = text.lower()
    haystacks = (plugin.name, plugin.id, plugin.vendor or "")
    return any(needle in haystack.lower() for haystack in haystacks)


def matches(plugin: PluginState, query: InstalledQuery) -> bool:
    """Check a plugin against every constraint of the query."""
    for name in FLAG_NAMES:
        expected = getattr(query, name)
        if expected is not None and getattr(plugin, name) != expected:
            return False

    if query.search_query is not None and not _text_matches(plugin, query.search_query):
        return False
    return True


def filter_installed(
    plugins: Iterable[PluginState],
    query: InstalledQuery,
) -> list[PluginState]:
    """Return the plugins matching the query, in input order."""
    return [plugin for plugin in plugins if matches(plugin, query)]


def _parse_plugin(entry: Any, index: int, path: Path) -> PluginState:
    """Build a PluginState from one inventory entry."""
    if not isinstance(entry, dict):
        raise InventoryError(path, f"entry {index} is not an object")

    plugin_id = entry.get("id")
    if not isinstance(plugin_id, str) or not plugin_id:
        raise InventoryError(path, f"entry {index} has no string 'id'")

    name = entry.get("name", plugin_id)
    if not isinstance(name, str):
        raise InventoryError(path, f"entry {index}: 'name' must be a string")

    for key in ("vendor", "version"):
        value = entry.get(key)
        if value is not None and not isinstance(value, str):
            raise InventoryError(path, f"entry {index}: '{key}' must be a string")

    flags: dict[str, bool] = {}
    for flag in FLAG_NAMES:
        if flag not in entry:
            continue
        value = entry[flag]
        if not isinstance(value, bool):
            raise InventoryError(path, f"entry {index}: '{flag}' must be a boolean")
        flags[flag] = value

    return PluginState(
        id=plugin_id,
        name=name,
        vendor=entry.get("vendor"),
        version=entry.get("version"),
        **flags,
    )


def load_inventory(path: Path) -> list[PluginState]:
    """Load installed plugin states from a JSON file.

    The file holds a JSON array of objects with at least an ``id`` key.
    Missing flags take the PluginState defaults.

    Raises:
        InventoryError: If the file cannot be read or is malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InventoryError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise InventoryError(path, f"not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise InventoryError(path, "top level must be a JSON array")

    return [_parse_plugin(entry, index, path) for index, entry in enumerate(data)]
