"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[marketplace]
base_url = "https://marketplace.example.org/api/search"

[search]
default_listing = "trending"

[display]
colored_output = false
""")
    return config_path


SAMPLE_PLUGINS = [
    {
        "id": "org.jetbrains.kotlin",
        "name": "Kotlin",
        "vendor": "JetBrains",
        "version": "2.0.0",
        "bundled": True,
    },
    {
        "id": "com.example.darcula-plus",
        "name": "Darcula Plus",
        "vendor": "Example Themes",
        "version": "1.4",
        "enabled": False,
    },
    {
        "id": "com.example.db-navigator",
        "name": "Database Navigator",
        "vendor": "Example Tools",
        "version": "3.2",
        "need_update": True,
    },
    {
        "id": "com.example.legacy",
        "name": "Legacy Formatter",
        "invalid": True,
        "enabled": False,
    },
    {
        "id": "com.example.fresh",
        "name": "Fresh Install",
        "vendor": "Example Tools",
        "need_restart": True,
    },
]


@pytest.fixture
def sample_inventory(temp_dir: Path) -> Path:
    """Write an installed-plugin inventory JSON file."""
    path = temp_dir / "plugins.json"
    path.write_text(json.dumps(SAMPLE_PLUGINS, indent=2))
    return path
