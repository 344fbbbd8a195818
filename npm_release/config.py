"""Configuration file loading.

Uses tomlkit to read the plugin settings from a TOML file. Settings live
in an ``[npm]`` table; a file without one is read as a flat table:

    [npm]
    tagCommit = true
    preReleaseId = "beta"
    version-args = "--no-verify"

    [npm.defaults]
    choice = "patch"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit

from .models import PluginConfig

DEFAULT_CONFIG_FILE = "npm-release.toml"
CONFIG_TABLE = "npm"


def load_toml(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a TOML file."""
    return tomlkit.parse(path.read_text())


def get_plugin_table(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Extract the plugin settings as plain Python values.

    Returns the ``[npm]`` table if present, otherwise the whole document.
    """
    data = doc.unwrap()
    table = data.get(CONFIG_TABLE)
    if isinstance(table, dict):
        return table
    return data


def load_config(path: Path | None = None) -> PluginConfig:
    """Build the plugin config from a TOML file.

    Args:
        path: Config file to read. If None, ``npm-release.toml`` in the
              current directory is used when it exists, and defaults
              otherwise.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        pydantic.ValidationError: If a setting has the wrong type.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not path.exists():
            return PluginConfig()
    return PluginConfig.model_validate(get_plugin_table(load_toml(path)))
