# SPDX-License-Identifier: MIT
"""Project configuration for version stamp tooling.

Settings are read from the ``[tool.version-stamp]`` table of pyproject.toml:

    [tool.version-stamp]
    compare-build = true
    allow-leading-zeros = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_TABLE = "version-stamp"

# pyproject key -> StampConfig attribute
_KEYS = {
    "compare-build": "compare_build",
    "allow-leading-zeros": "allow_leading_zeros",
}


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


@dataclass
class StampConfig:
    """Configuration for parsing and comparing version stamps.

    Attributes:
        compare_build: Let the build identifier break precedence ties
        allow_leading_zeros: Accept version cores such as ``01.2.3``
    """

    compare_build: bool = True
    allow_leading_zeros: bool = True

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "StampConfig":
        """Create StampConfig from a pyproject.toml file.

        Raises:
            ConfigError: If the file is not valid TOML or the table is invalid
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "StampConfig":
        """Create StampConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If the table has unknown keys or non-boolean values
        """
        table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        unknown = sorted(set(table) - set(_KEYS))
        if unknown:
            raise ConfigError(f"Unknown keys in [tool.{TOOL_TABLE}]: {', '.join(unknown)}")

        values: dict[str, bool] = {}
        for key, attr in _KEYS.items():
            if key not in table:
                continue
            if not isinstance(table[key], bool):
                raise ConfigError(
                    f"[tool.{TOOL_TABLE}] {key} must be true or false, got {table[key]!r}"
                )
            values[attr] = table[key]

        return cls(**values)


def find_project_root(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start_dir`` with a pyproject.toml."""
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory
    return None


def load_config(project_dir: Optional[Path] = None) -> StampConfig:
    """Load configuration for a project, falling back to defaults.

    Raises:
        ConfigError: If a pyproject.toml is found but invalid
    """
    root = find_project_root(project_dir)
    if root is None:
        return StampConfig()
    return StampConfig.from_pyproject(root / "pyproject.toml")
