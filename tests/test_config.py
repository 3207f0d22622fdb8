# SPDX-License-Identifier: MIT
"""Tests for pyproject.toml configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from version_stamp.config import (
    ConfigError,
    StampConfig,
    find_project_root,
    load_config,
)


class TestStampConfig:
    """Tests for StampConfig construction."""

    def test_defaults(self):
        config = StampConfig()
        assert config.compare_build is True
        assert config.allow_leading_zeros is True

    def test_from_pyproject_dict(self):
        config = StampConfig.from_pyproject_dict(
            {"tool": {"version-stamp": {"compare-build": False, "allow-leading-zeros": False}}}
        )
        assert config.compare_build is False
        assert config.allow_leading_zeros is False

    def test_missing_table_uses_defaults(self):
        assert StampConfig.from_pyproject_dict({"project": {"name": "x"}}) == StampConfig()

    def test_partial_table(self):
        config = StampConfig.from_pyproject_dict({"tool": {"version-stamp": {"compare-build": False}}})
        assert config.compare_build is False
        assert config.allow_leading_zeros is True

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="ignore-build"):
            StampConfig.from_pyproject_dict({"tool": {"version-stamp": {"ignore-build": True}}})

    def test_non_boolean_value(self):
        with pytest.raises(ConfigError, match="compare-build"):
            StampConfig.from_pyproject_dict({"tool": {"version-stamp": {"compare-build": "no"}}})

    def test_table_not_a_table(self):
        with pytest.raises(ConfigError):
            StampConfig.from_pyproject_dict({"tool": {"version-stamp": "strict"}})

    def test_from_pyproject(self, temp_project: Path):
        config = StampConfig.from_pyproject(temp_project / "pyproject.toml")
        assert config == StampConfig(compare_build=False, allow_leading_zeros=False)

    def test_from_pyproject_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            StampConfig.from_pyproject(tmp_path / "pyproject.toml")

    def test_from_pyproject_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.version-stamp\ncompare-build = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            StampConfig.from_pyproject(path)


class TestLoadConfig:
    """Tests for project discovery."""

    def test_find_project_root_from_subdirectory(self, temp_project: Path):
        subdir = temp_project / "src" / "pkg"
        subdir.mkdir(parents=True)
        assert find_project_root(subdir) == temp_project.resolve()

    def test_load_config(self, temp_project: Path):
        assert load_config(temp_project).compare_build is False
