# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for version stamp tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a [tool.version-stamp] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.version-stamp]
compare-build = false
allow-leading-zeros = false
"""
    )
    return project_dir


@pytest.fixture
def stamp_xml(tmp_path: Path) -> Path:
    """Write a version-stamp XML document to disk."""
    path = tmp_path / "version.xml"
    path.write_text(
        "<version-stamp major='1' minor='0' patch='0' preReleaseId='rc.2' buildId='build.1.2'/>"
    )
    return path
