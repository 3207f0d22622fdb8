# SPDX-License-Identifier: MIT
"""CLI entry point for the version-stamp command."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import Ordering, compare_versions, sort_versions
from .config import ConfigError, StampConfig, load_config
from .semver import FormatError, VersionStamp, join_elements, parse_version
from .xml_reader import from_xml

_SYMBOLS = {Ordering.LESS: "<", Ordering.EQUAL: "==", Ordering.GREATER: ">"}


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[StampConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> StampConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="version-stamp")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse and compare semantic version stamps.

    \b
    Examples:
        version-stamp parse 1.0.0-rc.1+build.1.0
        version-stamp compare 1.0.0-rc.1 1.0.0
        version-stamp sort 1.0.1 1.0.0 1.0.0-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


def _load_config(ctx: Context) -> StampConfig:
    try:
        return ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)


def _parse(version: str, config: StampConfig) -> VersionStamp:
    try:
        return parse_version(version, allow_leading_zeros=config.allow_leading_zeros)
    except FormatError as e:
        echo_error(e.message)
        raise SystemExit(1)


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the attribute set as JSON.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its fields."""
    config = _load_config(ctx)
    stamp = _parse(version, config)

    if as_json:
        echo_info(json.dumps(stamp.to_dict(), indent=2))
        return

    echo_info(f"Major: {stamp.major}")
    echo_info(f"Minor: {stamp.minor}")
    echo_info(f"Patch: {stamp.patch}")
    if stamp.pre_release_id is not None:
        echo_info(f"Pre-release: {join_elements(stamp.pre_release_id)}")
    if stamp.build_id is not None:
        echo_info(f"Build: {join_elements(stamp.build_id)}")
    if ctx.verbose:
        echo_info(f"Canonical: {stamp}")


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid version stamp."""
    config = _load_config(ctx)
    failed = 0
    for version in versions:
        try:
            parse_version(version, allow_leading_zeros=config.allow_leading_zeros)
        except FormatError as e:
            failed += 1
            echo_error(e.message)
            if ctx.verbose:
                echo_info(f"  rule: {e.rule.value}")
            continue
        echo_success(f"{version} is valid")

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@click.option("--ignore-build", is_flag=True, help="Ignore build identifiers.")
@pass_context
def compare(ctx: Context, version1: str, version2: str, ignore_build: bool) -> None:
    """Compare VERSION1 with VERSION2."""
    config = _load_config(ctx)
    v1 = _parse(version1, config)
    v2 = _parse(version2, config)
    include_build = config.compare_build and not ignore_build

    result = compare_versions(v1, v2, include_build=include_build)
    echo_info(f"{v1} {_SYMBOLS[result]} {v2}")
    if ctx.verbose and not include_build:
        echo_info("Build identifiers were ignored.")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Highest precedence first.")
@click.option("--ignore-build", is_flag=True, help="Ignore build identifiers.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool, ignore_build: bool) -> None:
    """Print each VERSION in order of precedence."""
    config = _load_config(ctx)
    stamps = [_parse(v, config) for v in versions]
    for stamp in sort_versions(
        stamps, reverse=reverse, include_build=config.compare_build and not ignore_build
    ):
        echo_info(str(stamp))


@cli.command(name="from-xml")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@pass_context
def from_xml_command(ctx: Context, path: Path) -> None:
    """Read a <version-stamp> element from PATH and print the version."""
    config = _load_config(ctx)
    try:
        stamp = from_xml(path, allow_leading_zeros=config.allow_leading_zeros)
    except FormatError as e:
        echo_error(e.message)
        raise SystemExit(1)
    if ctx.verbose:
        echo_info(f"Read {path}")
    echo_info(str(stamp))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
