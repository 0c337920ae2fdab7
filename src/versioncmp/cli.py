# SPDX-License-Identifier: MIT
"""CLI entry point for the versioncmp command."""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from .compare import compare_versions, sort_versions
from .config import CLIConfig, ConfigError
from .errors import ParseError
from .semver import Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.strict: bool = False
        self.output_format: str = "text"


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


def _version_dict(version: Version) -> dict:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease,
        "build": version.build,
    }


@click.group()
@click.version_option(package_name="versioncmp")
@click.option(
    "--strict/--loose",
    default=None,
    help="Require MAJOR.MINOR.PATCH. Defaults to $VERSIONCMP_STRICT, else loose.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit machine-readable JSON.",
)
@pass_context
def cli(ctx: Context, strict: Optional[bool], as_json: bool) -> None:
    """Parse and compare semantic version strings.

    \b
    Examples:
        versioncmp parse v1.2.3-rc.1+build.5
        versioncmp --strict cmp 1.0.0-alpha 1.0.0
        versioncmp sort 1.0.0 1.0.0-rc.1 0.9
        versioncmp check 1.2.3 1.2
    """
    try:
        config = CLIConfig.from_env()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    ctx.strict = config.strict if strict is None else strict
    ctx.output_format = "json" if as_json else config.output_format


@cli.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Parse VERSION and print its components."""
    try:
        parsed = parse_version(version, strict=ctx.strict)
    except ParseError as e:
        echo_error(e.message)
        raise SystemExit(1)

    fields = _version_dict(parsed)
    if ctx.output_format == "json":
        echo_info(json.dumps(fields))
        return

    for key, value in fields.items():
        echo_info(f"{key}: {'-' if value is None else value}")


@cli.command("cmp")
@click.argument("version1")
@click.argument("version2")
@pass_context
def cmp_command(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    try:
        result = compare_versions(version1, version2, strict=ctx.strict)
    except ParseError as e:
        echo_error(e.message)
        raise SystemExit(1)

    if ctx.output_format == "json":
        echo_info(json.dumps({"version1": version1, "version2": version2, "result": result}))
    else:
        echo_info(str(result))


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered by precedence, lowest first."""
    try:
        ordered = sort_versions(versions, strict=ctx.strict, reverse=reverse)
    except ParseError as e:
        echo_error(e.message)
        raise SystemExit(1)

    if ctx.output_format == "json":
        echo_info(json.dumps(ordered))
        return

    for version in ordered:
        echo_info(version)


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Exit non-zero if any of VERSIONS fails to parse."""
    errors: dict[str, str] = {}
    for version in versions:
        try:
            parse_version(version, strict=ctx.strict)
        except ParseError as e:
            errors[version] = e.message

    if ctx.output_format == "json":
        echo_info(json.dumps({"valid": not errors, "errors": errors}))
    elif errors:
        for message in errors.values():
            echo_error(message)
    else:
        echo_success(f"All {len(versions)} version(s) are valid")

    if errors:
        raise SystemExit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
