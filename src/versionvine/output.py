"""Output formatting for derived versions.

Renders the composed version into the result record, and the record as JSON,
env-file lines or a rich table.
"""

from __future__ import annotations

import json

import semver
from rich.console import Console
from rich.table import Table

from versionvine.models import VersionContext, VersionResult


def container_tag(version: semver.Version) -> str:
    """Render a version as a container-image-safe tag.

    Image tags cannot contain '+', so every component is joined with '.':
    major, minor, patch, then each pre-release identifier, then each build
    identifier. '0.4.0-beta.10+56c1976' becomes '0.4.0.beta.10.56c1976'.
    """
    parts = [str(version.major), str(version.minor), str(version.patch)]
    if version.prerelease:
        parts.extend(version.prerelease.split("."))
    if version.build:
        parts.extend(version.build.split("."))
    return ".".join(parts)


def format_result(version: semver.Version, context: VersionContext) -> VersionResult:
    """Build the result record for a composed version.

    Args:
        version: The composed version.
        context: Facts of the current run.

    Returns:
        The result record.
    """
    return VersionResult(
        app_version=str(version),
        container_tag=container_tag(version),
        git_branch=context.branch.name,
        git_rev=context.commit_hash,
        rev_count=str(context.rev_count),
    )


def to_json(result: VersionResult) -> str:
    """Convert the result record to pretty-printed JSON."""
    return json.dumps(result.model_dump(), indent=2)


def to_env(result: VersionResult) -> str:
    """Convert the result record to KEY=value lines.

    Suitable for appending to $GITHUB_ENV or sourcing from a shell.
    """
    return "\n".join(f"{key.upper()}={value}" for key, value in result.model_dump().items())


def print_table(result: VersionResult, console: Console) -> None:
    """Output the result record as a formatted table."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value", style="bold")

    for key, value in result.model_dump().items():
        table.add_row(key, value)

    console.print(table)
