"""Command-line interface for version-vine."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from versionvine import __version__
from versionvine.config import ENV_PREFIX, VersionConfig
from versionvine.engine import derive_version
from versionvine.errors import VersionVineError
from versionvine.git import GitClient
from versionvine.output import print_table, to_env, to_json

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name="version-vine")
@click.option(
    "--app-name",
    "-a",
    envvar=f"{ENV_PREFIX}APP_NAME",
    default=None,
    help="Application name for monorepos. Tags and release branches must then be "
    "prefixed with it, e.g. tag 'app-1.0.0', branch 'release/app-1.0.0'.",
)
@click.option(
    "--build-number",
    "-b",
    envvar=f"{ENV_PREFIX}BUILD_NUMBER",
    type=click.IntRange(min=0),
    default=None,
    help="Build number for the pre-release counter (default: git commit count "
    "since the last tag)",
)
@click.option(
    "--skip-fetch",
    "-s",
    envvar=f"{ENV_PREFIX}SKIP_FETCH",
    is_flag=True,
    help="Skip fetching tags (faster for local runs, may be outdated)",
)
@click.option(
    "--require-main-tag",
    envvar=f"{ENV_PREFIX}REQUIRE_MAIN_TAG",
    is_flag=True,
    help="On main, fail unless HEAD carries the resolved release tag",
)
@click.option(
    "--repo",
    "-C",
    "repo_path",
    envvar=f"{ENV_PREFIX}REPO",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository directory (default: current directory)",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["json", "text", "env"]),
    default="json",
    help="Output format",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr")
def main(
    app_name: str | None,
    build_number: int | None,
    skip_fetch: bool,
    require_main_tag: bool,
    repo_path: Path | None,
    format: str,
    verbose: bool,
) -> None:
    """version-vine - Derive a SemVer version from git-flow branches and tags."""
    configure_logging(verbose)

    try:
        config = VersionConfig(
            app_name=app_name,
            build_number=build_number,
            skip_fetch=skip_fetch,
            require_main_tag=require_main_tag,
            repo_path=repo_path,
        )
    except ValidationError as e:
        raise click.BadParameter(e.errors()[0]["msg"], param_hint="'--app-name'") from e

    try:
        result = derive_version(config, GitClient(repo_path=config.repo_path))
    except VersionVineError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(130)

    if format == "text":
        print_table(result, console)
    elif format == "env":
        click.echo(to_env(result))
    else:
        click.echo(to_json(result))


if __name__ == "__main__":
    main()
