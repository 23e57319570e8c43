"""CLI interface for Staticfile.

Command-line tool for serving a directory and inspecting path resolution.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from staticfile.chain import strip_prefix
from staticfile.config import Config
from staticfile.core.files import is_regular_file
from staticfile.core.resolve import (
    DeclineIndex,
    RedirectToDirectory,
    ServeIndex,
    candidate_path,
    has_traversal,
    index_path,
    plan_index,
)
from staticfile.core.types import DeclineReason


@click.group()
def cli() -> None:
    """Staticfile - static file serving with index and redirect fallback."""


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover staticfile.toml)",
)
@click.option(
    "--root",
    "-r",
    "root_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory to serve files from (overrides config)",
)
@click.option(
    "--prefix",
    default=None,
    help="URL prefix to mount the files under (overrides config)",
)
@click.option(
    "--favicon",
    "favicon_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="File to serve for /favicon requests (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (trace every served file)",
)
def serve(
    config_path: Path | None,
    root_dir: Path | None,
    prefix: str | None,
    favicon_path: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the static file server."""
    from staticfile.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        root_dir=root_dir,
        prefix=prefix,
        favicon_path=favicon_path,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Root directory: {config.static.root_dir}")
    if config.static.prefix:
        click.echo(f"Mounted at: {config.static.prefix}")
    if config.favicon is not None:
        click.echo(f"Favicon: {config.favicon.path}")
    if not config.static.root_dir.is_dir():
        click.echo(
            click.style(
                f"Warning: root directory {config.static.root_dir} does not exist",
                fg="yellow",
            ),
            err=True,
        )

    run_server(config)


@cli.command()
@click.argument("url_path")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover staticfile.toml)",
)
@click.option(
    "--root",
    "-r",
    "root_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory to resolve against (overrides config)",
)
@click.option(
    "--prefix",
    default=None,
    help="URL prefix the files are mounted under (overrides config)",
)
def resolve(
    url_path: str,
    config_path: Path | None,
    root_dir: Path | None,
    prefix: str | None,
) -> None:
    """Show how URL_PATH would be resolved, without starting a server.

    Prints one of "file <path>", "index <path>", "redirect <location>" or
    "decline <reason>". Exits with status 1 on decline.
    """
    config = _load_config(config_path).with_overrides(root_dir=root_dir, prefix=prefix)
    mount = config.static.prefix

    path = strip_prefix(mount, url_path)
    if path is None:
        _decline(DeclineReason.NO_MATCH)
    original_url = url_path if mount else None

    if has_traversal(path):
        _decline(DeclineReason.TRAVERSAL)

    candidate = candidate_path(config.static.root_dir, path)
    if not path.endswith("/") and is_regular_file(candidate):
        click.echo(f"file {candidate}")
        return

    index = index_path(candidate)
    match plan_index(path, is_regular_file(index), original_url):
        case DeclineIndex():
            _decline(DeclineReason.NOT_FOUND)
        case ServeIndex():
            click.echo(f"index {index}")
        case RedirectToDirectory(location=location):
            click.echo(f"redirect {location}")


def _decline(reason: DeclineReason) -> NoReturn:
    click.echo(f"decline {reason.value}")
    sys.exit(1)


if __name__ == "__main__":
    cli()
