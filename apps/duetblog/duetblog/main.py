"""duetblog CLI Main Entry Point

A blog rendered twice per request: once as HTML, once as a wire tree
the client can rebuild the page from.

Usage:
    duetblog serve                      # serve ./posts on 127.0.0.1:3000
    duetblog serve -p 8000 --posts-dir content
    duetblog render /hello-world        # print a page's HTML
    duetblog render / --wire            # print the index wire tree
    duetblog -v ...                     # verbose logging
    duetblog --version                  # show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import render_command, serve_command
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"duetblog {__version__}")
        raise typer.Exit()


@typer_app.callback()
def cli(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Serve or render the blog."""
    setup_logging(verbose)


@typer_app.command()
def serve(
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to duetblog.yaml."
    ),
    posts_dir: Optional[Path] = typer.Option(
        None, "--posts-dir", help="Directory holding the posts."
    ),
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind."),
    port: Optional[int] = typer.Option(None, "-p", "--port", help="Port to bind."),
) -> None:
    """Run the HTTP server."""
    serve_command(config_path=config_path, posts_dir=posts_dir, host=host, port=port)


@typer_app.command()
def render(
    path: str = typer.Argument("/", help="URL path to render."),
    wire: bool = typer.Option(False, "--wire", help="Print the wire tree as JSON."),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to duetblog.yaml."
    ),
    posts_dir: Optional[Path] = typer.Option(
        None, "--posts-dir", help="Directory holding the posts."
    ),
) -> None:
    """Render one page to stdout."""
    render_command(path=path, wire=wire, config_path=config_path, posts_dir=posts_dir)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
