"""Render command - print one page's markup or wire tree"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from duet import dumps_wire, h, render_page, render_wire_only

from ..components import Router
from ..lib.config import load_config
from ..lib.errors import handle_error
from ..lib.store import ContentStore


def render_command(
    path: str = "/",
    wire: bool = False,
    config_path: Optional[Path] = None,
    posts_dir: Optional[Path] = None,
) -> None:
    """Render a URL path without starting a server."""
    config = load_config(config_path, posts_dir)
    store = ContentStore(config.posts_dir, config.post_suffix)
    root = h(Router, {"path": path, "store": store, "config": config})

    try:
        if wire:
            output = dumps_wire(asyncio.run(render_wire_only(root)))
        else:
            output = asyncio.run(render_page(root)).markup
    except Exception as e:
        handle_error(e)

    typer.echo(output)
