"""Serve command - run the blog over HTTP"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import uvicorn

from ..lib.config import load_config
from ..server import create_app

log = logging.getLogger(__name__)


def serve_command(
    config_path: Optional[Path] = None,
    posts_dir: Optional[Path] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> None:
    """Start the HTTP server."""
    config = load_config(config_path, posts_dir)
    host = host or config.host
    port = port or config.port

    log.info(f"Serving posts from {config.posts_dir} on http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level="warning")
