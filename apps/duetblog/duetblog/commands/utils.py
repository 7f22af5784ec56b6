"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console()

DEBUG_ENV = "DUETBLOG_DEBUG"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the duetblog CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows misses and requests that fail
    - Debug (DUETBLOG_DEBUG=1): DEBUG level - shows component calls and reads
    """
    debug = bool(os.environ.get(DEBUG_ENV))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Use RichHandler for pretty output
    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in ("duet", "duetblog"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]
        logger.propagate = False
