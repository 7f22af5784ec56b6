"""CLI commands"""

from .render import render_command
from .serve import serve_command

__all__ = ["render_command", "serve_command"]
