"""duetblog - a small blog served through duet's dual renderer."""

from ._version import __version__

__all__ = ["__version__"]
