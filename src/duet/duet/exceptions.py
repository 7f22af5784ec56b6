"""Duet Exceptions

Error taxonomy shared by the engine and the boundary layer.
"""

from __future__ import annotations

from typing import Any


class DuetError(Exception):
    """Base exception for all duet errors."""

    status_code: int = 500


class NotFoundError(DuetError):
    """Raised when a requested content entry does not exist."""

    status_code = 404

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Not found: {entry_id}")


class UnsupportedNodeError(DuetError):
    """Raised when a value cannot be rendered or serialized."""

    def __init__(self, node: Any, reason: str | None = None):
        self.node = node
        detail = reason or f"unsupported node {type(node).__name__}"
        super().__init__(f"Cannot render: {detail}")


class WireDecodeError(DuetError):
    """Raised when wire data cannot be decoded back into nodes."""

    pass
