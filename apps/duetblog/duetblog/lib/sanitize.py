"""Identifier sanitizing for path segments that name content entries."""

from __future__ import annotations

import re

MAX_BYTES = 255

_ILLEGAL = re.compile(r'[/?<>\\:*|"]')
_CONTROL = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RELATIVE = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(
    r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE
)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")


def sanitize(raw: str) -> str:
    """Make a raw path segment safe to use as a file name.

    Removes:
    - Path separators and characters reserved on common filesystems
    - Control characters
    - The relative names "." and ".." (any all-dots name)
    - Windows device names (CON, COM1, ...) and trailing dots/spaces

    The result is cut to 255 UTF-8 bytes and may be empty.

    Example:
        >>> sanitize("../etc/passwd")
        '..etcpasswd'
    """
    sanitized = _ILLEGAL.sub("", raw)
    sanitized = _CONTROL.sub("", sanitized)
    sanitized = _RELATIVE.sub("", sanitized)
    sanitized = _WINDOWS_RESERVED.sub("", sanitized)
    sanitized = _WINDOWS_TRAILING.sub("", sanitized)
    return _truncate_utf8(sanitized, MAX_BYTES)


def _truncate_utf8(text: str, max_bytes: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")
