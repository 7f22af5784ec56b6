"""Content Store

Read-only access to post files in a single directory:

    posts/
      hello-world.txt    # entry "hello-world"
      second-post.txt    # entry "second-post"
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from duet.exceptions import NotFoundError

from .sanitize import sanitize

log = logging.getLogger(__name__)


class ContentStore:
    """Filesystem-backed post store.

    File I/O runs in worker threads so concurrent component reads do
    not block the event loop.
    """

    def __init__(self, root: Path, suffix: str = ".txt"):
        self.root = Path(root)
        self.suffix = suffix

    def _entry_path(self, entry_id: str) -> Path:
        """Get the file path for an entry."""
        return self.root / f"{entry_id}{self.suffix}"

    def _list_entries(self) -> list[str]:
        if not self.root.is_dir():
            log.warning(f"Posts directory {self.root} does not exist")
            return []
        entries = []
        for path in self.root.iterdir():
            if not (path.is_file() and path.name.endswith(self.suffix)):
                continue
            entry_id = path.name.removesuffix(self.suffix)
            # only list ids read_entry will accept
            if not entry_id or sanitize(entry_id) != entry_id:
                log.warning(f"Skipping {path.name}: not a readable entry name")
                continue
            entries.append(entry_id)
        return sorted(entries)

    async def list_entries(self) -> list[str]:
        """List entry identifiers, sorted by name."""
        entries = await asyncio.to_thread(self._list_entries)
        log.debug(f"Listed {len(entries)} entries in {self.root}")
        return entries

    async def read_entry(self, entry_id: str) -> str:
        """Read an entry's text.

        Args:
            entry_id: A sanitized entry identifier.

        Returns:
            The entry content.

        Raises:
            NotFoundError: If the entry does not exist or the id is not safe.
        """
        if not entry_id or sanitize(entry_id) != entry_id:
            log.info(f"Rejected entry id {entry_id!r}")
            raise NotFoundError(entry_id)

        path = self._entry_path(entry_id)
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            log.info(f"Entry {entry_id!r} not found at {path}")
            raise NotFoundError(entry_id) from e

        log.debug(f"Read entry {entry_id!r} ({len(content)} chars)")
        return content
