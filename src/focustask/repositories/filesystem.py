"""Filesystem-based key-value storage."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class FilesystemStorage:
    """
    Key-value storage backed by a directory.

    Each key is stored as ``<root>/<key>.json``. Writes go to a temporary
    file in the same directory which then replaces the target, so a
    failed write never leaves a half-written snapshot behind.
    """

    SUFFIX = ".json"

    def __init__(self, root: Path) -> None:
        """
        Initialize storage.

        Args:
            root: Directory holding one file per key (created on first write)
        """
        self.root = root

    def ensure_directory(self) -> None:
        """Create the storage directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file path used for a key."""
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}{self.SUFFIX}"

    def get_item(self, key: str) -> str | None:
        """Read the stored text for key, or None if no file exists."""
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        """Atomically write value to the file for key."""
        path = self.path_for(key)
        try:
            self.ensure_directory()
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def remove_item(self, key: str) -> None:
        """Delete the file for key if present."""
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot remove {path}: {e}") from e
