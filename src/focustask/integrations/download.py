"""Delivers export files by writing them into a directory."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryDownload:
    """Writes delivered files into target_dir."""

    def __init__(self, target_dir: Path) -> None:
        self.target_dir = target_dir

    def deliver(self, filename: str, text: str) -> Path:
        """Write text to target_dir/filename, replacing an existing file."""
        self.target_dir.mkdir(parents=True, exist_ok=True)
        path = self.target_dir / filename
        path.write_text(text, encoding="utf-8")
        logger.info("Export written: %s", path)
        return path
