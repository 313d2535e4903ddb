"""Protocols for the OS-facing collaborators used by the services."""

from pathlib import Path
from typing import Protocol


class ClipboardProtocol(Protocol):
    """Something that can place text on the user's clipboard."""

    def write_text(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            ClipboardError: if the text could not be written.
        """
        ...


class DownloadProtocol(Protocol):
    """Something that hands a generated file to the user."""

    def deliver(self, filename: str, text: str) -> Path:
        """Save text under filename and return where it ended up."""
        ...
