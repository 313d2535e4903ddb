"""Collaborators that reach outside the process (clipboard, files)."""

from .clipboard import SystemClipboard
from .download import DirectoryDownload
from .protocol import ClipboardProtocol, DownloadProtocol

__all__ = [
    "ClipboardProtocol",
    "DirectoryDownload",
    "DownloadProtocol",
    "SystemClipboard",
]
