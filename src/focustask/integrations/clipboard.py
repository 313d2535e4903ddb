"""System clipboard access through platform copy commands."""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..exceptions import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class SystemClipboard:
    """Clipboard writer that pipes text into a platform copy command."""

    def __init__(self, commands: tuple[tuple[str, ...], ...] = CLIPBOARD_COMMANDS) -> None:
        self.commands = commands

    def find_command(self) -> tuple[str, ...] | None:
        """Return the first available copy command, or None."""
        for command in self.commands:
            if shutil.which(command[0]) is not None:
                return command
        return None

    def write_text(self, text: str) -> None:
        """Write text to the clipboard, raising ClipboardError on failure."""
        command = self.find_command()
        if command is None:
            raise ClipboardError("No clipboard command available")

        logger.debug("Copying %d characters with %s", len(text), command[0])
        try:
            result = subprocess.run(
                list(command),
                input=text,
                text=True,
                capture_output=True,
                check=False,
                timeout=5,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ClipboardError(f"{command[0]} failed: {e}") from e

        if result.returncode != 0:
            raise ClipboardError(
                f"{command[0]} exited with {result.returncode}: {result.stderr.strip()}"
            )
