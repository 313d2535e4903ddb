"""Copies a section to the clipboard as a Markdown checklist."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..exceptions import ClipboardError

if TYPE_CHECKING:
    from ..integrations import ClipboardProtocol
    from ..models import Board, Section

logger = logging.getLogger(__name__)

COPIED_INDICATOR_SECONDS = 2.0


def section_to_markdown(section: Section) -> str:
    """
    Render a section as one checklist line per task.

    Columns are walked in order, then tasks in order:

        - [ ] To Do: Write spec
        - [x] Done: Ship it

    Lines are joined with newlines and there is no trailing newline.
    """
    lines = []
    for column, task in section.iter_tasks():
        checkbox = "[x]" if task.completed else "[ ]"
        lines.append(f"- {checkbox} {column.title}: {task.title}")
    return "\n".join(lines)


class CopiedIndicator:
    """Remembers which section was copied most recently, for a short while.

    Marking a section again restarts its window. Time comes from an
    injectable monotonic clock.
    """

    def __init__(
        self,
        duration: float = COPIED_INDICATOR_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration
        self._clock = clock
        self._section_id: str | None = None
        self._expires_at = 0.0

    def mark(self, section_id: str) -> None:
        self._section_id = section_id
        self._expires_at = self._clock() + self.duration

    @property
    def current(self) -> str | None:
        """Id of the section currently shown as copied, if any."""
        if self._section_id is not None and self._clock() >= self._expires_at:
            self._section_id = None
        return self._section_id

    def is_copied(self, section_id: str) -> bool:
        return self.current == section_id


class MarkdownService:
    """Service for copying sections to the clipboard."""

    def __init__(
        self,
        clipboard: ClipboardProtocol,
        indicator: CopiedIndicator | None = None,
    ) -> None:
        self.clipboard = clipboard
        self.indicator = indicator or CopiedIndicator()

    def copy_section_as_markdown(self, board: Board, section_id: str) -> str | None:
        """
        Copy a section's checklist to the clipboard.

        Returns:
            The copied text, or None if the section is unknown or the
            clipboard write failed (failures are logged only).
        """
        section = board.get_section(section_id)
        if section is None:
            logger.debug("copy_section_as_markdown: section not found: %s", section_id)
            return None

        markdown = section_to_markdown(section)
        try:
            self.clipboard.write_text(markdown)
        except (ClipboardError, OSError) as e:
            logger.error("Failed to copy to clipboard: %s", e)
            return None

        self.indicator.mark(section_id)
        logger.info(
            "Copied section %s as markdown (%d lines)", section_id, len(markdown.splitlines())
        )
        return markdown
