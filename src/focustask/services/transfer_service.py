"""Export and import of whole-board JSON snapshots."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..exceptions import ImportRejectedError
from ..models import Board
from ..utils import today_iso

if TYPE_CHECKING:
    from ..integrations import DownloadProtocol

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "focustask-export"
EXPORT_INDENT = 2

READ_ERROR_MESSAGE = "Error reading file. Please select a valid JSON file."
FORMAT_ERROR_MESSAGE = "Invalid JSON format. Please select a valid FocusTask export file."


class TransferService:
    """Turns boards into export files and import files back into boards."""

    def __init__(self, download: DownloadProtocol) -> None:
        self.download = download

    @staticmethod
    def export_filename(today: date | None = None) -> str:
        """Filename for an export made on the given day."""
        return f"{EXPORT_PREFIX}-{today_iso(today)}.json"

    @staticmethod
    def export_text(board: Board) -> str:
        """Pretty-printed JSON snapshot of the whole board."""
        return board.to_json(indent=EXPORT_INDENT)

    def export_board(self, board: Board, today: date | None = None) -> Path:
        """Serialize board and hand it to the download collaborator."""
        filename = self.export_filename(today)
        path = self.download.deliver(filename, self.export_text(board))
        logger.info("Exported %d sections to %s", len(board.sections), path)
        return path

    @staticmethod
    def import_board(text: str) -> Board:
        """
        Parse an export file's text into a Board.

        Only the top level is checked: it must be a JSON array. Entities
        inside it are read leniently, with defaults for missing fields and
        unknown fields kept.

        Raises:
            ImportRejectedError: text is not JSON, is not an array, or holds
                elements that are not objects.
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning("Import rejected, not valid JSON: %s", e)
            raise ImportRejectedError(READ_ERROR_MESSAGE) from e

        if not isinstance(data, list):
            logger.warning("Import rejected, top level is %s", type(data).__name__)
            raise ImportRejectedError(FORMAT_ERROR_MESSAGE)

        try:
            board = Board.from_data(data)
        except ValidationError as e:
            logger.warning("Import rejected, unreadable entities: %s", e)
            raise ImportRejectedError(FORMAT_ERROR_MESSAGE) from e

        logger.info("Imported board with %d sections", len(board.sections))
        return board

    @staticmethod
    def read_import_file(path: Path) -> str:
        """Read a user-selected import file as text."""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Import rejected, cannot read %s: %s", path, e)
            raise ImportRejectedError(READ_ERROR_MESSAGE) from e
