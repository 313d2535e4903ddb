"""Keeps the board snapshot in a storage slot."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..exceptions import StorageError
from ..models import Board
from ..repositories import StorageProtocol

logger = logging.getLogger(__name__)

STORAGE_KEY = "trello-sections"


class PersistenceService:
    """
    Reads and writes the board under a single fixed storage key.

    Persistence is best-effort: a failed read falls back to the seed
    board, and a failed write is logged while the caller keeps its
    in-memory board.
    """

    def __init__(self, storage: StorageProtocol, key: str = STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> Board:
        """Load the stored board, or the default board if none is usable."""
        try:
            raw = self.storage.get_item(self.key)
        except (StorageError, OSError) as e:
            logger.error("Error reading storage key %r: %s", self.key, e)
            return Board.default()

        if raw is None:
            logger.info("No saved board under %r, using default board", self.key)
            return Board.default()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Saved board under %r is not valid JSON: %s", self.key, e)
            return Board.default()

        if not isinstance(data, list):
            logger.error(
                "Saved board under %r is a %s, expected a list", self.key, type(data).__name__
            )
            return Board.default()

        try:
            board = Board.from_data(data)
        except ValidationError as e:
            logger.error("Saved board under %r has unreadable entities: %s", self.key, e)
            return Board.default()

        logger.info("Loaded board with %d sections from %r", len(board.sections), self.key)
        return board

    def save(self, board: Board) -> bool:
        """Write the full board to storage.

        Returns:
            True if the write succeeded, False if it failed (already logged).
        """
        try:
            self.storage.set_item(self.key, board.to_json())
        except (StorageError, OSError) as e:
            logger.error("Error writing storage key %r: %s", self.key, e)
            return False
        logger.debug("Saved board under %r", self.key)
        return True
