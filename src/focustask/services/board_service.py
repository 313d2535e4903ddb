"""Service holding the current board and applying mutations to it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import Board, Column, FocusTaskConfig, Section, Task
from ..utils.ids import new_id

if TYPE_CHECKING:
    from ..models.board import IdFactory
    from .persistence_service import PersistenceService

logger = logging.getLogger(__name__)


class BoardService:
    """
    Owner of the in-session board.

    Every mutation computes a new Board from the current one. When the
    result differs, it becomes the current board and is saved through
    the persistence service. The in-memory board stays authoritative
    even if saving fails.
    """

    def __init__(
        self,
        persistence: PersistenceService,
        config: FocusTaskConfig | None = None,
        id_factory: IdFactory = new_id,
    ) -> None:
        self.persistence = persistence
        self.config = config or FocusTaskConfig.default()
        self._id_factory = id_factory
        self._board = persistence.load()

    @property
    def board(self) -> Board:
        """The current board snapshot."""
        return self._board

    # --- Lookups ---

    def find_section(self, section_id: str) -> Section | None:
        return self._board.get_section(section_id)

    def find_column(self, section_id: str, column_id: str) -> Column | None:
        return self._board.get_column(section_id, column_id)

    def find_task(self, section_id: str, column_id: str, task_id: str) -> Task | None:
        return self._board.get_task(section_id, column_id, task_id)

    # --- Sections ---

    def add_section(self) -> Board:
        board = self._board.add_section(
            title=self.config.default_section_title,
            column_title=self.config.default_column_title,
            id_factory=self._id_factory,
        )
        return self._commit(board, "add_section")

    def delete_section(self, section_id: str) -> Board:
        return self._commit(self._board.delete_section(section_id), "delete_section", section_id)

    def clear_completed_tasks(self, section_id: str) -> Board:
        return self._commit(
            self._board.clear_completed_tasks(section_id), "clear_completed_tasks", section_id
        )

    def rename_section(self, section_id: str, title: str) -> Board:
        return self._commit(
            self._board.rename_section(section_id, title), "rename_section", section_id
        )

    # --- Columns ---

    def add_column(self, section_id: str) -> Board:
        board = self._board.add_column(
            section_id,
            title=self.config.default_column_title,
            id_factory=self._id_factory,
        )
        return self._commit(board, "add_column", section_id)

    def remove_column(self, section_id: str) -> Board:
        return self._commit(self._board.remove_column(section_id), "remove_column", section_id)

    def rename_column(self, section_id: str, column_id: str, title: str) -> Board:
        return self._commit(
            self._board.rename_column(section_id, column_id, title),
            "rename_column",
            f"{section_id}/{column_id}",
        )

    # --- Tasks ---

    def add_task(self, section_id: str, column_id: str, title: str) -> Board:
        board = self._board.add_task(section_id, column_id, title, id_factory=self._id_factory)
        return self._commit(board, "add_task", f"{section_id}/{column_id}")

    def delete_task(self, section_id: str, column_id: str, task_id: str) -> Board:
        return self._commit(
            self._board.delete_task(section_id, column_id, task_id),
            "delete_task",
            f"{section_id}/{column_id}/{task_id}",
        )

    def rename_task(self, section_id: str, column_id: str, task_id: str, title: str) -> Board:
        return self._commit(
            self._board.rename_task(section_id, column_id, task_id, title),
            "rename_task",
            f"{section_id}/{column_id}/{task_id}",
        )

    def toggle_task_completion(self, section_id: str, column_id: str, task_id: str) -> Board:
        return self._commit(
            self._board.toggle_task_completion(section_id, column_id, task_id),
            "toggle_task_completion",
            f"{section_id}/{column_id}/{task_id}",
        )

    def move_task(
        self,
        task: Task,
        from_section_id: str,
        from_column_id: str,
        to_section_id: str,
        to_column_id: str,
    ) -> Board:
        """
        Move a task between columns, possibly across sections.

        The task value passed in is what lands in the destination, so the
        caller should pass the copy it just read from the current board.
        """
        board = self._board.move_task(
            task, from_section_id, from_column_id, to_section_id, to_column_id
        )
        return self._commit(
            board,
            "move_task",
            f"{task.id} ({from_section_id}/{from_column_id} -> {to_section_id}/{to_column_id})",
        )

    # --- Whole-board replacement ---

    def replace_board(self, board: Board) -> Board:
        """Swap in a new board wholesale (e.g. after an import)."""
        return self._commit(board, "replace_board")

    def reload(self) -> Board:
        """Re-read the board from storage, discarding the in-memory one."""
        self._board = self.persistence.load()
        return self._board

    def _commit(self, board: Board, action: str, target: str = "") -> Board:
        """Make board current and persist it, unless nothing changed."""
        if board is self._board or board == self._board:
            logger.debug("%s: no change %s", action, target)
            return self._board

        self._board = board
        logger.info("%s %s", action, target)
        self.persistence.save(board)
        return board
