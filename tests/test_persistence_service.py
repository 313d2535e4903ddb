"""Tests for PersistenceService load/save behavior."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from focustask.exceptions import StorageError
from focustask.models import Board
from focustask.repositories import MemoryStorage
from focustask.services import STORAGE_KEY, PersistenceService


class TestPersistenceLoad:
    """Tests for loading a snapshot."""

    def test_missing_key_gives_default(self):
        assert PersistenceService(MemoryStorage()).load() == Board.default()

    def test_loads_stored_board(self, board: Board):
        storage = MemoryStorage({STORAGE_KEY: board.to_json()})
        assert PersistenceService(storage).load() == board

    def test_custom_key(self, board: Board):
        storage = MemoryStorage({"other": board.to_json()})
        assert PersistenceService(storage, key="other").load() == board

    @pytest.mark.parametrize(
        "raw",
        ["{not json", '{"foo": "bar"}', '"text"', "[1, 2]"],
    )
    def test_unusable_snapshot_gives_default(self, raw: str, caplog: pytest.LogCaptureFixture):
        storage = MemoryStorage({STORAGE_KEY: raw})
        with caplog.at_level(logging.ERROR, logger="focustask"):
            assert PersistenceService(storage).load() == Board.default()
        assert caplog.records

    def test_read_failure_gives_default(self):
        storage = MagicMock()
        storage.get_item.side_effect = StorageError("unavailable")
        assert PersistenceService(storage).load() == Board.default()

    def test_empty_array_is_empty_board(self):
        storage = MemoryStorage({STORAGE_KEY: "[]"})
        assert PersistenceService(storage).load().sections == ()


class TestPersistenceSave:
    """Tests for saving a snapshot."""

    def test_save_writes_json_array(self, board: Board):
        storage = MemoryStorage()
        assert PersistenceService(storage).save(board) is True
        assert json.loads(storage.get_item(STORAGE_KEY)) == board.to_data()

    @pytest.mark.parametrize("error", [StorageError("quota"), OSError("disk full")])
    def test_save_failure_returns_false(self, board: Board, error: Exception):
        storage = MagicMock()
        storage.set_item.side_effect = error
        assert PersistenceService(storage).save(board) is False


class TestPersistenceLoadLenient:
    """Stored snapshots with null or mistyped fields are kept, not replaced."""

    @pytest.mark.parametrize(
        "section",
        [
            {"id": "s", "title": None, "columns": []},
            {"id": None, "title": "S", "columns": None},
            {"id": True, "title": "S", "columns": []},
            {"id": "s", "title": "S", "columns": [{"id": "c", "title": "C", "tasks": None}]},
            {
                "id": "s",
                "title": "S",
                "columns": [{"id": "c", "title": "C", "tasks": [{"id": "t", "completed": None}]}],
            },
        ],
    )
    def test_loads_instead_of_default(self, section: dict):
        storage = MemoryStorage({STORAGE_KEY: json.dumps([section])})

        board = PersistenceService(storage).load()

        assert board != Board.default()
        assert len(board.sections) == 1

    def test_null_fields_read_as_defaults(self):
        raw = json.dumps(
            [
                {
                    "id": "s",
                    "title": "S",
                    "columns": [{"id": "c", "title": None, "tasks": [{"id": "t", "completed": None}]}],
                }
            ]
        )
        board = PersistenceService(MemoryStorage({STORAGE_KEY: raw})).load()

        column = board.get_column("s", "c")
        assert column.title == ""
        assert column.tasks[0].completed is False
        assert column.tasks[0].title == ""
