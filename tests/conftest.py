"""Shared fixtures for focustask tests."""

import json
from collections.abc import Callable
from itertools import count

import pytest

from focustask.models import Board


def sample_data() -> list[dict]:
    """Two sections; the first has a completed task in each column."""
    return [
        {
            "id": "s1",
            "title": "Work",
            "columns": [
                {
                    "id": "todo",
                    "title": "To Do",
                    "tasks": [
                        {"id": "t1", "title": "Write spec", "completed": False},
                        {"id": "t2", "title": "Review", "completed": True},
                    ],
                },
                {
                    "id": "done",
                    "title": "Done",
                    "tasks": [{"id": "t3", "title": "Ship", "completed": True}],
                },
            ],
        },
        {
            "id": "s2",
            "title": "Home",
            "columns": [
                {
                    "id": "chores",
                    "title": "Chores",
                    "tasks": [{"id": "t4", "title": "Dishes", "completed": False}],
                }
            ],
        },
    ]


@pytest.fixture
def board() -> Board:
    """A small two-section board."""
    return Board.from_data(sample_data())


@pytest.fixture
def id_factory() -> Callable[[str], str]:
    """Deterministic id generator: prefix + n1, n2, ..."""
    counter = count(1)
    return lambda prefix: f"{prefix}n{next(counter)}"


@pytest.fixture
def snapshot_text() -> str:
    """The sample board as stored JSON text."""
    return json.dumps(sample_data())
