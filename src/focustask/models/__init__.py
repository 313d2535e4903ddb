"""Data models."""

from .board import DEFAULT_COLUMN_TITLE, DEFAULT_SECTION_TITLE, Board, Column, Section
from .config import FocusTaskConfig
from .task import Task, is_blank

__all__ = [
    "DEFAULT_COLUMN_TITLE",
    "DEFAULT_SECTION_TITLE",
    "Board",
    "Column",
    "FocusTaskConfig",
    "Section",
    "Task",
    "is_blank",
]
