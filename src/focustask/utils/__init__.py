"""Utility functions."""

from .datetime import now_utc, today_iso
from .ids import new_id

__all__ = [
    "new_id",
    "now_utc",
    "today_iso",
]
