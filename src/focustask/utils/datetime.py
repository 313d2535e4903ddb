"""Utilities for datetime handling."""

from datetime import UTC, date, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def today_iso(today: date | None = None) -> str:
    """Return the calendar date as YYYY-MM-DD (UTC when not given)."""
    if today is None:
        today = now_utc().date()
    return today.isoformat()
