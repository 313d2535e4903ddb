"""Task domain model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def is_blank(title: str) -> bool:
    """True when a submitted title has no visible characters."""
    return not title.strip()


def coerce_text(value: Any) -> str:
    """Read an id or title from loaded data; null becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def coerce_flag(value: Any) -> bool:
    """Read the completed flag from loaded data; null means not completed."""
    if value is None:
        return False
    return bool(value)


class Task(BaseModel):
    """A single checkable work item inside a column.

    Instances are immutable; every edit returns a new Task. Unknown keys
    from a loaded snapshot are kept as extra fields and written back out.
    Known fields holding null or the wrong type are coerced, not rejected.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = ""
    title: str = ""
    completed: bool = False

    @field_validator("id", "title", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> str:
        return coerce_text(v)

    @field_validator("completed", mode="before")
    @classmethod
    def validate_completed(cls, v: Any) -> bool:
        return coerce_flag(v)

    def rename(self, title: str) -> Task:
        """Return a copy with a new title, or self if the title is blank."""
        if is_blank(title):
            return self
        return self.model_copy(update={"title": title})

    def toggled(self) -> Task:
        """Return a copy with the completion flag flipped."""
        return self.model_copy(update={"completed": not self.completed})
