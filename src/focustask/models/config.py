"""Configuration model for focustask.yml."""

from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from .board import DEFAULT_COLUMN_TITLE, DEFAULT_SECTION_TITLE


class FocusTaskConfig(BaseModel):
    """Root configuration from focustask.yml."""

    storage_key: str = Field(
        default="trello-sections",
        min_length=1,
        description="Key of the storage slot holding the board snapshot",
    )
    export_dir: str = Field(
        default=".",
        description="Directory export files are written to",
    )
    copied_indicator_seconds: float = Field(
        default=2.0,
        gt=0,
        description="How long a section stays marked as copied",
    )
    default_section_title: str = DEFAULT_SECTION_TITLE
    default_column_title: str = DEFAULT_COLUMN_TITLE

    KEY_FORBIDDEN_CHARS: ClassVar[str] = "/\\"

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        """Storage keys become filenames, so path separators are rejected."""
        if any(c in v for c in cls.KEY_FORBIDDEN_CHARS) or v in (".", ".."):
            raise ValueError(f"Invalid storage_key '{v}': must not contain path separators")
        return v

    @field_validator("default_section_title", "default_column_title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Default titles follow the same non-blank rule as user titles."""
        if not v.strip():
            raise ValueError("Default titles cannot be blank")
        return v

    @classmethod
    def default(cls) -> "FocusTaskConfig":
        """Return default configuration."""
        return cls()
