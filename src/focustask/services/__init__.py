"""Service layer for business logic."""

from .board_service import BoardService
from .config_service import ConfigService
from .markdown_service import CopiedIndicator, MarkdownService, section_to_markdown
from .persistence_service import STORAGE_KEY, PersistenceService
from .transfer_service import TransferService

__all__ = [
    "STORAGE_KEY",
    "BoardService",
    "ConfigService",
    "CopiedIndicator",
    "MarkdownService",
    "PersistenceService",
    "TransferService",
    "section_to_markdown",
]
