"""Wiring of storage, services and collaborators for one session."""

from __future__ import annotations

from .config import Settings
from .integrations import ClipboardProtocol, DirectoryDownload, DownloadProtocol, SystemClipboard
from .repositories import FilesystemStorage, StorageProtocol
from .services import (
    BoardService,
    ConfigService,
    CopiedIndicator,
    MarkdownService,
    PersistenceService,
    TransferService,
)


class FocusTaskApp:
    """Holds the services a front end needs to drive the board."""

    def __init__(
        self,
        settings: Settings | None = None,
        storage: StorageProtocol | None = None,
        clipboard: ClipboardProtocol | None = None,
        download: DownloadProtocol | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.config_service = ConfigService(self.settings.data_dir)
        config = self.config_service.get_config()

        self.storage: StorageProtocol = storage or FilesystemStorage(self.settings.data_dir)
        self.persistence = PersistenceService(self.storage, config.storage_key)
        self.board_service = BoardService(self.persistence, config)
        self.transfer_service = TransferService(
            download or DirectoryDownload(self.config_service.export_dir)
        )
        self.markdown_service = MarkdownService(
            clipboard or SystemClipboard(),
            CopiedIndicator(config.copied_indicator_seconds),
        )
