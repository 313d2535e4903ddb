"""Configuration service for loading focustask.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import FocusTaskConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "focustask.yml"

    def __init__(self, data_dir: Path) -> None:
        """Initialize the config service.

        Args:
            data_dir: Directory holding focustask.yml and the board snapshot
        """
        self.data_dir = data_dir
        self._config: FocusTaskConfig | None = None
        self._config_error: str | None = None

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    @property
    def export_dir(self) -> Path:
        """Export directory, resolved against data_dir when relative."""
        path = Path(self.get_config().export_dir).expanduser()
        if path.is_absolute():
            return path
        return self.data_dir / path

    def get_config(self) -> FocusTaskConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> FocusTaskConfig:
        """Load configuration from file or return default."""
        config_path = self.data_dir / self.CONFIG_FILE
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return FocusTaskConfig.default()

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning(self._config_error)
                return FocusTaskConfig.default()

            if not isinstance(data, dict):
                self._config_error = f"{self.CONFIG_FILE} must contain a mapping"
                logger.warning(self._config_error)
                return FocusTaskConfig.default()

            config = FocusTaskConfig(**data)
            logger.info("Loaded %s (storage_key=%s)", self.CONFIG_FILE, config.storage_key)
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return FocusTaskConfig.default()

        except ValidationError as e:
            self._config_error = f"Invalid {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return FocusTaskConfig.default()

        except OSError as e:
            self._config_error = f"Error loading {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return FocusTaskConfig.default()
