from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .storage import data_file, default_data_dir


class Settings(BaseSettings):
    """Configuration for the list manager.

    Values are loaded from environment variables and `.env`.

    Notes:
    - Leave TUIDO_DATA_DIR unset to use ~/.tui-do.
    - The log file goes next to the data file unless TUIDO_LOG_DIR is set.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    TUIDO_DATA_DIR: Path | None = Field(default=None)

    # Logging (diagnostic; never written to the terminal)
    TUIDO_LOG_DIR: Path | None = Field(default=None)
    TUIDO_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    TUIDO_LOG_BACKUP_COUNT: int = Field(default=7)

    @property
    def data_file(self) -> Path:
        if self.TUIDO_DATA_DIR is None:
            return data_file(default_data_dir())
        return data_file(self.TUIDO_DATA_DIR)


def load_settings() -> Settings:
    """Load settings and resolve directory defaults.

    Raises:
        StorageError: If no data dir is configured and the home directory
            cannot be resolved.
    """
    s = Settings()
    if s.TUIDO_DATA_DIR is None:
        s.TUIDO_DATA_DIR = default_data_dir()
    s.TUIDO_DATA_DIR = s.TUIDO_DATA_DIR.expanduser()
    if s.TUIDO_LOG_DIR is None:
        s.TUIDO_LOG_DIR = s.TUIDO_DATA_DIR
    return s
