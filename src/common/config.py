"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_DATA_SOURCE_URL = (
    "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)


class ServerSettings(BaseModel):
    """Settings for the HTTP server."""
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False


class DataSourceSettings(BaseModel):
    """Settings for the remote transaction dataset."""
    url: str = DEFAULT_DATA_SOURCE_URL
    request_timeout: float = 30.0
    max_retries: int = Field(default=3, ge=1)


class PaginationSettings(BaseModel):
    """Defaults applied when page parameters are missing or invalid."""
    default_page: int = Field(default=1, ge=1)
    default_per_page: int = Field(default=10, ge=1)


class Settings(BaseModel):
    """Top-level application settings."""
    server: ServerSettings = Field(default_factory=ServerSettings)
    data_source: DataSourceSettings = Field(default_factory=DataSourceSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables take precedence over the YAML file.
        """
        settings_path = path or SETTINGS_FILE
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)
        settings.apply_env_overrides()
        return settings

    def apply_env_overrides(self) -> None:
        """Load overrides from environment."""
        if host := os.getenv("HOST"):
            self.server.host = host
        if port := os.getenv("PORT"):
            self.server.port = int(port)
        if debug := os.getenv("DEBUG"):
            self.server.debug = debug.lower() == "true"
        if url := os.getenv("DATA_SOURCE_URL"):
            self.data_source.url = url
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.data_source.request_timeout = float(timeout)
        if retries := os.getenv("MAX_RETRIES"):
            self.data_source.max_retries = max(int(retries), 1)
        if level := os.getenv("LOG_LEVEL"):
            self.log_level = level.upper()


# Singleton settings instance
settings = Settings.load()
