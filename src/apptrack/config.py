"""Configuration loading via Pydantic settings."""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel


class StorageConfig(BaseModel):
    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = "apptrack.db"
    sheet_name: str = "Applications"

    @property
    def effective_db_path(self) -> str:
        return os.getenv("APPTRACK_DB_PATH", "") or self.db_path


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"


class AppConfig(BaseModel):
    storage: StorageConfig = StorageConfig()
    web: WebConfig = WebConfig()


def default_config_path() -> Path:
    return Path(os.getenv("APPTRACK_CONFIG", "config.yaml"))


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = default_config_path()

    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return AppConfig(**data)

    return AppConfig()
