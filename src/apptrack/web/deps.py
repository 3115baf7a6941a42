"""FastAPI dependency injection for the tracker API."""

from fastapi import Request

from apptrack.config import AppConfig
from apptrack.store import ApplicationStore


def get_config(request: Request) -> AppConfig:
    """Get configuration from app state."""
    return request.app.state.config


def get_store(request: Request) -> ApplicationStore:
    """Get the application store from app state."""
    return request.app.state.store
