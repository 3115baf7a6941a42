"""Shared fixtures for web tests."""

import pytest
from fastapi.testclient import TestClient

from apptrack.config import AppConfig, StorageConfig
from apptrack.models import ApplicationInput
from apptrack.web.app import create_app


@pytest.fixture
def web_app(store):
    """Create a test FastAPI app backed by the in-memory store."""
    app = create_app()
    # Override app state with the test store
    app.state.config = AppConfig(storage=StorageConfig(backend="memory"))
    app.state.store = store
    return app


@pytest.fixture
def client(web_app):
    return TestClient(web_app, raise_server_exceptions=False)


@pytest.fixture
def seeded_client(web_app, store):
    store.save_application(ApplicationInput(candidate="Alice", company="Zeta", job_title="Engineer"))
    store.save_application(ApplicationInput(candidate="Bob", company="Acme", job_title="Analyst", status="Offer"))
    store.save_application(ApplicationInput(candidate="Alice", company="Acme", job_title="Engineer"))
    return TestClient(web_app, raise_server_exceptions=False)
