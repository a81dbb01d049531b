"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from orderbrowser.api.main import app
from orderbrowser.api.services import reset_services
from orderbrowser.config import config


@pytest.fixture(scope="module")
def client():
    """Create a TestClient for the FastAPI application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def fresh_services(monkeypatch):
    """Serve the demo orders and start each test with no user presets."""
    monkeypatch.setattr(config.data, "orders_path", None)
    reset_services()
    yield
    reset_services()
