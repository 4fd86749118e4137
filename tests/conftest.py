"""Shared pytest fixtures for shortsbox tests."""

import pytest
from fastapi.testclient import TestClient

from shortsbox.catalog.store import ClipStore
from shortsbox.main import create_app


@pytest.fixture
def store():
    """A freshly seeded store."""
    return ClipStore()


@pytest.fixture
def app(store):
    """Application wired to the ``store`` fixture."""
    return create_app(store)


@pytest.fixture
def client(app):
    """Test client that turns unhandled errors into 500 responses."""
    return TestClient(app, raise_server_exceptions=False)
