"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from shoe_store_api.app.core.config import Settings
from shoe_store_api.app.core.db import init_db
from shoe_store_api.app.core.storage import DurableMap
from shoe_store_api.app.main import create_app
from shoe_store_api.app.schemas.shoe import Shoe, ShoePayload


@pytest.fixture
def db_path(tmp_path):
    """Path of a freshly migrated SQLite database."""
    path = str(tmp_path / "shoes.db")
    init_db(path)
    return path


@pytest.fixture
def storage(db_path):
    """Empty durable shoe map."""
    return DurableMap(db_path, Shoe)


@pytest.fixture
def sample_payload():
    """Create a valid ShoePayload for testing."""
    return ShoePayload(
        name="AirMax",
        size="42",
        shoe_url="https://example.com/airmax.png",
        price=100,
        quantity="5",
    )


@pytest.fixture
def sample_shoe():
    """Create a stored-shape Shoe without going through the service."""
    return Shoe(
        id="5f0c7a52-9a43-4c36-bd6b-2f1d0e0b8a11",
        name="Runner",
        size="40",
        shoe_url="https://example.com/runner.png",
        price=80,
        quantity="3",
        rating=1.0,
        created_at=1_700_000_000_000_000_000,
    )


@pytest.fixture
def client(tmp_path):
    """HTTP client for an app backed by a temporary database."""
    app = create_app(Settings(database_url=str(tmp_path / "api.db")))
    with TestClient(app) as test_client:
        yield test_client
