"""
Shared test fixtures.

Provides:
- A fresh in-memory SQLite session per test for service tests
- A FastAPI TestClient on a fresh application (own in-memory database, no seed data)
- A helper that POSTs a record and returns the created JSON

Usage:
    async def test_example(db):
        category = await CategoryService().create(db, CategoryCreate(name="Indoor"))

    def test_endpoint(client, create):
        plant = create("plants", {"name": "Monstera"})
"""

import logging

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

import nursery.models  # noqa: F401
from nursery.core.config import Settings
from nursery.core.database import Base, create_engine_for, create_session_maker
from nursery.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Keep test output clean
logging.getLogger("nursery").setLevel(logging.WARNING)


@pytest_asyncio.fixture
async def db():
    """Async session on an in-memory database with all tables created.

    Each test gets a fresh database, no cross-test contamination.
    """
    engine = create_engine_for(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = create_session_maker(engine)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def test_settings():
    return Settings(DATABASE_URL=TEST_DATABASE_URL, SEED_DATA=False, LOG_LEVEL="WARNING")


@pytest.fixture
def client(test_settings):
    """TestClient running the application lifespan (tables created, no seed data)."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create(client):
    """POST a record to /api/<resource>, assert 201 and return the body."""
    def _create(resource, payload):
        response = client.post(f"/api/{resource}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def plant_with_color(create):
    """A plant and a color, the minimum needed to create variants."""
    plant = create("plants", {"name": "Monstera Deliciosa"})
    color = create("colors", {"name": "Variegated", "hexCode": "#81C784"})
    return plant, color
