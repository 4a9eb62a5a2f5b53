"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from survivor_rankings.main import app
from survivor_rankings.database import Database


@pytest.fixture
async def client(test_db):
    """
    HTTP client for testing API endpoints.

    Points the Database singleton at the test database. The lifespan is not
    run, so no connection to the configured MONGODB_URI is attempted.
    """
    original_db = Database.db
    Database.db = test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Restore original db
    Database.db = original_db


@pytest.fixture
async def submitted_ranking(client, sample_ranking_data):
    """Stores the sample prediction through the API."""
    response = await client.post("/rankings", json=sample_ranking_data)
    assert response.status_code == 201
    return response.json()
