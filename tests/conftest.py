"""
Pytest fixtures and configuration for all tests.
"""

import os

# Settings() exige MONGODB_URI; se define antes de importar la app
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import pytest
from typing import AsyncGenerator
from datetime import datetime, timedelta, timezone
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from survivor_rankings.models.contestant import ROSTER_IDS
from survivor_rankings.models.ranking import UserRanking

# MongoDB test database
TEST_DB_URI = os.environ.get("TEST_MONGODB_URI", "mongodb://localhost:27017")
TEST_DB_NAME = "survivor_rankings_test"


@pytest.fixture(scope="session")
def worker_id(request):
    """
    Return the worker ID when using pytest-xdist, otherwise 'master'.
    This allows each worker to use its own test database.
    """
    if hasattr(request.config, 'workerinput'):
        return request.config.workerinput['workerid']
    return 'master'


@pytest.fixture(scope="function")
async def test_db(worker_id) -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    Provide a clean test database for each test.

    Skips the test when no MongoDB server is reachable.
    Automatically cleans up after each test.
    """
    client = AsyncIOMotorClient(TEST_DB_URI, serverSelectionTimeoutMS=2000)

    try:
        await client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip(f"MongoDB not available at {TEST_DB_URI}")

    # Use different database per worker to avoid conflicts in parallel execution
    db_name = f"{TEST_DB_NAME}_{worker_id}" if worker_id != "master" else TEST_DB_NAME
    db = client[db_name]

    # Cleanup before too, in case a previous run was interrupted
    await client.drop_database(db_name)

    yield db

    # Cleanup: drop all collections after test
    collection_names = await db.list_collection_names()
    for collection_name in collection_names:
        await db[collection_name].drop()

    client.close()


@pytest.fixture
def roster_order():
    """A valid prediction: roster order, contestant 1 out first, 18 wins."""
    return list(ROSTER_IDS)


@pytest.fixture
def sample_ranking_data(roster_order):
    """Sample prediction payload for testing."""
    return {
        "user_id": "user-ana",
        "user_name": "Ana",
        "rankings": roster_order,
    }


@pytest.fixture
def make_ranking():
    """Factory for UserRanking objects with increasing submission times."""
    base = datetime(2026, 9, 1, 20, 0, tzinfo=timezone.utc)

    def _make(user_id, rankings, minutes=0, user_name=None):
        return UserRanking(
            user_id=user_id,
            user_name=user_name or user_id.title(),
            rankings=list(rankings),
            submitted_at=base + timedelta(minutes=minutes),
        )

    return _make
