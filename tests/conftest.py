from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

TEST_DATABASE_NAME = "gofreta_test"


@pytest_asyncio.fixture()
async def database():
    # mongomock clients share one in-memory server, so isolate by name
    client = AsyncMongoMockClient()
    yield client[f"{TEST_DATABASE_NAME}_{uuid4().hex}"]


@pytest.fixture
def failing_collection():
    """Collection whose every call raises the exception set on ``.error``."""
    collection = MagicMock()
    collection.error = None

    def _raise(*args, **kwargs):
        raise collection.error

    collection.count_documents = AsyncMock(side_effect=_raise)
    collection.find_one = AsyncMock(side_effect=_raise)
    collection.update_one = AsyncMock(side_effect=_raise)
    return collection


@pytest.fixture
def failing_database(failing_collection):
    db = MagicMock()
    db.name = TEST_DATABASE_NAME
    db.__getitem__.return_value = failing_collection
    db.command = AsyncMock()
    return db
