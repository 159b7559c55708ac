import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from seeder.core.exceptions import DatabaseUnavailableError, SeedOperationError
from seeder.db.repositories.languages import LanguageRepository
from seeder.db.repositories.users import UserRepository
from seeder.seeds.defaults import default_language


@pytest.mark.asyncio
async def test_insert_if_empty_inserts_into_empty_collection(database):
    repo = LanguageRepository(database)

    assert not await repo.exists()
    assert await repo.insert_if_empty({"title": "English", "locale": "en"})
    assert await repo.count() == 1
    assert await repo.exists()


@pytest.mark.asyncio
async def test_insert_if_empty_leaves_existing_document(database):
    await database["language"].insert_one({"title": "Deutsch", "locale": "de"})
    repo = LanguageRepository(database)

    assert not await repo.insert_if_empty({"title": "English", "locale": "en"})
    assert await repo.count() == 1
    existing = await repo.get_first()
    assert existing["locale"] == "de"


@pytest.mark.asyncio
async def test_create_if_empty_and_lookup(database):
    repo = LanguageRepository(database)

    assert await repo.create_if_empty(default_language(100))
    found = await repo.get_by_locale("en")
    assert found["title"] == "English"
    assert await repo.get_by_locale("fr") is None


@pytest.mark.asyncio
async def test_get_by_username_on_empty_collection(database):
    assert await UserRepository(database).get_by_username("admin") is None


@pytest.mark.asyncio
async def test_connection_failure_raises_database_unavailable(failing_database, failing_collection):
    failing_collection.error = ServerSelectionTimeoutError("no servers")
    repo = UserRepository(failing_database)

    with pytest.raises(DatabaseUnavailableError) as exc_info:
        await repo.exists()

    assert exc_info.value.code == "DATABASE_UNAVAILABLE"
    assert exc_info.value.details["collection"] == "user"


@pytest.mark.asyncio
async def test_operation_failure_raises_seed_operation_error(failing_database, failing_collection):
    failing_collection.error = OperationFailure("not authorized")
    repo = LanguageRepository(failing_database)

    with pytest.raises(SeedOperationError) as exc_info:
        await repo.insert_if_empty({"locale": "en"})

    assert exc_info.value.details["operation"] == "insert_if_empty"
    assert exc_info.value.details["collection"] == "language"
