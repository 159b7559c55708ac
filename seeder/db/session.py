"""
Database client management.
"""
# seeder/db/session.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, PyMongoError

from seeder.core.config import Settings, settings as default_settings
from seeder.core.exceptions import DatabaseUnavailableError

logger = logging.getLogger("seeder.db")


def create_client(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """
    Create an async client for the configured document store.

    The driver connects lazily, so an unreachable server only surfaces on
    the first operation (see initialize_database).
    """
    settings = settings or default_settings
    return AsyncIOMotorClient(
        settings.DATABASE_URL,
        serverSelectionTimeoutMS=settings.DATABASE_TIMEOUT_MS,
        tz_aware=True,
    )


@asynccontextmanager
async def get_database(
    settings: Optional[Settings] = None,
) -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    Context manager for a database handle.

    The client is closed on exit whether or not the body raised.

    Usage:
        async with get_database() as database:
            # Use database here
    """
    settings = settings or default_settings
    client = create_client(settings)
    try:
        yield client[settings.DATABASE_NAME]
    finally:
        client.close()
        logger.debug("Database client closed")


async def initialize_database(database: AsyncIOMotorDatabase) -> None:
    """
    Check that the document store answers before any seeding happens.

    Raises:
        DatabaseUnavailableError: If the server cannot be reached
    """
    logger.info(f"Connecting to database '{database.name}'")

    try:
        await database.command("ping")
    except ConnectionFailure as e:
        logger.error(f"Database connection failed: {e}")
        raise DatabaseUnavailableError(
            message=f"Cannot reach database '{database.name}'",
            details={"error": str(e)},
        ) from e
    except PyMongoError as e:
        logger.error(f"Database ping failed: {e}")
        raise DatabaseUnavailableError(
            message=f"Database '{database.name}' rejected ping",
            details={"error": str(e)},
        ) from e

    logger.info("Database connection successful")
