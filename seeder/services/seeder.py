"""
Seed a freshly provisioned document store with its default records.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from seeder.db.repositories.languages import LanguageRepository
from seeder.db.repositories.users import UserRepository
from seeder.seeds.defaults import default_admin_user, default_language
from seeder.utils.datetime import unix_timestamp

logger = logging.getLogger("seeder.seed")


@dataclass(frozen=True)
class SeedResult:
    """Outcome of a seeding run."""
    timestamp: int
    user_created: bool
    language_created: bool

    @property
    def changed(self) -> bool:
        return self.user_created or self.language_created


async def seed_database(database: AsyncIOMotorDatabase, now: Optional[int] = None) -> SeedResult:
    """
    Insert the default administrator and language into empty collections.

    Collections that already hold any document are left untouched, so the
    call is safe to repeat. Any database error propagates to the caller.

    Args:
        database: Database handle
        now: Unix timestamp for created/modified (defaults to current time)

    Returns:
        SeedResult: Which records were inserted
    """
    if now is None:
        now = unix_timestamp()

    user_repo = UserRepository(database)
    user_created = await user_repo.create_if_empty(default_admin_user(now))
    if user_created:
        logger.info("Inserted default admin user into 'user'")
    else:
        logger.info("Collection 'user' not empty, skipped admin user")

    language_repo = LanguageRepository(database)
    language_created = await language_repo.create_if_empty(default_language(now))
    if language_created:
        logger.info("Inserted default language 'en' into 'language'")
    else:
        logger.info("Collection 'language' not empty, skipped default language")

    return SeedResult(
        timestamp=now,
        user_created=user_created,
        language_created=language_created,
    )
