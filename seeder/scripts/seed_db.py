# seeder/scripts/seed_db.py
"""
Seed the database with its default records (admin user, English language).

Usage:
    python -m seeder.scripts.seed_db
"""
import asyncio
import sys

from seeder.core.config import settings
from seeder.core.exceptions import SeederException
from seeder.core.logging import setup_logging
from seeder.db.session import get_database, initialize_database
from seeder.services.seeder import SeedResult, seed_database

logger = setup_logging()


async def run_seed() -> SeedResult:
    """Connect to the configured database and seed it."""
    async with get_database(settings) as database:
        await initialize_database(database)
        return await seed_database(database)


def main() -> int:
    """Run the seeder and return the process exit status."""
    try:
        result = asyncio.run(run_seed())
    except SeederException as e:
        logger.error(f"Seeding failed [{e.code}]: {e.message}")
        return 1

    if result.changed:
        logger.info("Seeding complete")
    else:
        logger.info("Database already seeded, nothing to do")
    return 0


if __name__ == "__main__":
    sys.exit(main())
