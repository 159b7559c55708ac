"""
Language repository for the "language" collection.
"""
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from seeder.db.repositories.base import BaseRepository
from seeder.schemas.language import LanguageDocument


class LanguageRepository(BaseRepository):
    """Language repository."""

    COLLECTION = "language"

    def __init__(self, database: AsyncIOMotorDatabase):
        super().__init__(database=database, collection_name=self.COLLECTION)

    async def get_by_locale(self, locale: str) -> Optional[Dict[str, Any]]:
        return await self.get_by_attribute("locale", locale)

    async def create_if_empty(self, language: LanguageDocument) -> bool:
        """Insert ``language`` unless any language already exists."""
        return await self.insert_if_empty(language.to_document())
