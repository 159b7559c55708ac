"""
User repository for the "user" collection.
"""
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from seeder.db.repositories.base import BaseRepository
from seeder.schemas.user import UserDocument


class UserRepository(BaseRepository):
    """User repository."""

    COLLECTION = "user"

    def __init__(self, database: AsyncIOMotorDatabase):
        super().__init__(database=database, collection_name=self.COLLECTION)

    async def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return await self.get_by_attribute("username", username)

    async def create_if_empty(self, user: UserDocument) -> bool:
        """
        Insert ``user`` unless any user already exists.

        Returns:
            bool: True if the user was inserted
        """
        return await self.insert_if_empty(user.to_document())
