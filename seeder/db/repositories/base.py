"""
Base repository with common document store operations.
"""
import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, PyMongoError

from seeder.core.exceptions import DatabaseUnavailableError, SeedOperationError

logger = logging.getLogger("seeder.db")


class BaseRepository:
    """
    Base repository bound to a single collection.

    Driver errors are re-raised as seeder exceptions so callers only have
    to handle one hierarchy.
    """

    def __init__(self, database: AsyncIOMotorDatabase, collection_name: str):
        """
        Initialize repository with database and collection name.

        Args:
            database: Database handle
            collection_name: Name of the backing collection
        """
        self.database = database
        self.collection_name = collection_name

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.database[self.collection_name]

    def _raise(self, operation: str, exc: PyMongoError) -> None:
        details = {"collection": self.collection_name, "operation": operation, "error": str(exc)}
        if isinstance(exc, ConnectionFailure):
            raise DatabaseUnavailableError(
                message=f"Database unavailable during {operation} on '{self.collection_name}'",
                details=details,
            ) from exc
        raise SeedOperationError(
            message=f"{operation} failed on '{self.collection_name}'",
            details=details,
        ) from exc

    async def count(self, *, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count documents with optional filtering.

        Args:
            filters: Optional query document

        Returns:
            int: Number of documents
        """
        try:
            return await self.collection.count_documents(filters or {})
        except PyMongoError as e:
            self._raise("count", e)

    async def exists(self) -> bool:
        """Check whether the collection holds any document."""
        try:
            return await self.collection.find_one({}, projection={"_id": 1}) is not None
        except PyMongoError as e:
            self._raise("exists", e)

    async def get_first(self) -> Optional[Dict[str, Any]]:
        """Return any one document, or None for an empty collection."""
        try:
            return await self.collection.find_one({})
        except PyMongoError as e:
            self._raise("get_first", e)

    async def get_by_attribute(self, attr_name: str, attr_value: Any) -> Optional[Dict[str, Any]]:
        """
        Get a document by a specific field.

        Args:
            attr_name: Field name
            attr_value: Field value

        Returns:
            dict: Found document or None
        """
        try:
            return await self.collection.find_one({attr_name: attr_value})
        except PyMongoError as e:
            self._raise("get_by_attribute", e)

    async def insert_if_empty(self, document: Dict[str, Any]) -> bool:
        """
        Insert a document only when the collection holds none.

        A single upsert with an empty filter matches any existing document,
        in which case $setOnInsert leaves it untouched.

        Args:
            document: Document to insert

        Returns:
            bool: True if the document was inserted
        """
        try:
            result = await self.collection.update_one(
                {},
                {"$setOnInsert": document},
                upsert=True,
            )
        except PyMongoError as e:
            self._raise("insert_if_empty", e)

        inserted = result.upserted_id is not None
        if inserted:
            logger.debug(f"Inserted {result.upserted_id} into '{self.collection_name}'")
        return inserted
