"""Base repository pattern for all data access."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

Document = Dict[str, Any]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse a hex id, returning None when it is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


class BaseRepository:
    """
    Base repository with common CRUD operations on one collection.

    All repositories should inherit from this class.
    """

    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize repository.

        Args:
            db: Motor database handle
        """
        self.db = db
        self.collection: AsyncIOMotorCollection = db[self.collection_name]

    async def get(self, id: ObjectId, projection: Optional[Document] = None) -> Optional[Document]:
        """Get single document by ID."""
        return await self.collection.find_one({"_id": id}, projection)

    async def get_multi(
        self,
        query: Document,
        projection: Optional[Document] = None,
    ) -> List[Document]:
        """Get documents matching a query."""
        cursor = self.collection.find(query, projection)
        return await cursor.to_list(length=None)

    async def create(self, **data) -> Document:
        """Create new document with timestamps."""
        now = utcnow()
        document = {**data, "createdAt": now, "updatedAt": now}
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def update(self, id: ObjectId, **data) -> Optional[Document]:
        """Set fields on an existing document and return it."""
        result = await self.collection.update_one(
            {"_id": id},
            {"$set": {**data, "updatedAt": utcnow()}},
        )
        if result.matched_count == 0:
            return None
        return await self.get(id)

    async def exists(self, query: Document) -> bool:
        """Check if any document matches."""
        return await self.collection.find_one(query, {"_id": 1}) is not None
