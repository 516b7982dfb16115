"""User repository with authentication and friendship queries."""

from typing import List, Optional

from bson import ObjectId

from .base import BaseRepository, Document, utcnow
from ..database import USERS

# Never returned to handlers
PUBLIC_PROJECTION = {"password": 0}
FRIEND_PROJECTION = {
    "fullName": 1,
    "profilePic": 1,
    "nativeLanguage": 1,
    "learningLanguage": 1,
}
ACCEPTED_PROJECTION = {"fullName": 1, "profilePic": 1}


class UserRepository(BaseRepository):
    """Repository for User operations."""

    collection_name = USERS

    async def create_user(
        self,
        email: str,
        full_name: str,
        password_hash: str,
        profile_pic: str = "",
    ) -> Document:
        """Insert a user with profile defaults."""
        return await self.create(
            email=email,
            fullName=full_name,
            password=password_hash,
            bio="",
            profilePic=profile_pic,
            nativeLanguage="",
            learningLanguage="",
            location="",
            isOnboarded=False,
            friends=[],
        )

    async def get_public(self, id: ObjectId) -> Optional[Document]:
        """Get user without the password hash."""
        return await self.get(id, PUBLIC_PROJECTION)

    async def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email address (includes password hash)."""
        return await self.collection.find_one({"email": email})

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        return await self.exists({"email": email})

    async def get_recommended(self, user_id: ObjectId, friend_ids: List[ObjectId]) -> List[Document]:
        """Onboarded users who are neither me nor my friends."""
        return await self.get_multi(
            {
                "$and": [
                    {"_id": {"$ne": user_id}},
                    {"_id": {"$nin": friend_ids}},
                    {"isOnboarded": True},
                ]
            },
            PUBLIC_PROJECTION,
        )

    async def get_many(self, ids: List[ObjectId], projection: Document) -> List[Document]:
        """Fetch users by id, keeping the order of `ids`."""
        if not ids:
            return []
        docs = await self.get_multi({"_id": {"$in": ids}}, projection)
        by_id = {doc["_id"]: doc for doc in docs}
        return [by_id[i] for i in ids if i in by_id]

    async def add_friend(self, user_id: ObjectId, friend_id: ObjectId) -> None:
        """Add `friend_id` to the user's friends (no duplicates)."""
        await self.collection.update_one(
            {"_id": user_id},
            {"$addToSet": {"friends": friend_id}, "$set": {"updatedAt": utcnow()}},
        )
