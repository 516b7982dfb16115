"""Friend request repository."""

from typing import List, Optional

from bson import ObjectId

from .base import BaseRepository, Document
from ..database import FRIEND_REQUESTS

PENDING = "pending"
ACCEPTED = "accepted"


class FriendRequestRepository(BaseRepository):
    """Repository for FriendRequest operations."""

    collection_name = FRIEND_REQUESTS

    async def create_request(self, sender: ObjectId, recipient: ObjectId) -> Document:
        return await self.create(sender=sender, recipient=recipient, status=PENDING)

    async def find_between(self, a: ObjectId, b: ObjectId) -> Optional[Document]:
        """Any request between two users, in either direction."""
        return await self.collection.find_one(
            {
                "$or": [
                    {"sender": a, "recipient": b},
                    {"sender": b, "recipient": a},
                ]
            }
        )

    async def mark_accepted(self, id: ObjectId) -> Optional[Document]:
        return await self.update(id, status=ACCEPTED)

    async def incoming_pending(self, user_id: ObjectId) -> List[Document]:
        return await self.get_multi({"recipient": user_id, "status": PENDING})

    async def accepted_sent(self, user_id: ObjectId) -> List[Document]:
        return await self.get_multi({"sender": user_id, "status": ACCEPTED})

    async def outgoing_pending(self, user_id: ObjectId) -> List[Document]:
        return await self.get_multi({"sender": user_id, "status": PENDING})
