"""Friendship service."""

from typing import Dict, List

from bson import ObjectId

from ..core.exceptions import ConflictError, ForbiddenError, ResourceNotFoundError, ValidationError
from ..repositories.base import Document, to_object_id
from ..repositories.friend_request_repository import FriendRequestRepository
from ..repositories.user_repository import (
    ACCEPTED_PROJECTION,
    FRIEND_PROJECTION,
    UserRepository,
)


class UserService:
    """Recommendations, friends and friend requests."""

    def __init__(self, user_repo: UserRepository, request_repo: FriendRequestRepository):
        self.user_repo = user_repo
        self.request_repo = request_repo

    async def recommended_users(self, user: Document) -> List[Document]:
        return await self.user_repo.get_recommended(user["_id"], user.get("friends", []))

    async def friends(self, user: Document) -> List[Document]:
        return await self.user_repo.get_many(user.get("friends", []), FRIEND_PROJECTION)

    async def send_friend_request(self, user: Document, recipient_id: str) -> Document:
        recipient_oid = to_object_id(recipient_id)
        if recipient_oid is None:
            raise ValidationError("Invalid user id")

        my_id = user["_id"]
        if recipient_oid == my_id:
            raise ValidationError("You can't send friend request to yourself")

        recipient = await self.user_repo.get_public(recipient_oid)
        if recipient is None:
            raise ResourceNotFoundError("Recipient not found")

        if my_id in recipient.get("friends", []):
            raise ConflictError("You are already friends with this user")

        if await self.request_repo.find_between(my_id, recipient_oid) is not None:
            raise ConflictError("A friend request already exists between you and this user")

        return await self.request_repo.create_request(my_id, recipient_oid)

    async def accept_friend_request(self, user: Document, request_id: str) -> None:
        request_oid = to_object_id(request_id)
        friend_request = await self.request_repo.get(request_oid) if request_oid else None
        if friend_request is None:
            raise ResourceNotFoundError("Friend request not found")

        if friend_request["recipient"] != user["_id"]:
            raise ForbiddenError("You are not authorized to accept this request")

        await self.request_repo.mark_accepted(request_oid)
        await self.user_repo.add_friend(friend_request["sender"], friend_request["recipient"])
        await self.user_repo.add_friend(friend_request["recipient"], friend_request["sender"])

    async def friend_requests(self, user: Document) -> Dict[str, List[Document]]:
        incoming = await self.request_repo.incoming_pending(user["_id"])
        accepted = await self.request_repo.accepted_sent(user["_id"])
        return {
            "incoming_reqs": await self._populate(incoming, "sender", FRIEND_PROJECTION),
            "accepted_reqs": await self._populate(accepted, "recipient", ACCEPTED_PROJECTION),
        }

    async def outgoing_friend_requests(self, user: Document) -> List[Document]:
        outgoing = await self.request_repo.outgoing_pending(user["_id"])
        return await self._populate(outgoing, "recipient", FRIEND_PROJECTION)

    async def _populate(self, requests: List[Document], field: str, projection: Document) -> List[Document]:
        """Replace the id in `field` with the referenced user."""
        ids: List[ObjectId] = list(dict.fromkeys(r[field] for r in requests))
        users = {u["_id"]: u for u in await self.user_repo.get_many(ids, projection)}
        return [{**r, field: users.get(r[field], r[field])} for r in requests]
