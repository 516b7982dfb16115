"""User router: recommendations, friends and friend requests."""

from typing import List

from fastapi import Depends, status

from ..repositories.base import Document
from ..schemas import (
    FriendRequestResponse,
    FriendRequestsResponse,
    FriendSummary,
    MessageResponse,
    UserResponse,
)
from ..services import UserService
from .dependencies import get_current_user, get_user_service
from .registrar import RouteRegistrar

registrar = RouteRegistrar(prefix="/users", tags=["users"])
router = registrar.router


@registrar.get("/", response_model=List[UserResponse], protected=True)
async def get_recommended_users(
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Onboarded users that are not yet friends."""
    users = await user_service.recommended_users(current_user)
    return [UserResponse.from_document(u) for u in users]


@registrar.get("/friends", response_model=List[FriendSummary], protected=True)
async def get_my_friends(
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    friends = await user_service.friends(current_user)
    return [FriendSummary.model_validate(f) for f in friends]


@registrar.post(
    "/friend-request/{id}",
    response_model=FriendRequestResponse,
    status_code=status.HTTP_201_CREATED,
    protected=True,
)
async def send_friend_request(
    id: str,
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Send a friend request to user `id`."""
    friend_request = await user_service.send_friend_request(current_user, id)
    return FriendRequestResponse.model_validate(friend_request)


@registrar.put("/friend-request/{id}/accept", response_model=MessageResponse, protected=True)
async def accept_friend_request(
    id: str,
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    """Accept friend request `id`; both users become friends."""
    await user_service.accept_friend_request(current_user, id)
    return MessageResponse(message="Friend request accepted")


@registrar.get("/friend-requests", response_model=FriendRequestsResponse, protected=True)
async def get_friend_requests(
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    requests = await user_service.friend_requests(current_user)
    return FriendRequestsResponse.model_validate(requests)


@registrar.get("/outgoing-friend-requests", response_model=List[FriendRequestResponse], protected=True)
async def get_outgoing_friend_requests(
    current_user: Document = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    requests = await user_service.outgoing_friend_requests(current_user)
    return [FriendRequestResponse.model_validate(r) for r in requests]
