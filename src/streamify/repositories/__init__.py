"""Repository layer for data access."""

from .base import BaseRepository
from .friend_request_repository import FriendRequestRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "FriendRequestRepository",
]
