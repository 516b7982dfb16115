"""Service layer for business logic."""

from .auth_service import AuthService
from .stream_client import StreamClient
from .user_service import UserService

__all__ = [
    "AuthService",
    "StreamClient",
    "UserService",
]
