"""Pydantic schemas for API request/response models."""

from .auth import LoginRequest, OnboardingRequest, SignupRequest
from .chat import StreamTokenResponse
from .common import ErrorResponse, HealthResponse, MessageResponse
from .friend import FriendRequestResponse, FriendRequestsResponse
from .user import AuthUserResponse, FriendSummary, UserResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "OnboardingRequest",
    "StreamTokenResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "FriendRequestResponse",
    "FriendRequestsResponse",
    "AuthUserResponse",
    "FriendSummary",
    "UserResponse",
]
