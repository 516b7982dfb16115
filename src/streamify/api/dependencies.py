"""Dependency injection for FastAPI endpoints."""

from fastapi import Depends, Request
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config import Settings
from ..context import AppContext
from ..core.exceptions import ConfigurationError, UnauthorizedError
from ..core.security import AUTH_COOKIE_NAME, verify_access_token
from ..repositories import FriendRequestRepository, UserRepository
from ..repositories.base import Document, to_object_id
from ..services import AuthService, StreamClient, UserService


# Context dependencies
def get_context(request: Request) -> AppContext:
    """Get the application context built by create_app."""
    return request.app.state.context


def get_settings(context: AppContext = Depends(get_context)) -> Settings:
    return context.settings


def get_database(context: AppContext = Depends(get_context)) -> AsyncIOMotorDatabase:
    """Get the connected database handle."""
    if context.database is None:
        raise ConfigurationError("Database is not connected")
    return context.database


def get_stream_client(context: AppContext = Depends(get_context)) -> StreamClient:
    return context.stream


# Repository dependencies
def get_user_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> UserRepository:
    """Get UserRepository instance."""
    return UserRepository(db)


def get_friend_request_repository(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> FriendRequestRepository:
    """Get FriendRequestRepository instance."""
    return FriendRequestRepository(db)


# Service dependencies
def get_auth_service(
    settings: Settings = Depends(get_settings),
    user_repo: UserRepository = Depends(get_user_repository),
    stream: StreamClient = Depends(get_stream_client),
) -> AuthService:
    """Get AuthService instance."""
    return AuthService(
        user_repo,
        stream,
        jwt_secret=settings.JWT_SECRET_KEY.get_secret_value(),
        token_expires_days=settings.JWT_EXPIRES_DAYS,
    )


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    request_repo: FriendRequestRepository = Depends(get_friend_request_repository),
) -> UserService:
    """Get UserService instance."""
    return UserService(user_repo, request_repo)


# Authentication guard
async def protect_route(
    request: Request,
    settings: Settings = Depends(get_settings),
    user_repo: UserRepository = Depends(get_user_repository),
) -> Document:
    """
    Authenticate the request from the session cookie.

    Cookies come from the cookie-decoding pipeline stage. On success the user
    (without password) is stored on `request.state.user`.

    Raises:
        UnauthorizedError: No token, invalid token, or unknown user
    """
    cookies = getattr(request.state, "cookies", {})
    token = cookies.get(AUTH_COOKIE_NAME)
    if not token:
        raise UnauthorizedError("Unauthorized - No token provided")

    payload = verify_access_token(token, settings.JWT_SECRET_KEY.get_secret_value())
    user_id = to_object_id(payload.userId) if payload else None
    if user_id is None:
        raise UnauthorizedError("Unauthorized - Invalid token")

    user = await user_repo.get_public(user_id)
    if user is None:
        logger.warning(f"Valid token for missing user {user_id}")
        raise UnauthorizedError("Unauthorized - User not found")

    request.state.user = user
    return user


def get_current_user(request: Request) -> Document:
    """The user stored by `protect_route`; only valid on protected routes."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise UnauthorizedError("Unauthorized - No token provided")
    return user
