"""Authentication service: signup, login and onboarding."""

import random
import re
from typing import Optional, Tuple

from loguru import logger
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import ConflictError, InvalidCredentialsError, ValidationError
from ..core.security import create_access_token, hash_password, verify_password
from ..repositories.base import Document
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, OnboardingRequest, SignupRequest
from .stream_client import StreamClient

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
AVATAR_URL = "https://avatar.iran.liara.run/public/{}.png"
ONBOARDING_FIELDS = {
    "full_name": "fullName",
    "bio": "bio",
    "native_language": "nativeLanguage",
    "learning_language": "learningLanguage",
    "location": "location",
}


def _public(user: Document) -> Document:
    return {k: v for k, v in user.items() if k != "password"}


class AuthService:
    """Authentication service."""

    def __init__(
        self,
        user_repo: UserRepository,
        stream: StreamClient,
        jwt_secret: str,
        token_expires_days: int = 7,
    ):
        self.user_repo = user_repo
        self.stream = stream
        self.jwt_secret = jwt_secret
        self.token_expires_days = token_expires_days

    def issue_token(self, user_id) -> str:
        return create_access_token(str(user_id), self.jwt_secret, self.token_expires_days)

    async def signup(self, data: SignupRequest) -> Tuple[Document, str]:
        """
        Register a new user.

        Returns: (user without password, session token)
        """
        if not data.email or not data.password or not data.full_name:
            raise ValidationError("All fields are required")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if not EMAIL_RE.match(data.email):
            raise ValidationError("Invalid email format")

        if await self.user_repo.email_exists(data.email):
            raise ConflictError("Email already exists, please use a different one")

        avatar = AVATAR_URL.format(random.randint(1, 100))
        try:
            user = await self.user_repo.create_user(
                email=data.email,
                full_name=data.full_name,
                password_hash=hash_password(data.password),
                profile_pic=avatar,
            )
        except DuplicateKeyError:
            # Lost a race with a concurrent signup
            raise ConflictError("Email already exists, please use a different one")

        user = _public(user)
        await self.stream.upsert_user(user)
        logger.info(f"User signed up: {user['_id']}")
        return user, self.issue_token(user["_id"])

    async def login(self, data: LoginRequest) -> Tuple[Document, str]:
        """Check credentials and return (user, session token)."""
        if not data.email or not data.password:
            raise ValidationError("All fields are required")

        user = await self.user_repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user["password"]):
            raise InvalidCredentialsError("Invalid email or password")

        return _public(user), self.issue_token(user["_id"])

    async def onboard(self, user: Document, data: OnboardingRequest) -> Optional[Document]:
        """Complete the user's profile."""
        values = data.model_dump()
        missing = [alias for field, alias in ONBOARDING_FIELDS.items() if not values.get(field)]
        if missing:
            raise ValidationError("All fields are required", extra={"missingFields": missing})

        updated = await self.user_repo.update(
            user["_id"],
            **{alias: values[field] for field, alias in ONBOARDING_FIELDS.items()},
            isOnboarded=True,
        )
        if updated is None:
            return None

        updated = _public(updated)
        await self.stream.upsert_user(updated)
        logger.info(f"User onboarded: {updated['_id']}")
        return updated
