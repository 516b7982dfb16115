"""Security utilities for authentication."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import BaseModel


JWT_ALGORITHM = "HS256"
AUTH_COOKIE_NAME = "jwt"


class TokenPayload(BaseModel):
    """JWT token payload."""
    userId: str
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        return False


def create_access_token(user_id: str, secret: str, expires_days: int = 7) -> str:
    """
    Create the session JWT stored in the auth cookie.

    Args:
        user_id: User document id (hex string)
        secret: Signing secret
        expires_days: Token lifetime in days

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "exp": int((now + timedelta(days=expires_days)).timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_access_token(token: str, secret: str) -> Optional[TokenPayload]:
    """Return the payload if the token is valid, None otherwise."""
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
        return TokenPayload(**payload)
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError):
        return None
    except (TypeError, ValueError):
        # Signed with our secret but missing userId/exp
        return None


def create_stream_token(user_id: str, api_secret: str) -> str:
    """Create a chat-service user token (HS256, `user_id` claim)."""
    return jwt.encode({"user_id": user_id}, api_secret, algorithm=JWT_ALGORITHM)


def create_stream_server_token(api_secret: str) -> str:
    """Create a chat-service server-side token."""
    return jwt.encode({"server": True}, api_secret, algorithm=JWT_ALGORITHM)
