"""User schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import APIModel, ObjectIdStr


class UserResponse(APIModel):
    """User as returned to the frontend (never carries the password hash)."""
    id: ObjectIdStr = Field(alias="_id")
    email: str
    full_name: str
    bio: str = ""
    profile_pic: str = ""
    native_language: str = ""
    learning_language: str = ""
    location: str = ""
    is_onboarded: bool = False
    friends: List[ObjectIdStr] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserResponse":
        return cls.model_validate(doc)


class FriendSummary(APIModel):
    """Populated user reference."""
    id: ObjectIdStr = Field(alias="_id")
    full_name: str = ""
    profile_pic: str = ""
    native_language: Optional[str] = None
    learning_language: Optional[str] = None


class AuthUserResponse(APIModel):
    """Success envelope around a user."""
    success: bool = True
    user: UserResponse
