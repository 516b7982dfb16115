"""Authentication schemas.

Fields are optional so that missing values reach the controller, which
answers with its own validation messages.
"""

from typing import Optional

from .common import APIModel


class SignupRequest(APIModel):
    """Signup request."""
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None


class LoginRequest(APIModel):
    """Login request."""
    email: Optional[str] = None
    password: Optional[str] = None


class OnboardingRequest(APIModel):
    """Profile completion request."""
    full_name: Optional[str] = None
    bio: Optional[str] = None
    native_language: Optional[str] = None
    learning_language: Optional[str] = None
    location: Optional[str] = None
