"""Authentication endpoints."""

from fastapi import Depends, Response, status

from ..config import Settings
from ..core.exceptions import ResourceNotFoundError
from ..core.security import AUTH_COOKIE_NAME
from ..repositories.base import Document
from ..schemas import (
    AuthUserResponse,
    LoginRequest,
    MessageResponse,
    OnboardingRequest,
    SignupRequest,
    UserResponse,
)
from ..services import AuthService
from .dependencies import get_auth_service, get_current_user, get_settings
from .registrar import RouteRegistrar

registrar = RouteRegistrar(prefix="/auth", tags=["auth"])
router = registrar.router


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        AUTH_COOKIE_NAME,
        token,
        max_age=settings.JWT_EXPIRES_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="strict",
        secure=settings.is_production,
    )


@registrar.post("/signup", response_model=AuthUserResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Create an account and start a session."""
    user, token = await auth_service.signup(data)
    _set_auth_cookie(response, token, settings)
    return AuthUserResponse(user=UserResponse.from_document(user))


@registrar.post("/login", response_model=AuthUserResponse)
async def login(
    data: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Login with email and password."""
    user, token = await auth_service.login(data)
    _set_auth_cookie(response, token, settings)
    return AuthUserResponse(user=UserResponse.from_document(user))


@registrar.post("/logout", response_model=MessageResponse)
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    """Clear the session cookie."""
    response.delete_cookie(
        AUTH_COOKIE_NAME,
        httponly=True,
        samesite="strict",
        secure=settings.is_production,
    )
    return MessageResponse(message="Logout successful")


@registrar.post("/onboarding", response_model=AuthUserResponse, protected=True)
async def onboard(
    data: OnboardingRequest,
    current_user: Document = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Complete the profile of the logged-in user."""
    user = await auth_service.onboard(current_user, data)
    if user is None:
        raise ResourceNotFoundError("User not found")
    return AuthUserResponse(user=UserResponse.from_document(user))


# check if user is logged in
@registrar.get("/me", response_model=AuthUserResponse, protected=True)
async def get_me(current_user: Document = Depends(get_current_user)):
    """Get current authenticated user information."""
    return AuthUserResponse(user=UserResponse.from_document(current_user))
