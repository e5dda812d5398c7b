"""Authentication & profile API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from familyhub.api.deps import get_current_user, get_settings
from familyhub.config import Settings
from familyhub.database import get_session
from familyhub.models.user import User
from familyhub.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from familyhub.schemas.common import iso
from familyhub.services.auth_service import authenticate, register_user, update_profile

router = APIRouter(prefix="/auth", tags=["auth"])


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
        avatar_color=user.avatar_color,
        avatar_url=user.avatar_url,
        created_at=iso(user.created_at),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Create an account and return an access token."""
    token, user = register_user(
        session,
        settings,
        username=request.username,
        email=request.email,
        password=request.password,
        full_name=request.full_name,
    )
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=user_to_response(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    token, user = authenticate(session, settings, request.username, request.password)
    return AuthResponse(message="Login successful", token=token, user=user_to_response(user))


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    """Get current user's profile."""
    return user_to_response(user)


@router.patch("/me", response_model=UserResponse)
def update_me(
    request: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Update current user's profile."""
    user = update_profile(
        session,
        user,
        full_name=request.full_name,
        email=request.email,
        avatar_color=request.avatar_color,
    )
    return user_to_response(user)
