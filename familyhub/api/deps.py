"""Common API dependencies: settings and current user extraction."""

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from familyhub.config import Settings
from familyhub.database import get_session
from familyhub.errors import AuthError
from familyhub.models.user import User
from familyhub.utils.security import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
) -> User:
    """Extract and validate user from JWT access token."""
    if credentials is None:
        raise AuthError("Access token required")

    try:
        payload = decode_token(settings, credentials.credentials)
    except jwt.PyJWTError:
        raise AuthError("Invalid or expired token")

    if payload.get("type") != "access":
        raise AuthError("Invalid token type")

    user_id = payload.get("sub")
    user = session.get(User, user_id) if user_id else None
    if not user:
        raise AuthError("User not found")
    return user
