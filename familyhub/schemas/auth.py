"""Auth and profile request/response schemas."""

from typing import Annotated, Optional

from pydantic import EmailStr, StringConstraints

from familyhub.schemas.common import CamelModel, HexColor, NonEmptyStr


# --- Auth ---

class RegisterRequest(CamelModel):
    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3)]
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=6)]
    full_name: NonEmptyStr


class LoginRequest(CamelModel):
    username: NonEmptyStr
    password: Annotated[str, StringConstraints(min_length=1)]


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    full_name: str
    avatar_color: str
    avatar_url: Optional[str]
    created_at: Optional[str]


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserResponse


# --- Profile ---

class ProfileUpdateRequest(CamelModel):
    full_name: Optional[NonEmptyStr] = None
    email: Optional[EmailStr] = None
    avatar_color: Optional[HexColor] = None


class AvatarResponse(CamelModel):
    message: str
    avatar_url: str
