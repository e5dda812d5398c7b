"""Family and membership schemas."""

from typing import Optional

from familyhub.schemas.common import CamelModel, NonEmptyStr


class FamilyCreateRequest(CamelModel):
    name: NonEmptyStr


class FamilyJoinRequest(CamelModel):
    invite_code: NonEmptyStr


class FamilyResponse(CamelModel):
    id: str
    name: str
    invite_code: str
    created_by: str
    created_at: Optional[str]
    role: str
    member_count: int


class FamilyJoinResponse(CamelModel):
    message: str
    family: FamilyResponse


class FamilyMemberResponse(CamelModel):
    id: str
    username: str
    full_name: str
    avatar_color: str
    avatar_url: Optional[str]
    role: str
    joined_at: Optional[str]
