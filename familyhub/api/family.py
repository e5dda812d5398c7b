"""Family & invite API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from familyhub.api.deps import get_current_user, get_settings
from familyhub.config import Settings
from familyhub.database import get_session
from familyhub.models.user import User
from familyhub.schemas.common import MessageResponse, iso
from familyhub.schemas.family import (
    FamilyCreateRequest,
    FamilyJoinRequest,
    FamilyJoinResponse,
    FamilyMemberResponse,
    FamilyResponse,
)
from familyhub.services.family_service import (
    FamilyView,
    create_family,
    delete_family,
    join_family,
    list_families,
    list_members,
)

router = APIRouter(prefix="/family", tags=["family"])


def _family_to_response(view: FamilyView) -> FamilyResponse:
    family = view.family
    return FamilyResponse(
        id=family.id,
        name=family.name,
        invite_code=family.invite_code,
        created_by=family.created_by,
        created_at=iso(family.created_at),
        role=view.role,
        member_count=view.member_count,
    )


@router.get("", response_model=list[FamilyResponse])
def get_families(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List the families the current user belongs to, newest first."""
    return [_family_to_response(v) for v in list_families(session, user)]


@router.post("", response_model=FamilyResponse, status_code=status.HTTP_201_CREATED)
def post_family(
    request: FamilyCreateRequest,
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Create a family. The creator becomes its admin."""
    return _family_to_response(create_family(session, settings, user, request.name))


@router.post("/join", response_model=FamilyJoinResponse)
def join(
    request: FamilyJoinRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Join a family using its invite code."""
    view = join_family(session, user, request.invite_code)
    return FamilyJoinResponse(
        message="Successfully joined family",
        family=_family_to_response(view),
    )


@router.get("/{family_id}/members", response_model=list[FamilyMemberResponse])
def get_members(
    family_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List family members in join order."""
    return [
        FamilyMemberResponse(
            id=member.id,
            username=member.username,
            full_name=member.full_name,
            avatar_color=member.avatar_color,
            avatar_url=member.avatar_url,
            role=membership.role,
            joined_at=iso(membership.joined_at),
        )
        for member, membership in list_members(session, family_id, user)
    ]


@router.delete("/{family_id}", response_model=MessageResponse)
def remove_family(
    family_id: str,
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Delete a family and everything in it. Admin only."""
    delete_family(session, settings, family_id, user)
    return MessageResponse(message="Family deleted successfully")
