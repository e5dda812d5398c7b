"""Calendar API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from familyhub.api.deps import get_current_user
from familyhub.api.lookups import resolve_users
from familyhub.database import get_session
from familyhub.models.event import Event
from familyhub.models.user import User
from familyhub.schemas.common import MessageResponse, iso
from familyhub.schemas.event import EventCreateRequest, EventResponse, EventUpdateRequest
from familyhub.services.event_service import (
    create_event,
    delete_event,
    get_event,
    list_events,
    update_event,
)

router = APIRouter(prefix="/calendar", tags=["calendar"])


def _event_to_response(e: Event, creator: User | None) -> EventResponse:
    return EventResponse(
        id=e.id,
        family_id=e.family_id,
        title=e.title,
        description=e.description,
        start_date=iso(e.start_date),
        end_date=iso(e.end_date),
        all_day=bool(e.all_day),
        color=e.color,
        created_by=e.created_by,
        created_by_name=creator.username if creator else None,
        created_by_full_name=creator.full_name if creator else None,
        created_at=iso(e.created_at),
    )


@router.get("/{family_id}", response_model=list[EventResponse])
def get_events(
    family_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List a family's events, earliest first."""
    events = list_events(session, family_id, user)
    users = resolve_users({e.created_by for e in events}, session)
    return [_event_to_response(e, users.get(e.created_by)) for e in events]


@router.get("/event/{event_id}", response_model=EventResponse)
def get_one_event(
    event_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    event = get_event(session, event_id, user)
    return _event_to_response(event, session.get(User, event.created_by))


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def post_event(
    request: EventCreateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    event = create_event(
        session,
        user,
        family_id=request.family_id,
        title=request.title,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
        all_day=request.all_day,
        color=request.color,
    )
    return _event_to_response(event, user)


@router.put("/{event_id}", response_model=EventResponse)
def put_event(
    event_id: str,
    request: EventUpdateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Replace an event's fields."""
    event = update_event(
        session,
        event_id,
        user,
        title=request.title,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
        all_day=request.all_day,
        color=request.color,
    )
    return _event_to_response(event, session.get(User, event.created_by))


@router.delete("/{event_id}", response_model=MessageResponse)
def remove_event(
    event_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    delete_event(session, event_id, user)
    return MessageResponse(message="Event deleted successfully")
