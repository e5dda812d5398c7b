"""Notes API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from familyhub.api.deps import get_current_user, get_settings
from familyhub.api.lookups import resolve_users
from familyhub.config import Settings
from familyhub.database import get_session
from familyhub.models.note import Note
from familyhub.models.user import User
from familyhub.schemas.common import MessageResponse, iso
from familyhub.schemas.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from familyhub.services.note_service import (
    create_note,
    delete_note,
    get_note,
    list_notes,
    update_note,
)

router = APIRouter(prefix="/notes", tags=["notes"])


def _note_to_response(n: Note, creator: User | None) -> NoteResponse:
    return NoteResponse(
        id=n.id,
        family_id=n.family_id,
        title=n.title,
        content=n.content,
        created_by=n.created_by,
        created_by_name=creator.username if creator else None,
        created_by_full_name=creator.full_name if creator else None,
        created_at=iso(n.created_at),
        updated_at=iso(n.updated_at),
    )


@router.get("/{family_id}", response_model=list[NoteResponse])
def get_notes(
    family_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List a family's notes, most recently edited first."""
    notes = list_notes(session, family_id, user)
    users = resolve_users({n.created_by for n in notes}, session)
    return [_note_to_response(n, users.get(n.created_by)) for n in notes]


@router.get("/note/{note_id}", response_model=NoteResponse)
def get_one_note(
    note_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    note = get_note(session, note_id, user)
    return _note_to_response(note, session.get(User, note.created_by))


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def post_note(
    request: NoteCreateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    note = create_note(session, user, request.family_id, request.title, request.content)
    return _note_to_response(note, user)


@router.put("/{note_id}", response_model=NoteResponse)
def put_note(
    note_id: str,
    request: NoteUpdateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    note = update_note(session, note_id, user, request.title, request.content)
    return _note_to_response(note, session.get(User, note.created_by))


@router.delete("/{note_id}", response_model=MessageResponse)
def remove_note(
    note_id: str,
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Delete a note together with its attachments."""
    delete_note(session, settings, note_id, user)
    return MessageResponse(message="Note deleted successfully")
