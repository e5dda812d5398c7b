"""Family notes. Deleting a note takes its attachments with it."""

import logging
from datetime import datetime, timezone

from sqlmodel import Session, col, select

from familyhub.config import Settings
from familyhub.models.note import Note, NoteAttachment
from familyhub.models.user import User
from familyhub.services.access import get_scoped, require_member
from familyhub.utils.storage import remove_file

logger = logging.getLogger(__name__)


def create_note(session: Session, user: User, family_id: str, title: str, content: str | None = None) -> Note:
    require_member(session, user.id, family_id)
    note = Note(family_id=family_id, title=title, content=content or "", created_by=user.id)
    session.add(note)
    session.commit()
    session.refresh(note)
    return note


def list_notes(session: Session, family_id: str, user: User) -> list[Note]:
    """Notes of a family, most recently edited first."""
    require_member(session, user.id, family_id)
    return list(
        session.exec(
            select(Note)
            .where(Note.family_id == family_id)
            .order_by(col(Note.updated_at).desc())
        ).all()
    )


def get_note(session: Session, note_id: str, user: User) -> Note:
    return get_scoped(session, Note, note_id, user.id)


def update_note(session: Session, note_id: str, user: User, title: str, content: str | None = None) -> Note:
    note = get_scoped(session, Note, note_id, user.id)
    note.title = title
    note.content = content or ""
    note.updated_at = datetime.now(timezone.utc)
    session.add(note)
    session.commit()
    session.refresh(note)
    return note


def delete_note(session: Session, settings: Settings, note_id: str, user: User) -> None:
    """Delete a note; attachment rows cascade, their files are removed after the commit."""
    note = get_scoped(session, Note, note_id, user.id)
    file_paths = session.exec(
        select(NoteAttachment.file_path).where(NoteAttachment.note_id == note.id)
    ).all()

    session.delete(note)
    session.commit()

    for path in file_paths:
        if not remove_file(settings, path):
            logger.warning("Orphaned attachment file left behind: %s", path)
