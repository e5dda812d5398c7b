"""Note attachments: the database row and the file on disk are kept in step.

Upload writes the file first and removes it again if the row cannot be
stored. Delete removes the row first; a file that cannot be removed
afterwards is logged and left behind.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from familyhub.config import Settings
from familyhub.errors import StorageFailure
from familyhub.models.note import Note, NoteAttachment
from familyhub.models.user import User
from familyhub.services.access import get_scoped, get_scoped_attachment
from familyhub.utils.storage import (
    ATTACHMENT_EXTENSIONS,
    remove_file,
    resolve_path,
    save_upload,
    validate_upload,
)

logger = logging.getLogger(__name__)


def save_attachment(
    session: Session,
    settings: Settings,
    note_id: str,
    user: User,
    filename: str,
    content_type: str | None,
    data: bytes,
) -> NoteAttachment:
    validate_upload(filename, data, ATTACHMENT_EXTENSIONS, settings.max_attachment_bytes, "attachments")
    note = get_scoped(session, Note, note_id, user.id)

    try:
        relative = save_upload(settings, "attachments", filename, data)
    except OSError as e:
        raise StorageFailure("Failed to upload attachment") from e
    stored_path = relative.as_posix()

    attachment = NoteAttachment(
        note_id=note.id,
        filename=relative.name,
        original_name=filename,
        file_path=stored_path,
        file_size=len(data),
        mime_type=content_type,
    )
    session.add(attachment)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        remove_file(settings, stored_path)
        raise StorageFailure("Failed to upload attachment") from e

    session.refresh(attachment)
    return attachment


def list_attachments(session: Session, note_id: str, user: User) -> list[NoteAttachment]:
    note = get_scoped(session, Note, note_id, user.id)
    return list(
        session.exec(
            select(NoteAttachment)
            .where(NoteAttachment.note_id == note.id)
            .order_by(col(NoteAttachment.uploaded_at).asc())
        ).all()
    )


def get_attachment(session: Session, attachment_id: str, user: User) -> NoteAttachment:
    return get_scoped_attachment(session, attachment_id, user.id)


def attachment_file_path(settings: Settings, attachment: NoteAttachment):
    return resolve_path(settings, attachment.file_path)


def delete_attachment(session: Session, settings: Settings, attachment_id: str, user: User) -> None:
    attachment = get_scoped_attachment(session, attachment_id, user.id)
    stored_path = attachment.file_path

    session.delete(attachment)
    session.commit()

    if not remove_file(settings, stored_path):
        logger.warning("Orphaned attachment file left behind: %s", stored_path)
