"""Avatar and note attachment upload endpoints."""

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from sqlmodel import Session

from familyhub.api.deps import get_current_user, get_settings
from familyhub.config import Settings
from familyhub.database import get_session
from familyhub.errors import NotFound
from familyhub.models.note import NoteAttachment
from familyhub.models.user import User
from familyhub.schemas.auth import AvatarResponse
from familyhub.schemas.common import MessageResponse, iso
from familyhub.schemas.note import AttachmentResponse
from familyhub.services.attachment_service import (
    attachment_file_path,
    delete_attachment,
    get_attachment,
    list_attachments,
    save_attachment,
)
from familyhub.services.auth_service import update_avatar

router = APIRouter(prefix="/upload", tags=["upload"])


def _attachment_to_response(a: NoteAttachment) -> AttachmentResponse:
    return AttachmentResponse(
        id=a.id,
        note_id=a.note_id,
        filename=a.filename,
        original_name=a.original_name,
        file_size=a.file_size,
        mime_type=a.mime_type,
        uploaded_at=iso(a.uploaded_at),
        url=f"/api/upload/attachment/{a.id}/file",
    )


@router.post("/avatar", response_model=AvatarResponse)
def upload_avatar(
    avatar: UploadFile = File(...),
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Replace the current user's avatar image."""
    avatar_url = update_avatar(
        session, settings, user, avatar.filename or "avatar", avatar.content_type, avatar.file.read()
    )
    return AvatarResponse(message="Avatar uploaded successfully", avatar_url=avatar_url)


@router.post(
    "/attachment/{note_id}",
    response_model=AttachmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_attachment(
    note_id: str,
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Attach a file to a note."""
    attachment = save_attachment(
        session,
        settings,
        note_id,
        user,
        filename=file.filename or "file",
        content_type=file.content_type,
        data=file.file.read(),
    )
    return _attachment_to_response(attachment)


@router.get("/attachments/{note_id}", response_model=list[AttachmentResponse])
def get_attachments(
    note_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return [_attachment_to_response(a) for a in list_attachments(session, note_id, user)]


@router.get("/attachment/{attachment_id}/file")
def download_attachment(
    attachment_id: str,
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    """Download an attachment's original file."""
    attachment = get_attachment(session, attachment_id, user)
    path = attachment_file_path(settings, attachment)
    if not path.exists():
        raise NotFound("File not found on disk")
    return FileResponse(
        path=str(path),
        media_type=attachment.mime_type or "application/octet-stream",
        filename=attachment.original_name,
    )


@router.delete("/attachment/{attachment_id}", response_model=MessageResponse)
def remove_attachment(
    attachment_id: str,
    user: User = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
):
    delete_attachment(session, settings, attachment_id, user)
    return MessageResponse(message="Attachment deleted successfully")
