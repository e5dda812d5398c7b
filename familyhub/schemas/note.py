"""Note and attachment schemas."""

from typing import Optional

from familyhub.schemas.common import CamelModel, NonEmptyStr


class NoteUpdateRequest(CamelModel):
    title: NonEmptyStr
    content: Optional[str] = None


class NoteCreateRequest(NoteUpdateRequest):
    family_id: NonEmptyStr


class NoteResponse(CamelModel):
    id: str
    family_id: str
    title: str
    content: str
    created_by: str
    created_by_name: Optional[str]
    created_by_full_name: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]


class AttachmentResponse(CamelModel):
    id: str
    note_id: str
    filename: str
    original_name: str
    file_size: int
    mime_type: Optional[str]
    uploaded_at: Optional[str]
    url: str
