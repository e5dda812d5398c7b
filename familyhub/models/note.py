"""Note and attachment models."""

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Note(SQLModel, table=True):
    __tablename__ = "notes"

    id: str = Field(default_factory=lambda: f"not_{secrets.token_hex(4)}", primary_key=True)
    family_id: str = Field(foreign_key="families.id", index=True, ondelete="CASCADE")
    title: str
    content: str = Field(default="")
    created_by: str = Field(foreign_key="users.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))


class NoteAttachment(SQLModel, table=True):
    __tablename__ = "note_attachments"

    id: str = Field(default_factory=lambda: f"att_{secrets.token_hex(4)}", primary_key=True)
    note_id: str = Field(foreign_key="notes.id", index=True, ondelete="CASCADE")
    filename: str  # stored name on disk
    original_name: str
    file_path: str  # relative to the upload dir
    file_size: int
    mime_type: Optional[str] = None
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
