"""Todo model."""

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    id: str = Field(default_factory=lambda: f"tdo_{secrets.token_hex(4)}", primary_key=True)
    family_id: str = Field(foreign_key="families.id", index=True, ondelete="CASCADE")
    title: str
    description: Optional[str] = None
    completed: bool = Field(default=False)
    priority: str = Field(default="medium")  # 'low' | 'medium' | 'high'
    assigned_to: Optional[str] = Field(default=None, foreign_key="users.id")
    due_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    created_by: str = Field(foreign_key="users.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
