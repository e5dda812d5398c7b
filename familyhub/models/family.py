"""Family and membership models."""

import secrets
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Family(SQLModel, table=True):
    __tablename__ = "families"

    id: str = Field(default_factory=lambda: f"fam_{secrets.token_hex(4)}", primary_key=True)
    name: str
    invite_code: str = Field(unique=True, index=True)  # 8 upper-case hex chars
    created_by: str = Field(foreign_key="users.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))


class FamilyMember(SQLModel, table=True):
    __tablename__ = "family_members"

    family_id: str = Field(foreign_key="families.id", primary_key=True, ondelete="CASCADE")
    user_id: str = Field(foreign_key="users.id", primary_key=True, index=True, ondelete="CASCADE")
    role: str = Field(default="member")  # 'admin' | 'member'
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))
