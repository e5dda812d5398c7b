"""Todo schemas."""

from typing import Literal, Optional

from familyhub.schemas.common import CamelModel, NonEmptyStr, UtcDatetime

Priority = Literal["low", "medium", "high"]


class TodoCreateRequest(CamelModel):
    family_id: NonEmptyStr
    title: NonEmptyStr
    description: Optional[str] = None
    priority: Priority = "medium"
    assigned_to: Optional[str] = None
    due_date: Optional[UtcDatetime] = None


class TodoUpdateRequest(CamelModel):
    title: NonEmptyStr
    description: Optional[str] = None
    completed: bool = False
    priority: Priority = "medium"
    assigned_to: Optional[str] = None
    due_date: Optional[UtcDatetime] = None


class TodoResponse(CamelModel):
    id: str
    family_id: str
    title: str
    description: Optional[str]
    completed: bool
    priority: str
    assigned_to: Optional[str]
    assigned_to_name: Optional[str]
    assigned_to_full_name: Optional[str]
    due_date: Optional[str]
    created_by: str
    created_by_name: Optional[str]
    created_at: Optional[str]
