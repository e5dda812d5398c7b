"""Calendar event schemas."""

from typing import Optional

from familyhub.schemas.common import CamelModel, HexColor, NonEmptyStr, UtcDatetime


class EventUpdateRequest(CamelModel):
    title: NonEmptyStr
    description: Optional[str] = None
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    all_day: bool = False
    color: Optional[HexColor] = None


class EventCreateRequest(EventUpdateRequest):
    family_id: NonEmptyStr


class EventResponse(CamelModel):
    id: str
    family_id: str
    title: str
    description: Optional[str]
    start_date: str
    end_date: Optional[str]
    all_day: bool
    color: str
    created_by: str
    created_by_name: Optional[str]
    created_by_full_name: Optional[str]
    created_at: Optional[str]
