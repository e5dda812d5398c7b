"""Calendar events scoped to a family."""

from datetime import datetime

from sqlmodel import Session, col, select

from familyhub.errors import ValidationError
from familyhub.models.event import Event
from familyhub.models.user import User
from familyhub.services.access import get_scoped, require_member

DEFAULT_COLOR = "#3B82F6"


def _check_range(start_date: datetime, end_date: datetime | None) -> None:
    if end_date is not None and end_date < start_date:
        raise ValidationError("End date must not be before start date")


def create_event(
    session: Session,
    user: User,
    family_id: str,
    title: str,
    start_date: datetime,
    description: str | None = None,
    end_date: datetime | None = None,
    all_day: bool = False,
    color: str | None = None,
) -> Event:
    require_member(session, user.id, family_id)
    _check_range(start_date, end_date)

    event = Event(
        family_id=family_id,
        title=title,
        description=description or None,
        start_date=start_date,
        end_date=end_date,
        all_day=all_day,
        color=color or DEFAULT_COLOR,
        created_by=user.id,
    )
    session.add(event)
    session.commit()
    session.refresh(event)
    return event


def list_events(session: Session, family_id: str, user: User) -> list[Event]:
    """All events of a family, earliest start first."""
    require_member(session, user.id, family_id)
    return list(
        session.exec(
            select(Event)
            .where(Event.family_id == family_id)
            .order_by(col(Event.start_date).asc())
        ).all()
    )


def get_event(session: Session, event_id: str, user: User) -> Event:
    return get_scoped(session, Event, event_id, user.id)


def update_event(
    session: Session,
    event_id: str,
    user: User,
    title: str,
    start_date: datetime,
    description: str | None = None,
    end_date: datetime | None = None,
    all_day: bool = False,
    color: str | None = None,
) -> Event:
    """Replace all mutable fields of an event."""
    event = get_scoped(session, Event, event_id, user.id)
    _check_range(start_date, end_date)

    event.title = title
    event.description = description or None
    event.start_date = start_date
    event.end_date = end_date
    event.all_day = all_day
    event.color = color or DEFAULT_COLOR
    session.add(event)
    session.commit()
    session.refresh(event)
    return event


def delete_event(session: Session, event_id: str, user: User) -> None:
    event = get_scoped(session, Event, event_id, user.id)
    session.delete(event)
    session.commit()
