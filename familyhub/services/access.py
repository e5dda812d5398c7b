"""Membership-scoped access checks.

Every family-scoped service function calls one of these before it reads or
writes resource data. Resources addressed by their own id go through
``get_scoped``, which re-derives the owning family from the row itself, so an
id from another family is indistinguishable from a missing one.
"""

from typing import TypeVar

from sqlmodel import Session, SQLModel, select

from familyhub.errors import Forbidden, NotFound
from familyhub.models.family import FamilyMember
from familyhub.models.note import Note, NoteAttachment

ScopedModel = TypeVar("ScopedModel", bound=SQLModel)


def get_membership(session: Session, user_id: str, family_id: str) -> FamilyMember | None:
    return session.get(FamilyMember, (family_id, user_id))


def is_member(session: Session, user_id: str, family_id: str) -> bool:
    """True if the user currently holds a membership row for the family."""
    return session.exec(
        select(FamilyMember.user_id).where(
            FamilyMember.family_id == family_id,
            FamilyMember.user_id == user_id,
        )
    ).first() is not None


def require_member(session: Session, user_id: str, family_id: str) -> FamilyMember:
    membership = get_membership(session, user_id, family_id)
    if membership is None:
        raise Forbidden("You are not a member of this family")
    return membership


def require_admin(session: Session, user_id: str, family_id: str) -> FamilyMember:
    membership = require_member(session, user_id, family_id)
    if membership.role != "admin":
        raise Forbidden("Family admin access required")
    return membership


def get_scoped(
    session: Session,
    model: type[ScopedModel],
    resource_id: str,
    user_id: str,
) -> ScopedModel:
    """Load a family-scoped row and verify the caller belongs to its family."""
    resource = session.get(model, resource_id)
    if resource is None or not is_member(session, user_id, resource.family_id):
        raise NotFound(f"{model.__name__} not found")
    return resource


def get_scoped_attachment(session: Session, attachment_id: str, user_id: str) -> NoteAttachment:
    """Attachments are scoped through their note's family."""
    attachment = session.get(NoteAttachment, attachment_id)
    if attachment is None:
        raise NotFound("Attachment not found")
    note = session.get(Note, attachment.note_id)
    if note is None or not is_member(session, user_id, note.family_id):
        raise NotFound("Attachment not found")
    return attachment
