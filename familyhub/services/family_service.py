"""Family membership ledger: creation, invite-code redemption, member listing."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, func, select

from familyhub.config import Settings
from familyhub.errors import Conflict, NotFound, StorageFailure
from familyhub.models.family import Family, FamilyMember
from familyhub.models.note import Note, NoteAttachment
from familyhub.models.user import User
from familyhub.services.access import get_membership, require_admin, require_member
from familyhub.utils.security import generate_invite_code
from familyhub.utils.storage import remove_file

logger = logging.getLogger(__name__)


@dataclass
class FamilyView:
    family: Family
    role: str
    member_count: int


def _member_counts(session: Session, family_ids: list[str]) -> dict[str, int]:
    if not family_ids:
        return {}
    rows = session.exec(
        select(FamilyMember.family_id, func.count())
        .where(col(FamilyMember.family_id).in_(family_ids))
        .group_by(FamilyMember.family_id)
    ).all()
    return {family_id: count for family_id, count in rows}


def create_family(session: Session, settings: Settings, user: User, name: str) -> FamilyView:
    """Create a family with the caller as its admin.

    The family row and the admin membership are committed together. A unique
    constraint failure (in practice an invite-code collision) rolls both back
    and retries with a fresh code.
    """
    user_id = user.id
    last_error: IntegrityError | None = None

    for attempt in range(1, settings.invite_code_attempts + 1):
        family = Family(name=name, invite_code=generate_invite_code(), created_by=user_id)
        try:
            session.add(family)
            session.flush()
            session.add(FamilyMember(family_id=family.id, user_id=user_id, role="admin"))
            session.commit()
        except IntegrityError as e:
            session.rollback()
            last_error = e
            logger.warning("Invite code collision creating family (attempt %d)", attempt)
            continue

        session.refresh(family)
        logger.info("User %s created family %s", user_id, family.id)
        return FamilyView(family=family, role="admin", member_count=1)

    raise StorageFailure("Failed to create family") from last_error


def join_family(session: Session, user: User, invite_code: str) -> FamilyView:
    """Redeem an invite code. Joining a family twice is a conflict, not a no-op."""
    code = invite_code.strip().upper()
    family = session.exec(select(Family).where(Family.invite_code == code)).first()
    if family is None:
        raise NotFound("Invalid invite code")

    user_id = user.id
    if get_membership(session, user_id, family.id) is not None:
        raise Conflict("You are already a member of this family")

    session.add(FamilyMember(family_id=family.id, user_id=user_id, role="member"))
    try:
        session.commit()
    except IntegrityError as e:
        # Same user redeeming concurrently: the composite key rejects the second row
        session.rollback()
        raise Conflict("You are already a member of this family") from e

    session.refresh(family)
    logger.info("User %s joined family %s", user_id, family.id)
    count = _member_counts(session, [family.id]).get(family.id, 0)
    return FamilyView(family=family, role="member", member_count=count)


def list_families(session: Session, user: User) -> list[FamilyView]:
    """Families the user belongs to, newest first."""
    rows = session.exec(
        select(Family, FamilyMember.role)
        .join(FamilyMember, col(FamilyMember.family_id) == col(Family.id))
        .where(FamilyMember.user_id == user.id)
        .order_by(col(Family.created_at).desc())
    ).all()

    counts = _member_counts(session, [family.id for family, _ in rows])
    return [
        FamilyView(family=family, role=role, member_count=counts.get(family.id, 0))
        for family, role in rows
    ]


def list_members(session: Session, family_id: str, user: User) -> list[tuple[User, FamilyMember]]:
    """Members of a family in join order. Caller must be a member."""
    require_member(session, user.id, family_id)
    return list(
        session.exec(
            select(User, FamilyMember)
            .join(FamilyMember, col(FamilyMember.user_id) == col(User.id))
            .where(FamilyMember.family_id == family_id)
            .order_by(col(FamilyMember.joined_at).asc())
        ).all()
    )


def delete_family(session: Session, settings: Settings, family_id: str, user: User) -> None:
    """Delete a family. Admin only.

    Memberships, events, todos, notes and attachment rows go with it through
    the store's cascades; attachment files are removed once the rows are gone.
    """
    require_admin(session, user.id, family_id)
    family = session.get(Family, family_id)
    if family is None:
        raise NotFound("Family not found")

    file_paths = session.exec(
        select(NoteAttachment.file_path)
        .join(Note, col(Note.id) == col(NoteAttachment.note_id))
        .where(Note.family_id == family_id)
    ).all()

    session.delete(family)
    session.commit()
    logger.info("User %s deleted family %s", user.id, family_id)

    for path in file_paths:
        if not remove_file(settings, path):
            logger.warning("Orphaned attachment file left behind: %s", path)
