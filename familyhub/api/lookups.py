"""Display-name lookups shared by the resource routers."""

from sqlmodel import Session, col, select

from familyhub.models.user import User


def resolve_users(user_ids: set[str | None], session: Session) -> dict[str, User]:
    """Resolve user_id -> User for a batch of rows."""
    ids = [uid for uid in user_ids if uid]
    if not ids:
        return {}
    users = session.exec(select(User).where(col(User.id).in_(ids))).all()
    return {u.id: u for u in users}
