"""Registration, login and profile business logic."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, col, or_, select

from familyhub.config import Settings
from familyhub.errors import AuthError, Conflict, StorageFailure
from familyhub.models.user import User
from familyhub.utils.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from familyhub.utils.storage import (
    AVATAR_EXTENSIONS,
    AVATAR_MIME_TYPES,
    remove_file,
    save_upload,
    validate_upload,
)

logger = logging.getLogger(__name__)

AVATAR_URL_PREFIX = "/uploads/"


def register_user(
    session: Session,
    settings: Settings,
    username: str,
    email: str,
    password: str,
    full_name: str,
) -> tuple[str, User]:
    """Create a user and return (access_token, user)."""
    existing = session.exec(
        select(User).where(or_(col(User.username) == username, col(User.email) == email))
    ).first()
    if existing:
        raise Conflict("Username or email already exists")

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        full_name=full_name,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise Conflict("Username or email already exists") from e
    session.refresh(user)

    logger.info("Registered user %s (%s)", user.id, user.username)
    return create_access_token(settings, user.id, user.username), user


def authenticate(session: Session, settings: Settings, username: str, password: str) -> tuple[str, User]:
    """Verify credentials and return (access_token, user)."""
    user = session.exec(select(User).where(User.username == username)).first()
    if not user or not verify_password(password, user.password_hash):
        raise AuthError("Invalid credentials")
    return create_access_token(settings, user.id, user.username), user


def update_profile(
    session: Session,
    user: User,
    full_name: str | None = None,
    email: str | None = None,
    avatar_color: str | None = None,
) -> User:
    """Update the mutable profile fields that were provided."""
    if email is not None and email != user.email:
        taken = session.exec(
            select(User).where(User.email == email, User.id != user.id)
        ).first()
        if taken:
            raise Conflict("Email already in use")
        user.email = email
    if full_name is not None:
        user.full_name = full_name
    if avatar_color is not None:
        user.avatar_color = avatar_color

    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise Conflict("Email already in use") from e
    session.refresh(user)
    return user


def update_avatar(
    session: Session,
    settings: Settings,
    user: User,
    filename: str,
    content_type: str | None,
    data: bytes,
) -> str:
    """Store a new avatar image and point the user at it. Returns the public URL."""
    validate_upload(
        filename, data, AVATAR_EXTENSIONS, settings.max_avatar_bytes, "avatars",
        content_type=content_type, allowed_types=AVATAR_MIME_TYPES,
    )

    try:
        relative = save_upload(settings, "avatars", filename, data)
    except OSError as e:
        raise StorageFailure("Failed to upload avatar") from e

    old_url = user.avatar_url
    user.avatar_url = f"{AVATAR_URL_PREFIX}{relative.as_posix()}"
    session.add(user)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        remove_file(settings, relative.as_posix())
        raise StorageFailure("Failed to upload avatar") from e
    session.refresh(user)

    if old_url and old_url.startswith(AVATAR_URL_PREFIX):
        remove_file(settings, old_url[len(AVATAR_URL_PREFIX):])

    return user.avatar_url
