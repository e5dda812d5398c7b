"""Storage utilities: upload naming, saving and best-effort removal."""

import logging
import secrets
import time
from pathlib import Path

from familyhub.config import Settings
from familyhub.errors import PayloadTooLarge, ValidationError

logger = logging.getLogger(__name__)

AVATAR_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
AVATAR_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}

ATTACHMENT_EXTENSIONS = AVATAR_EXTENSIONS | {
    ".pdf", ".doc", ".docx", ".txt", ".csv", ".xlsx", ".xls",
}


def file_extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def unique_filename(original: str) -> str:
    """Build a collision-resistant stored name: <epoch-ms>-<12 hex><ext>."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{file_extension(original)}"


def save_upload(settings: Settings, folder: str, original: str, data: bytes) -> Path:
    """Write upload bytes under upload_dir/folder. Returns the path relative to upload_dir."""
    relative = Path(folder) / unique_filename(original)
    target = settings.upload_dir / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    return relative


def resolve_path(settings: Settings, relative_path: str) -> Path:
    return settings.upload_dir / relative_path


def remove_file(settings: Settings, relative_path: str) -> bool:
    """Delete a stored file. Failures are logged and reported, never raised."""
    path = resolve_path(settings, relative_path)
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove stored file %s: %s", path, e)
        return False
    return True


def validate_upload(
    filename: str,
    data: bytes,
    allowed: set[str],
    max_bytes: int,
    kind: str,
    content_type: str | None = None,
    allowed_types: set[str] | None = None,
) -> None:
    """Reject empty, oversized or disallowed uploads before anything touches disk.

    When ``allowed_types`` is given the declared content type must be in it
    as well as the extension being in ``allowed``.
    """
    if not data:
        raise ValidationError("No file uploaded")
    if len(data) > max_bytes:
        raise PayloadTooLarge(f"File too large (max {max_bytes // (1024 * 1024)}MB)")
    if file_extension(filename) not in allowed:
        raise ValidationError(f"File type not supported for {kind}")
    if allowed_types is not None and (content_type or "").lower() not in allowed_types:
        raise ValidationError(f"File type not supported for {kind}")
