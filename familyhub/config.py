"""FamilyHub Server Configuration."""

import secrets
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    app_name: str = "FamilyHub"
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Paths
    data_dir: Path = Path.home() / "familyhub" / "data"
    upload_dir: Path = Path.home() / "familyhub" / "uploads"

    # Database
    db_path: Path = Path.home() / "familyhub" / "data" / "familyhub.db"

    # JWT
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 10080  # 7 days

    # Families
    invite_code_attempts: int = 5

    # Uploads
    max_avatar_bytes: int = 5 * 1024 * 1024
    max_attachment_bytes: int = 10 * 1024 * 1024

    model_config = {"env_prefix": "FAMILYHUB_"}

    @property
    def avatar_dir(self) -> Path:
        return self.upload_dir / "avatars"

    @property
    def attachment_dir(self) -> Path:
        return self.upload_dir / "attachments"

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        for d in [self.data_dir, self.db_path.parent, self.avatar_dir, self.attachment_dir]:
            d.mkdir(parents=True, exist_ok=True)

    def ensure_secrets(self) -> None:
        """Generate the JWT secret if not set, persist it so tokens survive restarts."""
        if self.jwt_secret:
            return

        secrets_file = self.data_dir / ".secrets"
        saved = {}
        if secrets_file.exists():
            for line in secrets_file.read_text().strip().splitlines():
                if "=" in line:
                    k, v = line.split("=", 1)
                    saved[k.strip()] = v.strip()

        self.jwt_secret = saved.get("jwt_secret", "") or secrets.token_urlsafe(32)
        secrets_file.write_text(f"jwt_secret={self.jwt_secret}\n")
