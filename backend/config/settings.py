"""
Application settings read from environment variables
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_ADMIN_EMAIL = "admin@randrealestate.com"
DEFAULT_UPLOAD_DIR = Path(__file__).resolve().parent.parent / "public" / "uploads"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "t", "yes")


def normalize_database_url(url: Optional[str]) -> Optional[str]:
    """Heroku/Render style URLs use the postgres:// scheme SQLAlchemy rejects"""
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


@dataclass
class Settings:
    """Runtime configuration; build with Settings.from_env()"""

    database_url: Optional[str] = None
    session_secret: str = "admin-secret-key-change-in-production"
    session_max_age: int = 24 * 60 * 60
    admin_username: str = DEFAULT_ADMIN_USERNAME
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    admin_email: str = DEFAULT_ADMIN_EMAIL
    upload_dir: Path = DEFAULT_UPLOAD_DIR
    upload_url_prefix: str = "/uploads"
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_format: str = "standard"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", "*")
        return cls(
            database_url=normalize_database_url(os.getenv("DATABASE_URL")),
            session_secret=os.getenv("SESSION_SECRET", cls.session_secret),
            session_max_age=int(os.getenv("SESSION_MAX_AGE", str(cls.session_max_age))),
            admin_username=os.getenv("ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME),
            admin_password=os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
            admin_email=os.getenv("ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL),
            upload_dir=Path(os.getenv("UPLOAD_DIR", str(DEFAULT_UPLOAD_DIR))),
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            debug=_env_bool("DEBUG"),
        )

    @property
    def uses_default_admin_credentials(self) -> bool:
        return (
            self.admin_username == DEFAULT_ADMIN_USERNAME
            and self.admin_password == DEFAULT_ADMIN_PASSWORD
        )
