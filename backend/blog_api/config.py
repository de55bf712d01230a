import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_INSECURE_DEFAULT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog Publishing API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./blog.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Bearer token verification (shared signing key with the token issuer)
    jwt_secret_key: str = _INSECURE_DEFAULT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60 * 24

    # Article / comment policy switches
    strict_status_transitions: bool = False      # forbid leaving "archived" via generic update
    require_auth_for_comment_delete: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_auth: str = "INFO"             # bearer token verification

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn when running outside development with the built-in signing key."""
        if self.app_env != "development" and self.jwt_secret_key == _INSECURE_DEFAULT_SECRET:
            _config_logger.warning(
                "JWT_SECRET_KEY is not configured; tokens are signed with the default key."
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
