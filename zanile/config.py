"""
Configuration module for zanile clipboard.
Loads environment variables and provides config objects.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 100000


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using {default}")
        return default


class Settings:
    """Application settings loaded from environment variables.

    Keyword arguments override the environment, which keeps tests free of
    ``os.environ`` juggling.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        note_key_prefix: Optional[str] = None,
        default_ttl_seconds: Optional[int] = None,
        max_bytes: Optional[int] = None,
        app_domain: Optional[str] = None,
        debug: Optional[bool] = None,
    ):
        self.redis_url: str = redis_url if redis_url is not None else os.getenv(
            "REDIS_URL", "redis://localhost:6379"
        )
        self.note_key_prefix: str = note_key_prefix if note_key_prefix is not None else os.getenv(
            "NOTE_KEY_PREFIX", "note:"
        )
        self.default_ttl_seconds: int = (
            default_ttl_seconds
            if default_ttl_seconds is not None
            else _env_int("DEFAULT_TTL_SECONDS", 0)
        )
        self.max_bytes: int = (
            max_bytes if max_bytes is not None else _env_int("MAX_BYTES", DEFAULT_MAX_BYTES)
        )
        self.app_domain: str = app_domain if app_domain is not None else os.getenv("APP_DOMAIN", "")
        self.debug: bool = debug if debug is not None else _env_flag("DEBUG", "False")

    @property
    def ttl_seconds(self) -> Optional[int]:
        """TTL to apply on write, or None when notes never expire."""
        if self.default_ttl_seconds and self.default_ttl_seconds > 0:
            return self.default_ttl_seconds
        return None

    def __repr__(self) -> str:
        return (
            f"Settings(redis_url={self.redis_url[:30]!r}, ttl={self.default_ttl_seconds}, "
            f"max_bytes={self.max_bytes}, app_domain={self.app_domain!r})"
        )


settings = Settings()
