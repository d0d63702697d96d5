"""Environment configuration."""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    session_ttl_seconds: int = 3600

    @property
    def debug(self) -> bool:
        return self.env == "development"


@lru_cache
def get_settings() -> Settings:
    """Read settings from the environment once per process."""
    return Settings(
        env=os.getenv("TICTAC_ENV", "development"),
        host=os.getenv("TICTAC_HOST", "127.0.0.1"),
        port=int(os.getenv("TICTAC_PORT", "8000")),
        log_level=os.getenv("TICTAC_LOG_LEVEL", "INFO").upper(),
        allowed_origins=os.getenv("ALLOWED_ORIGINS", "*").split(","),
        session_ttl_seconds=int(os.getenv("TICTAC_SESSION_TTL", "3600")),
    )
