"""
Configuration helpers for the Astro backend.

Settings are read once from the environment. Secrets and the database URL are
mandatory: the application refuses to start without them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import os

from astro.core.errors import ConfigurationError

MIN_SECRET_LENGTH = 32


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    database_url: str
    jwt_secret: str
    app_env: str = "dev"
    jwt_algorithm: str = "HS256"
    access_token_ttl_seconds: int = 3600
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("http://localhost:5173",))
    host: str = "0.0.0.0"
    port: int = 3000
    reset_verification_code: str = "131313"
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    trust_proxy_headers: bool = False

    @property
    def is_production(self) -> bool:
        return self.app_env == "prod"

    def validate(self) -> "Settings":
        if not (self.database_url or "").strip():
            raise ConfigurationError("DATABASE_URL must be configured.")
        if not self.jwt_secret:
            raise ConfigurationError("JWT_SECRET must be configured.")
        if len(self.jwt_secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(f"JWT_SECRET must be at least {MIN_SECRET_LENGTH} characters long.")
        if self.access_token_ttl_seconds <= 0:
            raise ConfigurationError("ACCESS_TOKEN_TTL_SECONDS must be positive.")
        if not self.reset_verification_code:
            raise ConfigurationError("RESET_VERIFICATION_CODE must not be empty.")
        return self


def _int(value: str | None, default: int) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _origins(value: str | None) -> tuple[str, ...]:
    raw = value if value is not None else "http://localhost:5173"
    return tuple(origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip())


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a validated Settings instance."""
    settings = Settings(
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        jwt_secret=os.getenv("JWT_SECRET") or "",
        app_env=(os.getenv("APP_ENV") or "dev").strip().lower(),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_ttl_seconds=_int(os.getenv("ACCESS_TOKEN_TTL_SECONDS"), 3600),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), 3000),
        reset_verification_code=os.getenv("RESET_VERIFICATION_CODE", "131313"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        rate_limit_enabled=_bool(os.getenv("RATE_LIMIT_ENABLED"), True),
        trust_proxy_headers=_bool(os.getenv("TRUST_PROXY_HEADERS"), False),
    )
    return settings.validate()
