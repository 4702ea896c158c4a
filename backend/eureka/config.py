"""Settings — every tunable of the Eureka API, read from env vars and .env.

Invariants:
    - The JWT signing secret only reaches code through Settings.jwt_secret
    - get_settings() returns one cached instance per process
    - database_url always names an async driver (postgresql+asyncpg / sqlite+aiosqlite)

Design Decisions:
    - pydantic-settings: typed parsing and .env support instead of os.environ lookups
    - Non-secret defaults match docker-compose; JWT_SECRET has none and must be set
    - CORS_ORIGINS accepts either a JSON list or a comma-separated string
"""

import json
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

SYNC_POSTGRES_PREFIX = "postgresql://"
ASYNC_POSTGRES_PREFIX = "postgresql+asyncpg://"


def to_async_database_url(url: str) -> str:
    """Managed Postgres hands out postgresql:// URLs; asyncpg needs its own scheme."""
    if url.startswith(SYNC_POSTGRES_PREFIX):
        return ASYNC_POSTGRES_PREFIX + url[len(SYNC_POSTGRES_PREFIX):]
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # ─── Persistence ──────────────────────────────────────────
    database_url: str = "postgresql+asyncpg://eureka:eureka@db:5432/eureka"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Local development only; production schema comes from alembic
    database_auto_create: bool = False

    # ─── Identity ─────────────────────────────────────────────
    # Required: no default, so a deployment without JWT_SECRET fails at startup
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_ttl_days: int = 7

    # ─── HTTP ─────────────────────────────────────────────────
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:5173"]

    # ─── Logging ──────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def _async_driver(cls, v):
        return to_async_database_url(v) if isinstance(v, str) else v

    @field_validator("jwt_secret")
    @classmethod
    def _secret_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("JWT_SECRET must not be blank")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [o.strip() for o in v.split(",") if o.strip()]
        return v

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(days=self.access_token_ttl_days)


@lru_cache
def get_settings() -> Settings:
    return Settings()
