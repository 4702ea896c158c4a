"""Route Dependencies — identity resolution and per-request handler wiring.

Invariants:
    - Every route declares its auth mode via current_identity / optional_identity
    - The Authorization header is read raw: a present but non-Bearer header
      fails closed instead of silently becoming anonymous
    - One IdentityGuard per process, built from Settings

Design Decisions:
    - Header(None) over fastapi.security.HTTPBearer: HTTPBearer(auto_error=False)
      maps a malformed header to None, which would downgrade to anonymous
"""

from functools import lru_cache

from fastapi import Depends, Header

from eureka.config import get_settings
from eureka.core.identity import Identity
from eureka.infrastructure.identity_guard import IdentityGuard


@lru_cache
def get_identity_guard() -> IdentityGuard:
    settings = get_settings()
    return IdentityGuard(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=settings.access_token_ttl,
    )


async def current_identity(
    authorization: str | None = Header(None),
    guard: IdentityGuard = Depends(get_identity_guard),
) -> Identity:
    """Required auth — 401 unless a valid bearer token is sent."""
    return guard.required(authorization)


async def optional_identity(
    authorization: str | None = Header(None),
    guard: IdentityGuard = Depends(get_identity_guard),
) -> Identity | None:
    """Optional auth — anonymous without a header, 401 on a bad one."""
    return guard.optional(authorization)
