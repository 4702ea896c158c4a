"""Acting Identity — the caller derived from a verified bearer token.

Invariants:
    - All functions are PURE: no IO, no signing, no clock reads
    - A present-but-malformed Authorization header is an error, never anonymous
    - Claims without a userId never yield an Identity

Design Decisions:
    - Token signing lives in infrastructure/identity_guard.py; this module only
      shapes claims and headers so it is testable without keys
    - camelCase claim names (userId) kept for compatibility with issued tokens
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from eureka.core.domain_types import UserId
from eureka.core.errors import UnauthorizedError

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated caller — attached to every Required-auth operation."""
    user_id: UserId
    username: str
    email: str


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an Authorization header, None when absent.

    Raises UnauthorizedError when the header is present but not a
    well-formed Bearer credential.
    """
    if authorization is None:
        return None
    if not authorization.lower().startswith(BEARER_PREFIX):
        raise UnauthorizedError("Authorization header must use the Bearer scheme")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Bearer token is empty")
    return token


def build_claims(
    identity: Identity, issued_at: datetime, ttl: timedelta,
) -> dict:
    """JWT claim set for an identity, valid for ttl from issued_at."""
    return {
        "userId": identity.user_id,
        "username": identity.username,
        "email": identity.email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ttl).timestamp()),
    }


def identity_from_claims(claims: dict) -> Identity:
    """Rebuild an Identity from verified claims."""
    user_id = claims.get("userId")
    if not user_id or not isinstance(user_id, str):
        raise UnauthorizedError("Token is missing the userId claim")
    return Identity(
        user_id=UserId(user_id),
        username=str(claims.get("username") or ""),
        email=str(claims.get("email") or ""),
    )
