"""Identity Guard — issues and verifies bearer tokens for the acting user.

Invariants:
    - Stateless: verification reads only the token and the configured secret
    - Required mode fails closed (UnauthorizedError) without a valid identity
    - Optional mode yields None ONLY when no credential was sent; a present but
      invalid credential still fails closed so token corruption is never masked
    - Expired tokens are invalid in both modes
    - Tokens without an exp claim are rejected, never treated as non-expiring

Design Decisions:
    - Secret, algorithm and lifetime injected at construction: no module-level key
    - python-jose for HS256 JWTs; claim shaping stays pure in core/identity.py
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from eureka.core.enforce_access import require_identity
from eureka.core.errors import UnauthorizedError
from eureka.core.identity import (
    Identity, build_claims, extract_bearer_token, identity_from_claims,
)

logger = logging.getLogger(__name__)


class IdentityGuard:
    """Bearer-token capability gate shared by every route."""

    def __init__(
        self, secret: str, algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=7),
    ):
        if not secret:
            raise ValueError("IdentityGuard requires a non-empty signing secret")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue_token(
        self, identity: Identity, now: datetime | None = None,
    ) -> str:
        """Sign a token for identity, valid for the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        claims = build_claims(identity, issued_at, self._ttl)
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> Identity:
        """Check signature and expiry, return the identity the token carries."""
        try:
            claims = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except JWTError as e:
            logger.warning(f"Rejected bearer token: {e}")
            raise UnauthorizedError("Invalid token")
        return identity_from_claims(claims)

    def optional(self, authorization: str | None) -> Identity | None:
        """Optional mode: anonymous when no header, identity otherwise."""
        token = extract_bearer_token(authorization)
        if token is None:
            return None
        return self.verify_token(token)

    def required(self, authorization: str | None) -> Identity:
        """Required mode: a valid identity or UnauthorizedError."""
        return require_identity(self.optional(authorization))
