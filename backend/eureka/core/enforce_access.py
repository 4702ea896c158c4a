"""Access Enforcement — capability gate applied before every mutation.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Ownership is compared on user ids only — usernames can collide in tokens
    - Raise on violation, return the proven value on success
"""

from eureka.core.errors import ErrorContext, ForbiddenError, UnauthorizedError
from eureka.core.identity import Identity


def require_identity(identity: Identity | None) -> Identity:
    """Required mode: anonymous callers fail closed."""
    if identity is None:
        raise UnauthorizedError()
    return identity


def check_owner(
    identity: Identity, owner_id: str, resource_type: str, action: str,
) -> None:
    """Only the owner of a resource may perform action on it."""
    if identity.user_id != owner_id:
        raise ForbiddenError(
            f"Not authorized to {action} this {resource_type.lower()}",
            ErrorContext(user_id=identity.user_id, resource_type=resource_type),
        )
