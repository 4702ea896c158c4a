"""Auth Handlers — registration and login (2 methods).

Invariants:
    - username and email uniqueness checked before insert (409 on clash)
    - Passwords stored only as bcrypt hashes
    - Unknown email and wrong password produce the same 401 message
    - Issued tokens carry {userId, username, email} via the IdentityGuard

Design Decisions:
    - IdentityGuard injected, not imported as a global: the guard owns the secret
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import UserId
from eureka.core.errors import ConflictError, UnauthorizedError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import UserRepository
from eureka.infrastructure.identity_guard import IdentityGuard
from eureka.infrastructure.passwords import hash_password, verify_password
from eureka.infrastructure.repo_users import SqlUserRepository

logger = logging.getLogger(__name__)


class AuthHandlers:
    """Account creation and credential exchange."""

    def __init__(self, db: AsyncSession, guard: IdentityGuard):
        self.db = db
        self.guard = guard
        self.users: UserRepository = SqlUserRepository(db)

    async def register(
        self, username: str, email: str, password: str,
        display_name: str | None = None, age_group: str | None = None,
        user_type: str | None = None,
    ) -> dict:
        """Create an account and return {message, token, user}."""
        if await self.users.exists_with_username_or_email(username, email):
            raise ConflictError("Username or email already exists")

        try:
            user_id = await self.users.add({
                "username": username,
                "email": email,
                "password_hash": hash_password(password),
                "display_name": display_name or username,
                "age_group": age_group,
                "user_type": user_type,
            })
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Username or email already exists")
        logger.info("User registered", extra={"user_id": user_id})

        token = self.guard.issue_token(Identity(user_id, username, email))
        return {
            "message": "User created successfully",
            "token": token,
            "user": await self.users.get_public(user_id),
        }

    async def login(self, email: str, password: str) -> dict:
        user = await self.users.get_by_email(email)
        if not user or not verify_password(password, user["password_hash"]):
            raise UnauthorizedError("Invalid credentials")

        identity = Identity(UserId(user["id"]), user["username"], user["email"])
        return {
            "message": "Login successful",
            "token": self.guard.issue_token(identity),
            "user": await self.users.get_public(identity.user_id),
        }
