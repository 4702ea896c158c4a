"""User Handlers — public profile reads (2 methods)."""

from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import UserId
from eureka.core.errors import ResourceNotFoundError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import UserRepository
from eureka.infrastructure.repo_users import SqlUserRepository

RECENT_ACTIVITY_LIMIT = 10


class UserHandlers:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users: UserRepository = SqlUserRepository(db)

    async def get_profile(self, user_id: str) -> dict:
        """Public fields, activity stats and the latest questions/answers."""
        user = await self.users.get_public(UserId(user_id))
        if not user:
            raise ResourceNotFoundError("User", user_id)
        activity = await self.users.get_activity(
            UserId(user_id), RECENT_ACTIVITY_LIMIT,
        )
        return {**user, **activity}

    async def get_me(self, identity: Identity) -> dict:
        user = await self.users.get_public(identity.user_id)
        if not user:
            raise ResourceNotFoundError("User", identity.user_id)
        return user
