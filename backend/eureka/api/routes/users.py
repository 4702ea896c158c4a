"""User Routes — public profiles and the caller's own profile."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import current_identity, optional_identity
from eureka.core.identity import Identity
from eureka.infrastructure.database import get_db
from eureka.schemas.users import PublicUser, UserProfile
from eureka.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me/profile", response_model=PublicUser)
async def get_my_profile(
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).get_me(identity)


@router.get("/{user_id}", response_model=UserProfile)
async def get_user_profile(
    user_id: str,
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Public profile with stats and recent activity."""
    return await UserHandlers(db).get_profile(user_id)
