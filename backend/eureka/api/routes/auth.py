"""Auth Routes — registration and login.

Invariants:
    - Neither endpoint requires an identity
    - Both return {message, token, user}; register answers 201
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import get_identity_guard
from eureka.infrastructure.database import get_db
from eureka.infrastructure.identity_guard import IdentityGuard
from eureka.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from eureka.services.handle_auth import AuthHandlers

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    guard: IdentityGuard = Depends(get_identity_guard),
):
    """Create an account and sign the caller in."""
    return await AuthHandlers(db, guard).register(
        username=body.username,
        email=body.email,
        password=body.password,
        display_name=body.display_name,
        age_group=body.age_group,
        user_type=body.user_type,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    guard: IdentityGuard = Depends(get_identity_guard),
):
    return await AuthHandlers(db, guard).login(body.email, body.password)
