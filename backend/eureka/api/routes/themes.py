"""Theme Routes — create, list and read themes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.api.deps import current_identity, optional_identity
from eureka.core.identity import Identity
from eureka.infrastructure.database import get_db
from eureka.schemas.themes import ThemeCreate, ThemeDetail, ThemeOut, ThemeSummary
from eureka.services.handle_themes import ThemeHandlers

router = APIRouter(prefix="/api/themes", tags=["themes"])


@router.get("", response_model=list[ThemeSummary])
async def list_themes(
    category: str | None = Query(None),
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    """Themes newest first, with question counts."""
    return await ThemeHandlers(db).list_themes(category)


@router.get("/{theme_id}", response_model=ThemeDetail)
async def get_theme(
    theme_id: str,
    _: Identity | None = Depends(optional_identity),
    db: AsyncSession = Depends(get_db),
):
    return await ThemeHandlers(db).get_theme(theme_id)


@router.post(
    "", response_model=ThemeOut, status_code=status.HTTP_201_CREATED,
)
async def create_theme(
    body: ThemeCreate,
    identity: Identity = Depends(current_identity),
    db: AsyncSession = Depends(get_db),
):
    return await ThemeHandlers(db).create_theme(
        identity, body.title, body.description, body.category,
    )
