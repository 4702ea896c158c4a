"""Theme Repository — SQLAlchemy implementation of ThemeRepository.

Invariants:
    - question_count comes from a grouped sub-query LEFT JOINed onto themes,
      COALESCEd to 0 — a theme with no questions counts 0, never NULL
    - Creator display fields joined on every view
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import ThemeId
from eureka.models.question import Question
from eureka.models.theme import Theme
from eureka.models.user import User


def _theme_view_columns():
    return (
        Theme.id, Theme.title, Theme.description, Theme.category,
        Theme.created_by, Theme.created_at,
        User.username.label("creator_username"),
        User.display_name.label("creator_name"),
    )


class SqlThemeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, theme_data: dict) -> ThemeId:
        theme = Theme(**theme_data)
        self.db.add(theme)
        await self.db.flush()
        return ThemeId(theme.id)

    async def exists(self, theme_id: ThemeId) -> bool:
        result = await self.db.execute(
            select(Theme.id).where(Theme.id == theme_id),
        )
        return result.scalar_one_or_none() is not None

    async def get_view(self, theme_id: ThemeId) -> dict | None:
        result = await self.db.execute(
            select(*_theme_view_columns())
            .outerjoin(User, Theme.created_by == User.id)
            .where(Theme.id == theme_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def list_views(self, category: str | None = None) -> list[dict]:
        """Themes newest first, each with its question_count."""
        question_counts = (
            select(
                Question.theme_id.label("theme_id"),
                func.count(Question.id).label("question_count"),
            )
            .group_by(Question.theme_id)
            .subquery()
        )
        query = (
            select(
                *_theme_view_columns(),
                func.coalesce(question_counts.c.question_count, 0)
                .label("question_count"),
            )
            .outerjoin(User, Theme.created_by == User.id)
            .outerjoin(question_counts, question_counts.c.theme_id == Theme.id)
            .order_by(Theme.created_at.desc())
        )
        if category:
            query = query.where(Theme.category == category)
        result = await self.db.execute(query)
        return [dict(r) for r in result.mappings().all()]
