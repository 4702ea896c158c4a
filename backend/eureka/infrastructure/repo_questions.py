"""Question Repository — SQLAlchemy implementation of QuestionRepository.

Invariants:
    - answer_count comes from a grouped sub-query LEFT JOINed onto questions,
      COALESCEd to 0 — recomputed on every read, never cached
    - Views join owner display fields (username, display_name, avatar_url)
      and theme title/category; a question without a theme keeps NULLs there
    - Listing order is newest first

Design Decisions:
    - Aggregate in a sub-query instead of GROUP BY over the joined row:
      PostgreSQL would otherwise demand every joined user/theme column in GROUP BY
"""

from datetime import datetime, timezone

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import QuestionId, ThemeId, UserId
from eureka.models.answer import Answer
from eureka.models.question import Question
from eureka.models.theme import Theme
from eureka.models.user import User


def _question_view_columns():
    return (
        *Question.__table__.columns,
        User.username, User.display_name, User.avatar_url,
        Theme.title.label("theme_title"),
        Theme.category.label("theme_category"),
    )


def answer_counts_subquery():
    """answer_count per question_id, for LEFT JOIN onto questions."""
    return (
        select(
            Answer.question_id.label("question_id"),
            func.count(Answer.id).label("answer_count"),
        )
        .group_by(Answer.question_id)
        .subquery()
    )


class SqlQuestionRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, question_data: dict) -> QuestionId:
        question = Question(**question_data)
        self.db.add(question)
        await self.db.flush()
        return QuestionId(question.id)

    async def get(self, question_id: QuestionId) -> dict | None:
        result = await self.db.execute(
            select(Question.__table__).where(Question.id == question_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def exists(self, question_id: QuestionId) -> bool:
        result = await self.db.execute(
            select(Question.id).where(Question.id == question_id),
        )
        return result.scalar_one_or_none() is not None

    async def get_view(self, question_id: QuestionId) -> dict | None:
        result = await self.db.execute(
            select(*_question_view_columns())
            .outerjoin(User, Question.user_id == User.id)
            .outerjoin(Theme, Question.theme_id == Theme.id)
            .where(Question.id == question_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def list_views(
        self,
        theme_id: ThemeId | None = None,
        status: str | None = None,
        user_id: UserId | None = None,
    ) -> list[dict]:
        """Filtered questions, newest first, each with answer_count."""
        answer_counts = answer_counts_subquery()
        query = (
            select(
                *_question_view_columns(),
                func.coalesce(answer_counts.c.answer_count, 0)
                .label("answer_count"),
            )
            .outerjoin(User, Question.user_id == User.id)
            .outerjoin(Theme, Question.theme_id == Theme.id)
            .outerjoin(
                answer_counts, answer_counts.c.question_id == Question.id,
            )
            .order_by(Question.created_at.desc())
        )
        if theme_id:
            query = query.where(Question.theme_id == theme_id)
        if status:
            query = query.where(Question.status == status)
        if user_id:
            query = query.where(Question.user_id == user_id)
        result = await self.db.execute(query)
        return [dict(r) for r in result.mappings().all()]

    async def update_fields(
        self, question_id: QuestionId, **fields: object,
    ) -> None:
        """Partial update; always bumps updated_at."""
        await self.db.execute(
            update(Question)
            .where(Question.id == question_id)
            .values(**fields, updated_at=datetime.now(timezone.utc)),
        )
