"""User Repository — SQLAlchemy implementation of UserRepository.

Invariants:
    - password_hash never leaves this module through public views
    - Activity stats are recomputed from answers/questions on every read
"""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import UserId
from eureka.models.answer import Answer
from eureka.models.question import Question
from eureka.models.user import User

PUBLIC_USER_COLUMNS = (
    User.id, User.username, User.email, User.display_name, User.bio,
    User.age_group, User.user_type, User.avatar_url, User.created_at,
)


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, user_data: dict) -> UserId:
        user = User(**user_data)
        self.db.add(user)
        await self.db.flush()
        return UserId(user.id)

    async def get_by_email(self, email: str) -> dict | None:
        """Full row including password_hash — login only."""
        result = await self.db.execute(
            select(User.__table__).where(User.email == email),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def exists_with_username_or_email(
        self, username: str, email: str,
    ) -> bool:
        result = await self.db.execute(
            select(User.id).where(
                or_(User.username == username, User.email == email),
            ).limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def get_public(self, user_id: UserId) -> dict | None:
        result = await self.db.execute(
            select(*PUBLIC_USER_COLUMNS).where(User.id == user_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def get_activity(self, user_id: UserId, limit: int) -> dict:
        """Totals across all of a user's content plus the latest rows."""
        question_count = await self.db.scalar(
            select(func.count(Question.id)).where(Question.user_id == user_id),
        )
        answer_totals = (await self.db.execute(
            select(
                func.count(Answer.id).label("answer_count"),
                func.coalesce(func.sum(Answer.upvotes), 0).label("total_upvotes"),
            ).where(Answer.user_id == user_id),
        )).mappings().one()
        recent_questions = (await self.db.execute(
            select(Question.__table__)
            .where(Question.user_id == user_id)
            .order_by(Question.created_at.desc())
            .limit(limit),
        )).mappings().all()
        recent_answers = (await self.db.execute(
            select(Answer.__table__)
            .where(Answer.user_id == user_id)
            .order_by(Answer.created_at.desc())
            .limit(limit),
        )).mappings().all()
        return {
            "stats": {
                "question_count": question_count or 0,
                "answer_count": answer_totals["answer_count"],
                "total_upvotes": int(answer_totals["total_upvotes"]),
            },
            "recent_questions": [dict(r) for r in recent_questions],
            "recent_answers": [dict(r) for r in recent_answers],
        }
