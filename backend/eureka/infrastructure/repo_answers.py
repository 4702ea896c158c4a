"""Answer Repository — SQLAlchemy implementation of AnswerRepository.

Invariants:
    - reassign_selected_answer is the ONLY path that sets is_selected = true
    - Selection order inside one transaction: lock question -> clear others ->
      select target -> mark question answered
    - increment_upvotes is a single UPDATE (upvotes = upvotes + 1): concurrent
      votes never lose increments

Design Decisions:
    - Question row locked with SELECT ... FOR UPDATE before touching answers:
      two owners' tabs selecting at once serialize on PostgreSQL
      (SQLite ignores FOR UPDATE and serializes writers on its own)
    - No commit here: the handler commits once, so all three writes land together
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import AnswerId, QuestionId, QuestionStatus
from eureka.models.answer import Answer
from eureka.models.question import Question
from eureka.models.user import User

logger = logging.getLogger(__name__)


def _answer_view_columns():
    return (
        *Answer.__table__.columns,
        User.username, User.display_name, User.avatar_url,
    )


class SqlAnswerRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, answer_data: dict) -> AnswerId:
        answer = Answer(**answer_data, is_selected=False, upvotes=0)
        self.db.add(answer)
        await self.db.flush()
        return AnswerId(answer.id)

    async def get(self, answer_id: AnswerId) -> dict | None:
        result = await self.db.execute(
            select(Answer.__table__).where(Answer.id == answer_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def exists(self, answer_id: AnswerId) -> bool:
        result = await self.db.execute(
            select(Answer.id).where(Answer.id == answer_id),
        )
        return result.scalar_one_or_none() is not None

    async def get_view(self, answer_id: AnswerId) -> dict | None:
        result = await self.db.execute(
            select(*_answer_view_columns())
            .outerjoin(User, Answer.user_id == User.id)
            .where(Answer.id == answer_id),
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None

    async def list_views_for_question(
        self, question_id: QuestionId,
    ) -> list[dict]:
        """All answers of a question, oldest first (ranking is core's job)."""
        result = await self.db.execute(
            select(*_answer_view_columns())
            .outerjoin(User, Answer.user_id == User.id)
            .where(Answer.question_id == question_id)
            .order_by(Answer.created_at.asc()),
        )
        return [dict(r) for r in result.mappings().all()]

    async def count_selected(self, question_id: QuestionId) -> int:
        count = await self.db.scalar(
            select(func.count(Answer.id)).where(
                Answer.question_id == question_id,
                Answer.is_selected.is_(True),
            ),
        )
        return count or 0

    async def update_fields(
        self, answer_id: AnswerId, **fields: object,
    ) -> None:
        """Partial content edit; always bumps updated_at."""
        await self.db.execute(
            update(Answer)
            .where(Answer.id == answer_id)
            .values(**fields, updated_at=datetime.now(timezone.utc)),
        )

    async def increment_upvotes(self, answer_id: AnswerId) -> None:
        await self.db.execute(
            update(Answer)
            .where(Answer.id == answer_id)
            .values(upvotes=Answer.upvotes + 1),
        )

    async def reassign_selected_answer(
        self, question_id: QuestionId, answer_id: AnswerId,
    ) -> None:
        """Make answer_id the single selected answer and mark the question answered."""
        now = datetime.now(timezone.utc)
        await self.db.execute(
            select(Question.id)
            .where(Question.id == question_id)
            .with_for_update(),
        )
        await self.db.execute(
            update(Answer)
            .where(Answer.question_id == question_id, Answer.id != answer_id)
            .values(is_selected=False),
        )
        await self.db.execute(
            update(Answer)
            .where(Answer.id == answer_id, Answer.question_id == question_id)
            .values(is_selected=True),
        )
        await self.db.execute(
            update(Question)
            .where(Question.id == question_id)
            .values(status=QuestionStatus.ANSWERED.value, updated_at=now),
        )
        logger.info(
            "Selected answer reassigned",
            extra={"question_id": question_id, "answer_id": answer_id},
        )

    async def clear_selected_answer(self, question_id: QuestionId) -> None:
        """Drop any selection under a question (reopen path)."""
        await self.db.execute(
            select(Question.id)
            .where(Question.id == question_id)
            .with_for_update(),
        )
        await self.db.execute(
            update(Answer)
            .where(Answer.question_id == question_id)
            .values(is_selected=False),
        )
