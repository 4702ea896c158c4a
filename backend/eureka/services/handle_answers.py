"""Answer Handlers — create, select, upvote and edit answers (4 methods).

Invariants:
    - Only the parent question's owner may select; only the author may edit
    - select_answer delegates the whole clear-then-set-then-status sequence to
      reassign_selected_answer and commits once
    - upvote_answer adds exactly one per call (no per-user dedup)
    - Every failure (404/403/400) raised before the first write
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import AnswerId, QuestionId
from eureka.core.enforce_access import check_owner
from eureka.core.enforce_content import collect_answer_updates, require_text
from eureka.core.errors import ResourceNotFoundError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import AnswerRepository, QuestionRepository
from eureka.infrastructure.repo_answers import SqlAnswerRepository
from eureka.infrastructure.repo_questions import SqlQuestionRepository

logger = logging.getLogger(__name__)


class AnswerHandlers:
    """Answer lifecycle — the answered side of the resolution state machine."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.answers: AnswerRepository = SqlAnswerRepository(db)
        self.questions: QuestionRepository = SqlQuestionRepository(db)

    async def _get_or_404(self, answer_id: str) -> dict:
        answer = await self.answers.get(AnswerId(answer_id))
        if not answer:
            raise ResourceNotFoundError("Answer", answer_id)
        return answer

    async def create_answer(
        self, identity: Identity, question_id: str, content: str,
        source_info: str | None = None,
    ) -> dict:
        question_id = require_text(question_id, "question_id")
        content = require_text(content, "content")
        if not await self.questions.exists(QuestionId(question_id)):
            raise ResourceNotFoundError("Question", question_id)

        answer_id = await self.answers.add({
            "question_id": question_id,
            "user_id": identity.user_id,
            "content": content,
            "source_info": source_info,
        })
        await self.db.commit()
        logger.info(
            "Answer created",
            extra={
                "answer_id": answer_id, "question_id": question_id,
                "user_id": identity.user_id,
            },
        )
        return await self.answers.get_view(answer_id)

    async def select_answer(self, identity: Identity, answer_id: str) -> dict:
        """Make this the question's single selected answer (question owner only)."""
        answer = await self._get_or_404(answer_id)
        question = await self.questions.get(QuestionId(answer["question_id"]))
        if not question:
            raise ResourceNotFoundError("Question", answer["question_id"])
        check_owner(identity, question["user_id"], "Question", "select answers for")

        await self.answers.reassign_selected_answer(
            QuestionId(question["id"]), AnswerId(answer_id),
        )
        await self.db.commit()
        return await self.answers.get_view(AnswerId(answer_id))

    async def upvote_answer(self, identity: Identity, answer_id: str) -> dict:
        await self._get_or_404(answer_id)
        await self.answers.increment_upvotes(AnswerId(answer_id))
        await self.db.commit()
        logger.info(
            "Answer upvoted",
            extra={"answer_id": answer_id, "user_id": identity.user_id},
        )
        return await self.answers.get_view(AnswerId(answer_id))

    async def update_answer(
        self, identity: Identity, answer_id: str, fields: dict,
    ) -> dict:
        """Author edit of content/source_info; omitted fields stay unchanged."""
        answer = await self._get_or_404(answer_id)
        check_owner(identity, answer["user_id"], "Answer", "update")
        updates = collect_answer_updates(fields)

        await self.answers.update_fields(AnswerId(answer_id), **updates)
        await self.db.commit()
        return await self.answers.get_view(AnswerId(answer_id))
