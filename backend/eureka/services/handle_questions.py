"""Question Handlers — create, read, list and edit questions (4 methods).

Invariants:
    - Validation, existence and ownership checked BEFORE any write
    - New questions always start open; only selection or an owner reopen moves status
    - Reopen clears the selection in the same transaction as the status write
    - One commit per mutating call

Design Decisions:
    - Handlers take an AsyncSession and build their repositories: route code stays
      a thin adapter, tests drive handlers against a real SQLite session
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import QuestionId, QuestionStatus, ThemeId, UserId
from eureka.core.enforce_access import check_owner
from eureka.core.enforce_content import (
    collect_question_updates, normalize_tags, require_text,
)
from eureka.core.enforce_resolution import rank_answers, resolve_requested_status
from eureka.core.errors import ResourceNotFoundError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import (
    AnswerRepository, QuestionRepository, ThemeRepository,
)
from eureka.infrastructure.repo_answers import SqlAnswerRepository
from eureka.infrastructure.repo_questions import SqlQuestionRepository
from eureka.infrastructure.repo_themes import SqlThemeRepository

logger = logging.getLogger(__name__)


class QuestionHandlers:
    """Question lifecycle — the open side of the resolution state machine."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.questions: QuestionRepository = SqlQuestionRepository(db)
        self.answers: AnswerRepository = SqlAnswerRepository(db)
        self.themes: ThemeRepository = SqlThemeRepository(db)

    async def create_question(
        self, identity: Identity, title: str, content: str,
        theme_id: str | None = None, tags: list[str] | None = None,
    ) -> dict:
        """Persist an open question owned by the caller."""
        title = require_text(title, "title")
        content = require_text(content, "content")
        if theme_id and not await self.themes.exists(ThemeId(theme_id)):
            raise ResourceNotFoundError("Theme", theme_id)

        question_id = await self.questions.add({
            "theme_id": theme_id or None,
            "user_id": identity.user_id,
            "title": title,
            "content": content,
            "tags": normalize_tags(tags),
            "status": QuestionStatus.OPEN.value,
        })
        await self.db.commit()
        logger.info(
            "Question created",
            extra={"question_id": question_id, "user_id": identity.user_id},
        )
        return await self.questions.get_view(question_id)

    async def get_question(self, question_id: str) -> dict:
        """Question view plus its answers, selected answer first."""
        question = await self.questions.get_view(QuestionId(question_id))
        if not question:
            raise ResourceNotFoundError("Question", question_id)
        answers = await self.answers.list_views_for_question(
            QuestionId(question_id),
        )
        return {**question, "answers": rank_answers(answers)}

    async def list_questions(
        self,
        theme_id: str | None = None,
        status: QuestionStatus | None = None,
        user_id: str | None = None,
    ) -> list[dict]:
        return await self.questions.list_views(
            theme_id=ThemeId(theme_id) if theme_id else None,
            status=status.value if status else None,
            user_id=UserId(user_id) if user_id else None,
        )

    async def update_question(
        self, identity: Identity, question_id: str, fields: dict,
    ) -> dict:
        """Owner edit of title/content/tags/status (partial)."""
        question = await self.questions.get(QuestionId(question_id))
        if not question:
            raise ResourceNotFoundError("Question", question_id)
        check_owner(identity, question["user_id"], "Question", "update")
        updates = collect_question_updates(fields)

        requested = updates.pop("status", None)
        if requested is not None:
            selected = await self.answers.count_selected(QuestionId(question_id))
            status = resolve_requested_status(requested, selected)
            if status is QuestionStatus.OPEN:
                await self.answers.clear_selected_answer(QuestionId(question_id))
            updates["status"] = status.value

        await self.questions.update_fields(QuestionId(question_id), **updates)
        await self.db.commit()
        logger.info(
            f"Question updated: {sorted(updates)}",
            extra={"question_id": question_id, "user_id": identity.user_id},
        )
        return await self.questions.get_view(QuestionId(question_id))
