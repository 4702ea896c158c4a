"""Comment Handlers — flat comment threads on questions and answers (4 methods).

Invariants:
    - The parent is parsed into QuestionRef | AnswerRef before anything else
    - A comment is only written after its parent row is confirmed to exist
      in the table the parent variant names
    - Only the author may edit or delete; delete is permanent
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import (
    AnswerId, AnswerRef, CommentId, CommentParent, QuestionId, QuestionRef,
)
from eureka.core.enforce_access import check_owner
from eureka.core.enforce_content import parse_comment_parent, require_text
from eureka.core.errors import ResourceNotFoundError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import (
    AnswerRepository, CommentRepository, QuestionRepository,
)
from eureka.infrastructure.repo_answers import SqlAnswerRepository
from eureka.infrastructure.repo_comments import SqlCommentRepository
from eureka.infrastructure.repo_questions import SqlQuestionRepository

logger = logging.getLogger(__name__)


class CommentHandlers:
    """Comment thread engine."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.comments: CommentRepository = SqlCommentRepository(db)
        self.questions: QuestionRepository = SqlQuestionRepository(db)
        self.answers: AnswerRepository = SqlAnswerRepository(db)

    async def _parent_exists(self, parent: CommentParent) -> bool:
        match parent:
            case QuestionRef(id=question_id):
                return await self.questions.exists(QuestionId(question_id))
            case AnswerRef(id=answer_id):
                return await self.answers.exists(AnswerId(answer_id))
        return False

    async def _get_owned(
        self, identity: Identity, comment_id: str, action: str,
    ) -> dict:
        comment = await self.comments.get(CommentId(comment_id))
        if not comment:
            raise ResourceNotFoundError("Comment", comment_id)
        check_owner(identity, comment["user_id"], "Comment", action)
        return comment

    async def list_comments(
        self, parent_type: str | None, parent_id: str | None,
    ) -> list[dict]:
        parent = parse_comment_parent(parent_type, parent_id)
        return await self.comments.list_views(parent)

    async def create_comment(
        self, identity: Identity, parent_type: str, parent_id: str,
        content: str,
    ) -> dict:
        parent = parse_comment_parent(parent_type, parent_id)
        content = require_text(content, "content")
        if not await self._parent_exists(parent):
            raise ResourceNotFoundError(parent.parent_type.value.title(), parent.id)

        comment_id = await self.comments.add(
            {"user_id": identity.user_id, "content": content}, parent,
        )
        await self.db.commit()
        logger.info(
            f"Comment created on {parent.parent_type.value}",
            extra={"comment_id": comment_id, "user_id": identity.user_id},
        )
        return await self.comments.get_view(comment_id)

    async def update_comment(
        self, identity: Identity, comment_id: str, content: str,
    ) -> dict:
        content = require_text(content, "content")
        await self._get_owned(identity, comment_id, "update")
        await self.comments.update_content(CommentId(comment_id), content)
        await self.db.commit()
        return await self.comments.get_view(CommentId(comment_id))

    async def delete_comment(self, identity: Identity, comment_id: str) -> None:
        await self._get_owned(identity, comment_id, "delete")
        await self.comments.delete(CommentId(comment_id))
        await self.db.commit()
        logger.info(
            "Comment deleted",
            extra={"comment_id": comment_id, "user_id": identity.user_id},
        )
