"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by infrastructure/repo_*.py via dependency injection
    - Repositories flush, never commit — the calling handler owns the transaction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Rows cross the boundary as plain dicts: "view" methods return base columns
      already joined with display fields and computed counts
    - Answer selection is ONE protocol method (reassign_selected_answer) so the
      storage side owns the clear-then-set ordering and its atomicity
"""

from typing import Protocol, runtime_checkable

from eureka.core.domain_types import (
    UserId, ThemeId, QuestionId, AnswerId, CommentId, CommentParent,
)


@runtime_checkable
class UserRepository(Protocol):
    """Contract for account persistence."""
    async def add(self, user_data: dict) -> UserId: ...
    async def get_by_email(self, email: str) -> dict | None: ...
    async def exists_with_username_or_email(
        self, username: str, email: str,
    ) -> bool: ...
    async def get_public(self, user_id: UserId) -> dict | None: ...
    async def get_activity(self, user_id: UserId, limit: int) -> dict: ...


@runtime_checkable
class ThemeRepository(Protocol):
    """Contract for theme persistence and theme read views."""
    async def add(self, theme_data: dict) -> ThemeId: ...
    async def exists(self, theme_id: ThemeId) -> bool: ...
    async def get_view(self, theme_id: ThemeId) -> dict | None: ...
    async def list_views(self, category: str | None = None) -> list[dict]: ...


@runtime_checkable
class QuestionRepository(Protocol):
    """Contract for question persistence and question read views."""
    async def add(self, question_data: dict) -> QuestionId: ...
    async def get(self, question_id: QuestionId) -> dict | None: ...
    async def exists(self, question_id: QuestionId) -> bool: ...
    async def get_view(self, question_id: QuestionId) -> dict | None: ...
    async def list_views(
        self,
        theme_id: ThemeId | None = None,
        status: str | None = None,
        user_id: UserId | None = None,
    ) -> list[dict]: ...
    async def update_fields(
        self, question_id: QuestionId, **fields: object,
    ) -> None: ...


@runtime_checkable
class AnswerRepository(Protocol):
    """Contract for answer persistence, selection and voting."""
    async def add(self, answer_data: dict) -> AnswerId: ...
    async def get(self, answer_id: AnswerId) -> dict | None: ...
    async def exists(self, answer_id: AnswerId) -> bool: ...
    async def get_view(self, answer_id: AnswerId) -> dict | None: ...
    async def list_views_for_question(
        self, question_id: QuestionId,
    ) -> list[dict]: ...
    async def count_selected(self, question_id: QuestionId) -> int: ...
    async def update_fields(
        self, answer_id: AnswerId, **fields: object,
    ) -> None: ...
    async def increment_upvotes(self, answer_id: AnswerId) -> None: ...
    async def reassign_selected_answer(
        self, question_id: QuestionId, answer_id: AnswerId,
    ) -> None: ...
    async def clear_selected_answer(self, question_id: QuestionId) -> None: ...


@runtime_checkable
class CommentRepository(Protocol):
    """Contract for comment persistence on a polymorphic parent."""
    async def add(self, comment_data: dict, parent: CommentParent) -> CommentId: ...
    async def get(self, comment_id: CommentId) -> dict | None: ...
    async def get_view(self, comment_id: CommentId) -> dict | None: ...
    async def list_views(self, parent: CommentParent) -> list[dict]: ...
    async def update_content(self, comment_id: CommentId, content: str) -> None: ...
    async def delete(self, comment_id: CommentId) -> None: ...
