"""Theme Handlers — create, list and read themes (3 methods).

Invariants:
    - Theme detail lists its questions with answer_count, newest first
    - question_count / answer_count recomputed on every read
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from eureka.core.domain_types import ThemeId
from eureka.core.enforce_content import require_text
from eureka.core.errors import ResourceNotFoundError
from eureka.core.identity import Identity
from eureka.core.repository_protocols import QuestionRepository, ThemeRepository
from eureka.infrastructure.repo_questions import SqlQuestionRepository
from eureka.infrastructure.repo_themes import SqlThemeRepository

logger = logging.getLogger(__name__)


class ThemeHandlers:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.themes: ThemeRepository = SqlThemeRepository(db)
        self.questions: QuestionRepository = SqlQuestionRepository(db)

    async def create_theme(
        self, identity: Identity, title: str,
        description: str | None = None, category: str | None = None,
    ) -> dict:
        title = require_text(title, "title")
        theme_id = await self.themes.add({
            "title": title,
            "description": description,
            "category": category,
            "created_by": identity.user_id,
        })
        await self.db.commit()
        logger.info(
            "Theme created",
            extra={"theme_id": theme_id, "user_id": identity.user_id},
        )
        return await self.themes.get_view(theme_id)

    async def list_themes(self, category: str | None = None) -> list[dict]:
        return await self.themes.list_views(category)

    async def get_theme(self, theme_id: str) -> dict:
        """Theme view plus its questions."""
        theme = await self.themes.get_view(ThemeId(theme_id))
        if not theme:
            raise ResourceNotFoundError("Theme", theme_id)
        questions = await self.questions.list_views(theme_id=ThemeId(theme_id))
        return {**theme, "questions": questions}
