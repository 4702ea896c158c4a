"""Question Schemas — create/update input and joined read views.

Invariants:
    - status values limited to QuestionStatus
    - QuestionSummary.answer_count is always an int (0 when no answers)
    - QuestionDetail.answers arrive already ranked (selected, upvotes, oldest)
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from eureka.core.domain_types import QuestionStatus
from eureka.schemas.common import RequestBody
from eureka.schemas.answers import AnswerOut


class QuestionCreate(RequestBody):
    title: str = Field(max_length=300)
    content: str = Field(max_length=20_000)
    theme_id: str | None = Field(None, alias="themeId")
    tags: list[str] | None = Field(None, max_length=20)


class QuestionUpdate(RequestBody):
    title: str | None = Field(None, max_length=300)
    content: str | None = Field(None, max_length=20_000)
    tags: list[str] | None = Field(None, max_length=20)
    status: QuestionStatus | None = None


class QuestionOut(BaseModel):
    id: str
    theme_id: str | None = None
    user_id: str
    title: str
    content: str
    tags: list[str] = []
    status: QuestionStatus
    created_at: datetime
    updated_at: datetime
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    theme_title: str | None = None
    theme_category: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def tags_default(cls, v):
        return v or []


class QuestionSummary(QuestionOut):
    answer_count: int = 0


class QuestionDetail(QuestionOut):
    answers: list[AnswerOut]
