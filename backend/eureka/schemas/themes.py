"""Theme Schemas — creation input and read views with question counts."""

from datetime import datetime

from pydantic import BaseModel, Field

from eureka.schemas.common import RequestBody
from eureka.schemas.questions import QuestionSummary


class ThemeCreate(RequestBody):
    title: str = Field(max_length=200)
    description: str | None = None
    category: str | None = Field(None, max_length=100)


class ThemeOut(BaseModel):
    id: str
    title: str
    description: str | None = None
    category: str | None = None
    created_by: str
    created_at: datetime
    creator_username: str | None = None
    creator_name: str | None = None


class ThemeSummary(ThemeOut):
    question_count: int


class ThemeDetail(ThemeOut):
    questions: list[QuestionSummary]
