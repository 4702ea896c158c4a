"""Answer Schemas — create/update input and joined read view."""

from datetime import datetime

from pydantic import BaseModel, Field

from eureka.schemas.common import RequestBody


class AnswerCreate(RequestBody):
    question_id: str = Field(alias="questionId")
    content: str = Field(max_length=20_000)
    source_info: str | None = Field(None, alias="sourceInfo", max_length=2000)


class AnswerUpdate(RequestBody):
    content: str | None = Field(None, max_length=20_000)
    source_info: str | None = Field(None, alias="sourceInfo", max_length=2000)


class AnswerOut(BaseModel):
    id: str
    question_id: str
    user_id: str
    content: str
    source_info: str | None = None
    is_selected: bool
    upvotes: int
    created_at: datetime
    updated_at: datetime
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
