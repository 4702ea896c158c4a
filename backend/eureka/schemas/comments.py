"""Comment Schemas — wire shapes for the polymorphic comment thread.

Invariants:
    - parent_type/parent_id travel as plain strings here; they become a typed
      QuestionRef | AnswerRef in core/enforce_content.parse_comment_parent
"""

from datetime import datetime

from pydantic import BaseModel, Field

from eureka.core.domain_types import ParentType
from eureka.schemas.common import RequestBody


class CommentCreate(RequestBody):
    parent_type: str = Field(alias="parentType")
    parent_id: str = Field(alias="parentId")
    content: str = Field(max_length=5000)


class CommentUpdate(RequestBody):
    content: str = Field(max_length=5000)


class CommentOut(BaseModel):
    id: str
    parent_type: ParentType
    parent_id: str
    user_id: str
    content: str
    created_at: datetime
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
