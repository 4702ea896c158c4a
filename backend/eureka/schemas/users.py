"""User Schemas — public profile views."""

from datetime import datetime

from pydantic import BaseModel

from eureka.core.domain_types import QuestionStatus


class PublicUser(BaseModel):
    id: str
    username: str
    email: str
    display_name: str | None = None
    bio: str | None = None
    age_group: str | None = None
    user_type: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None


class UserStats(BaseModel):
    question_count: int
    answer_count: int
    total_upvotes: int


class RecentQuestion(BaseModel):
    id: str
    theme_id: str | None = None
    title: str
    status: QuestionStatus
    created_at: datetime


class RecentAnswer(BaseModel):
    id: str
    question_id: str
    content: str
    is_selected: bool
    upvotes: int
    created_at: datetime


class UserProfile(PublicUser):
    """Public user plus activity stats and latest content."""
    stats: UserStats
    recent_questions: list[RecentQuestion]
    recent_answers: list[RecentAnswer]
