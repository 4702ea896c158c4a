"""Answer ORM — one competing answer to a question.

Invariants:
    - Always belongs to a Question (question_id FK)
    - At most one answer per question_id has is_selected = true
    - upvotes is non-negative, only ever incremented by one
    - user_id (author) is fixed at creation
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Boolean, DateTime, ForeignKey,
    CheckConstraint, Index, text,
)
from sqlalchemy.orm import Mapped, mapped_column

from eureka.db.base import Base
from eureka.core.domain_types import new_id


class Answer(Base):
    """Answer entity — candidate for its question's selected answer."""
    __tablename__ = "answers"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
        Index(
            "uq_answers_one_selected_per_question", "question_id",
            unique=True,
            postgresql_where=text("is_selected"),
            sqlite_where=text("is_selected"),
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id"), nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    source_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_selected: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
