"""Question ORM — a user's question, optionally filed under a theme.

Invariants:
    - status is one of: open, answered (QuestionStatus)
    - status == answered iff exactly one answer of this question is selected
    - user_id (owner) is fixed at creation
    - tags is an ordered JSON array of strings

Design Decisions:
    - JSON column for tags: keeps order, no join table for a display-only list
    - status denormalized from the answers table: list filters by status
      without aggregating selections (kept consistent by reassign_selected_answer)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from eureka.db.base import Base
from eureka.core.domain_types import QuestionStatus, new_id


class Question(Base):
    """Question entity — owns its answers' selection state."""
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    theme_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("themes.id"), nullable=True, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=QuestionStatus.OPEN.value,
        index=True,
    )
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
