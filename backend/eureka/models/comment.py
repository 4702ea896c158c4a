"""Comment ORM — flat comment attached to a question or an answer.

Invariants:
    - (parent_type, parent_id) references an existing row of the named table
      at creation time (checked by the comment handler, not by a FK)
    - Comments have no children; delete is permanent

Design Decisions:
    - Polymorphic pair instead of two nullable FKs: one listing query per parent,
      composite index serves it directly
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from eureka.db.base import Base
from eureka.core.domain_types import new_id


class Comment(Base):
    """Comment on a question or answer."""
    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_parent", "parent_type", "parent_id"),
        CheckConstraint(
            "parent_type IN ('question', 'answer')",
            name="parent_type",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    parent_type: Mapped[str] = mapped_column(String(20), nullable=False)
    parent_id: Mapped[str] = mapped_column(String(36), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
